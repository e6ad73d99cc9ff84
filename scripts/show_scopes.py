"""
Show the scope rows for a form JSON file.

Usage:
    python scripts/show_scopes.py [data/forms/sample_form.json]
"""
import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config.settings import get_settings
from src.core.use_cases.compute_scope_row import ComputeScopeRowUseCase
from src.core.use_cases.compute_scopes import ComputeScopesUseCase
from src.core.use_cases.summarize_scope import ScopeSummaryFormatter
from src.infrastructure.forms import InMemoryFormSource, load_form_file
from src.infrastructure.lang import DictLangProvider
from src.infrastructure.schemes import PassportSchemeProvider


def main():
    parser = argparse.ArgumentParser(description="Print scope rows for a form")
    parser.add_argument("form", nargs="?", default="data/forms/sample_form.json")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  Passport Scopes")
    print("=" * 60)

    form = load_form_file(args.form, settings.identity_selfie_required_default)
    source = InMemoryFormSource(form)
    source.validate_request()

    lang = DictLangProvider.from_file(settings.lang_file)
    summary = ScopeSummaryFormatter(PassportSchemeProvider(lang), lang)
    rows = ComputeScopeRowUseCase(summary, lang)
    use_case = ComputeScopesUseCase(source)
    scopes = use_case.execute()

    print(f"  Form: {args.form}")
    print(f"  Requested: {len(form.request)} | Scopes: {len(scopes)} | Warnings: {len(use_case.warnings)}")
    print("-" * 60)

    for scope in scopes:
        row = rows.execute(scope)
        docs = ", ".join(d.type.value for d in scope.documents) or "-"
        status = "READY" if row.is_ready else "INCOMPLETE"
        print(f"  [{scope.type.value}] {row.title} | {row.subtitle}")
        print(f"      documents: {docs} | selfie required: {scope.selfie_required}")
        print(f"      {status}: {row.ready or '(empty)'}")

    if use_case.warnings:
        print("-" * 60)
        for warning in use_case.warnings:
            print(f"  ! {warning}")


if __name__ == "__main__":
    main()
