"""
Route: POST /scopes — Group a form's values into scopes and render their rows.
"""

import logging

from fastapi import APIRouter, HTTPException

from src.api.schemas.responses import ScopeResponse, ScopesResponse
from src.config.settings import get_settings
from src.core.errors import ContractViolationError
from src.core.use_cases.compute_scope_row import ComputeScopeRowUseCase
from src.core.use_cases.compute_scopes import ComputeScopesUseCase
from src.core.use_cases.summarize_scope import ScopeSummaryFormatter
from src.infrastructure.forms import FormPayload, InMemoryFormSource, form_from_payload
from src.infrastructure.lang import DictLangProvider
from src.infrastructure.schemes import PassportSchemeProvider

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy singleton
_row_use_case = None


def _get_row_use_case() -> ComputeScopeRowUseCase:
    """Factory — build the row presenter with concrete adapters."""
    global _row_use_case
    if _row_use_case is None:
        settings = get_settings()
        lang = DictLangProvider.from_file(settings.lang_file)
        summary = ScopeSummaryFormatter(PassportSchemeProvider(lang), lang)
        _row_use_case = ComputeScopeRowUseCase(summary, lang)
    return _row_use_case


@router.post("/scopes", response_model=ScopesResponse)
async def compute_scopes(payload: FormPayload):
    """
    Compute the scopes of a form.

    Returns, in Identity → Address → Phone → Email order:
    - the scope's primary value type and its documents
    - title/subtitle for the row
    - the ready string (empty when the scope is incomplete)
    """
    settings = get_settings()
    form = form_from_payload(payload, settings.identity_selfie_required_default)
    source = InMemoryFormSource(form)
    scopes_use_case = ComputeScopesUseCase(source)
    row_use_case = _get_row_use_case()

    try:
        source.validate_request()
        scopes = scopes_use_case.execute()
        rows = [row_use_case.execute(scope) for scope in scopes]
    except ContractViolationError as e:
        logger.error(f"Form contract violation: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return ScopesResponse(
        scopes=[
            ScopeResponse(
                type=scope.type.value,
                fields_type=scope.fields.type.value,
                documents=[d.type.value for d in scope.documents],
                selfie_required=scope.selfie_required,
                title=row.title,
                subtitle=row.subtitle,
                ready=row.ready,
                is_ready=row.is_ready,
            )
            for scope, row in zip(scopes, rows)
        ],
        warnings=scopes_use_case.warnings,
    )
