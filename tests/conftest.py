import pytest

from src.core.entities.value import FileRef, Form, Value, ValueType
from src.core.use_cases.compute_scope_row import ComputeScopeRowUseCase
from src.core.use_cases.compute_scopes import ComputeScopesUseCase
from src.core.use_cases.summarize_scope import ScopeSummaryFormatter
from src.infrastructure.forms import InMemoryFormSource
from src.infrastructure.lang import DictLangProvider
from src.infrastructure.schemes import PassportSchemeProvider

PERSONAL_FIELDS = {
    "first_name": "Maria",
    "last_name": "Silva",
    "birth_date": "10.05.1988",
    "gender": "female",
    "country_code": "BR",
    "residence_country_code": "PT",
}

ADDRESS_FIELDS = {
    "street_line1": "Rua Augusta 100",
    "city": "Lisboa",
    "country_code": "PT",
    "post_code": "1100-053",
}


def scan(n: int = 1) -> FileRef:
    return FileRef(id=f"scan-{n:03d}", name=f"scan_{n}.jpg", size=1024)


def selfie() -> FileRef:
    return FileRef(id="selfie-001", name="selfie.jpg", size=2048)


@pytest.fixture
def lang():
    return DictLangProvider()


@pytest.fixture
def schemes(lang):
    return PassportSchemeProvider(lang)


@pytest.fixture
def summary(schemes, lang):
    return ScopeSummaryFormatter(schemes, lang)


@pytest.fixture
def row_presenter(summary, lang):
    return ComputeScopeRowUseCase(summary, lang)


@pytest.fixture
def values():
    """One Value per category, fully filled, documents without scans."""
    return {
        ValueType.PERSONAL_DETAILS: Value(ValueType.PERSONAL_DETAILS, dict(PERSONAL_FIELDS)),
        ValueType.PASSPORT: Value(ValueType.PASSPORT, {"document_no": "BR1234567"}),
        ValueType.DRIVER_LICENSE: Value(ValueType.DRIVER_LICENSE, {"document_no": "DL-99881"}),
        ValueType.IDENTITY_CARD: Value(ValueType.IDENTITY_CARD, {"document_no": "ID778899"}),
        ValueType.ADDRESS: Value(ValueType.ADDRESS, dict(ADDRESS_FIELDS)),
        ValueType.UTILITY_BILL: Value(ValueType.UTILITY_BILL),
        ValueType.BANK_STATEMENT: Value(ValueType.BANK_STATEMENT),
        ValueType.RENTAL_AGREEMENT: Value(ValueType.RENTAL_AGREEMENT),
        ValueType.PHONE: Value(ValueType.PHONE, {"value": "+1 555 0100"}),
        ValueType.EMAIL: Value(ValueType.EMAIL, {"value": "maria@example.com"}),
    }


@pytest.fixture
def build_scopes(values):
    """build_scopes([ValueType...], selfie_required=False) -> (scopes, use_case)"""

    def _build(request, selfie_required=False):
        form = Form(request=list(request), values=values, identity_selfie_required=selfie_required)
        use_case = ComputeScopesUseCase(InMemoryFormSource(form))
        return use_case.execute(), use_case

    return _build
