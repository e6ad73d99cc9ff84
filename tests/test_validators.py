from datetime import date

import pytest

from src.core.entities.scope import ScopeType
from src.core.errors import UnknownScopeTypeError
from src.infrastructure.schemes.validators import (
    format_country,
    format_phone,
    parse_date,
    validate_city,
    validate_country,
    validate_document_no,
    validate_gender,
    validate_name,
    validate_post_code,
    validate_street,
)


def test_parse_date():
    assert parse_date("10.05.1988") == date(1988, 5, 10)
    assert parse_date("29.02.2001") is None
    assert parse_date("1988-05-10") is None
    assert parse_date("") is None


@pytest.mark.parametrize("value,ok", [
    ("Maria", True),
    ("O'Neil", True),
    ("Anne-Marie", True),
    ("", False),
    ("   ", False),
    ("M4ria", False),
    ("x" * 256, False),
])
def test_validate_name(value, ok):
    assert validate_name(value) is ok


def test_validate_gender():
    assert validate_gender("male")
    assert validate_gender("female")
    assert not validate_gender("Male")


def test_country():
    assert validate_country("PT")
    assert not validate_country("PRT")
    assert format_country("BR") == "Brazil"
    assert format_country("ZZ") == "ZZ"


def test_address_parts():
    assert validate_street("Rua Augusta 100")
    assert not validate_street("")
    assert validate_city("Porto")
    assert not validate_city("P")
    assert validate_post_code("1100-053")
    assert validate_post_code("SW1A 1AA")
    assert not validate_post_code("1")
    assert not validate_post_code("12345678901")


def test_document_no():
    assert validate_document_no("BR1234567")
    assert not validate_document_no("")
    assert not validate_document_no("12.345.678-9")


def test_format_phone():
    assert format_phone("+1 555 0100") == "+1 555 0100"
    assert format_phone("351  912-345-678") == "+351 912345678"
    assert format_phone("---") == "---"


def test_scheme_provider_rejects_unknown_scopes(schemes):
    with pytest.raises(UnknownScopeTypeError):
        schemes.document_scheme(ScopeType.PHONE)
    with pytest.raises(UnknownScopeTypeError):
        schemes.contact_scheme(ScopeType.IDENTITY)


def test_identity_scheme_row_order(schemes):
    keys = [row.key for row in schemes.document_scheme(ScopeType.IDENTITY).rows]
    assert keys == [
        "first_name", "last_name", "birth_date", "gender",
        "country_code", "residence_country_code", "document_no",
    ]
