"""
Field validators and formatters used by the passport scheme tables.

Each validator is a pure predicate str -> bool; each formatter str -> str.
Business rules stay shallow here: format checks only, no cross-field logic.
"""

import re
from datetime import date

from src.infrastructure.schemes.countries import COUNTRY_NAMES

NAME_RE = re.compile(r"^[A-Za-z][A-Za-z' .\-]*$")
DATE_RE = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$")
POST_CODE_RE = re.compile(r"^[A-Za-z0-9\- ]{2,10}$")
DOCUMENT_NO_RE = re.compile(r"^[A-Za-z0-9\-]{1,24}$")

MAX_NAME_LENGTH = 255
MAX_STREET_LENGTH = 64
GENDERS = ("male", "female")


def validate_name(value: str) -> bool:
    """Latin letters, spaces, apostrophes, dots and dashes. 1-255 chars."""
    value = value.strip()
    return 0 < len(value) <= MAX_NAME_LENGTH and bool(NAME_RE.match(value))


def parse_date(value: str) -> date | None:
    """Parse DD.MM.YYYY → date, None if malformed or impossible."""
    match = DATE_RE.match(value.strip())
    if not match:
        return None
    dd, mm, yyyy = (int(g) for g in match.groups())
    try:
        return date(yyyy, mm, dd)
    except ValueError:
        return None


def validate_date(value: str) -> bool:
    return parse_date(value) is not None


def validate_gender(value: str) -> bool:
    return value in GENDERS


def validate_country(value: str) -> bool:
    return value in COUNTRY_NAMES


def format_country(value: str) -> str:
    return COUNTRY_NAMES.get(value, value)


def validate_street(value: str) -> bool:
    return 0 < len(value.strip()) <= MAX_STREET_LENGTH


def validate_city(value: str) -> bool:
    return 2 <= len(value.strip()) <= MAX_STREET_LENGTH


def validate_post_code(value: str) -> bool:
    return bool(POST_CODE_RE.match(value.strip()))


def validate_document_no(value: str) -> bool:
    return bool(DOCUMENT_NO_RE.match(value.strip()))


def format_phone(value: str) -> str:
    """'1 555 0100' → '+1 555 0100'. Keeps the user's grouping, drops other noise."""
    cleaned = re.sub(r"[^\d ]", "", value)
    cleaned = re.sub(r" +", " ", cleaned).strip()
    if not cleaned:
        return value
    return "+" + cleaned
