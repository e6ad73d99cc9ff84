"""
Category Map

Mapa estático entre categoria de valor e categoria de escopo, e entre
escopo e o valor primário ("campos base") que o ancora.
Calculado uma vez por processo.
"""

from functools import lru_cache

from src.core.entities.scope import ScopeType
from src.core.entities.value import ValueType
from src.core.errors import UnknownScopeTypeError, UnknownValueTypeError

# Ordem fixa dos escopos na saída, independente da ordem do Enum.
SCOPE_ORDER = (
    ScopeType.IDENTITY,
    ScopeType.ADDRESS,
    ScopeType.PHONE,
    ScopeType.EMAIL,
)

DOCUMENT_TYPES = frozenset({
    ValueType.PASSPORT,
    ValueType.DRIVER_LICENSE,
    ValueType.IDENTITY_CARD,
    ValueType.UTILITY_BILL,
    ValueType.BANK_STATEMENT,
    ValueType.RENTAL_AGREEMENT,
})


@lru_cache
def _scope_types_map() -> dict[ValueType, ScopeType]:
    return {
        ValueType.PERSONAL_DETAILS: ScopeType.IDENTITY,
        ValueType.PASSPORT: ScopeType.IDENTITY,
        ValueType.DRIVER_LICENSE: ScopeType.IDENTITY,
        ValueType.IDENTITY_CARD: ScopeType.IDENTITY,
        ValueType.ADDRESS: ScopeType.ADDRESS,
        ValueType.UTILITY_BILL: ScopeType.ADDRESS,
        ValueType.BANK_STATEMENT: ScopeType.ADDRESS,
        ValueType.RENTAL_AGREEMENT: ScopeType.ADDRESS,
        ValueType.PHONE: ScopeType.PHONE,
        ValueType.EMAIL: ScopeType.EMAIL,
    }


@lru_cache
def _fields_types_map() -> dict[ScopeType, ValueType]:
    return {
        ScopeType.IDENTITY: ValueType.PERSONAL_DETAILS,
        ScopeType.ADDRESS: ValueType.ADDRESS,
        ScopeType.PHONE: ValueType.PHONE,
        ScopeType.EMAIL: ValueType.EMAIL,
    }


def scope_type_for_value_type(value_type: ValueType) -> ScopeType:
    """Escopo ao qual a categoria de valor pertence."""
    try:
        return _scope_types_map()[value_type]
    except KeyError:
        raise UnknownValueTypeError(f"Value type {value_type!r} has no scope") from None


def fields_type_for_scope_type(scope_type: ScopeType) -> ValueType:
    """Categoria do valor primário que ancora o escopo."""
    try:
        return _fields_types_map()[scope_type]
    except KeyError:
        raise UnknownScopeTypeError(f"Scope type {scope_type!r} has no fields type") from None


def scope_rank(scope_type: ScopeType) -> int:
    try:
        return SCOPE_ORDER.index(scope_type)
    except ValueError:
        raise UnknownScopeTypeError(f"Scope type {scope_type!r} has no rank") from None


def is_document_type(value_type: ValueType) -> bool:
    return value_type in DOCUMENT_TYPES
