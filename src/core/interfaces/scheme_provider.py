"""
Contract: Scheme Provider

Tabelas declarativas de campos por categoria de escopo.
Cada linha diz qual chave ler, de onde (campos primários ou documento),
como validar e como formatar.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from src.core.entities.scope import ScopeType

Validator = Callable[[str], bool]
Formatter = Callable[[str], str]


class ValueClass(str, Enum):
    FIELDS = "fields"        # campos do valor primário
    DOCUMENT = "document"    # campos do documento representativo


@dataclass(frozen=True)
class SchemeRow:
    """Uma regra: extrai, valida e formata um campo."""
    key: str
    value_class: ValueClass = ValueClass.FIELDS
    validate: Optional[Validator] = None
    format: Optional[Formatter] = None


@dataclass(frozen=True)
class DocumentScheme:
    """Esquema de escopos com documento (Identity, Address)."""
    scope_type: ScopeType
    rows: tuple[SchemeRow, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ContactScheme:
    """Esquema de escopos de contato (Phone, Email): só a chave "value"."""
    scope_type: ScopeType
    format: Optional[Formatter] = None


class ISchemeProvider(ABC):
    """
    Port: Scheme Provider

    Fornece as tabelas de campos por escopo. Pedir um esquema para
    um escopo sem tabela é violação de contrato (UnknownScopeTypeError).
    """

    @abstractmethod
    def document_scheme(self, scope_type: ScopeType) -> DocumentScheme:
        ...

    @abstractmethod
    def contact_scheme(self, scope_type: ScopeType) -> ContactScheme:
        ...
