"""
Entity: Scope

Unidade de agrupamento mostrada como uma linha na UI:
um valor primário (campos base) + zero ou mais documentos.
"""

from dataclasses import dataclass, field
from enum import Enum

from src.core.entities.value import Value


class ScopeType(str, Enum):
    IDENTITY = "Identity"
    ADDRESS = "Address"
    PHONE = "Phone"
    EMAIL = "Email"


@dataclass
class Scope:
    """
    Entidade de domínio: Scope.

    `fields` e `documents` são referências emprestadas aos Values do
    formulário, nunca cópias. `documents` não repete categoria.
    """
    type: ScopeType
    fields: Value
    documents: list[Value] = field(default_factory=list)
    selfie_required: bool = False


@dataclass(frozen=True)
class ScopeRow:
    """Linha derivada para a UI. Recalculada sob demanda."""
    title: str
    subtitle: str
    ready: str = ""

    @property
    def is_ready(self) -> bool:
        return self.ready != ""
