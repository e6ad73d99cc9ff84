"""
Contract: Form Source

Fonte de dados do formulário. Dona dos Values durante a sessão;
o core só lê o que ela devolve.
"""

from abc import ABC, abstractmethod

from src.core.entities.value import Value, ValueType


class IFormSource(ABC):
    """
    Port: Form Source

    Fornece a lista ordenada de categorias pedidas, o lookup
    categoria → Value e a flag global de selfie obrigatória.
    """

    @abstractmethod
    def request(self) -> list[ValueType]:
        """Categorias pedidas, na ordem do formulário."""
        ...

    @abstractmethod
    def find_value(self, value_type: ValueType) -> Value:
        """
        Retorna o Value da categoria.

        Raises:
            ValueNotFoundError: categoria sem valor (violação de contrato).
        """
        ...

    @abstractmethod
    def identity_selfie_required(self) -> bool:
        ...
