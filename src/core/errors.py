"""
Erros de contrato do core.

Indicam formulário/esquema inconsistente (erro de programação), nunca
erro de entrada do usuário. Não são tratados dentro do core.
"""


class ContractViolationError(Exception):
    """Base para violações de contrato entre o formulário e o core."""


class UnknownValueTypeError(ContractViolationError):
    """Categoria de valor fora do mapa de categorias."""


class UnknownScopeTypeError(ContractViolationError):
    """Categoria de escopo sem caso correspondente."""


class ValueNotFoundError(ContractViolationError):
    """Categoria pedida no formulário sem valor resolvido."""


class UnexpectedValueTypeError(ContractViolationError):
    """Documento de categoria inesperada para o escopo."""
