"""
Use Case: Compute Scopes

Agrupa a lista ordenada de valores pedidos pelo formulário em escopos
(Identity, Address, Phone, Email). Roda uma vez por carga de formulário.
"""

import logging

from src.core.entities.category_map import (
    fields_type_for_scope_type,
    scope_rank,
    scope_type_for_value_type,
)
from src.core.entities.scope import Scope, ScopeType
from src.core.entities.value import ValueType
from src.core.interfaces.form_source import IFormSource

logger = logging.getLogger(__name__)


class ComputeScopesUseCase:
    """
    Use Case: request do formulário → lista de Scope ordenada.

    Regras:
        1. Cada categoria pedida cai no escopo do mapa de categorias.
        2. O escopo é criado ancorado no valor primário da sua categoria.
        3. O valor primário não entra em `documents`.
        4. Categoria repetida: warning, a primeira ocorrência vence.

    Saída sempre na ordem Identity, Address, Phone, Email.
    """

    def __init__(self, form_source: IFormSource):
        self._form = form_source
        self.warnings: list[str] = []

    def execute(self) -> list[Scope]:
        self.warnings = []
        scopes: dict[ScopeType, Scope] = {}
        selfie_required = self._form.identity_selfie_required()

        for value_type in self._form.request():
            scope_type = scope_type_for_value_type(value_type)
            fields_type = fields_type_for_scope_type(scope_type)

            scope = scopes.get(scope_type)
            if scope is None:
                scope = Scope(
                    type=scope_type,
                    fields=self._form.find_value(fields_type),
                )
                scopes[scope_type] = scope
            scope.selfie_required = (
                scope_type == ScopeType.IDENTITY and selfie_required
            )

            if value_type == fields_type:
                continue
            if any(d.type == value_type for d in scope.documents):
                self._report_duplicate(value_type)
                continue
            scope.documents.append(self._form.find_value(value_type))

        return [scopes[t] for t in sorted(scopes, key=scope_rank)]

    def _report_duplicate(self, value_type: ValueType) -> None:
        message = f"API Error: value type {value_type.value} multiple times in request."
        logger.warning(message)
        self.warnings.append(message)
