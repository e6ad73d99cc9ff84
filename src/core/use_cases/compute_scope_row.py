"""
Use Case: Compute Scope Row

Escolhe título/subtítulo de um escopo conforme a categoria e a
quantidade/tipo de documentos, e anexa o resumo do Summary Formatter.
"""

from src.core.entities.scope import Scope, ScopeRow, ScopeType
from src.core.entities.value import ValueType
from src.core.errors import UnexpectedValueTypeError, UnknownScopeTypeError
from src.core.interfaces.lang_provider import ILangProvider, LangKey
from src.core.use_cases.summarize_scope import ScopeSummaryFormatter

# (sem documentos, um documento por tipo, vários documentos)
IDENTITY_EMPTY = (LangKey.PERSONAL_DETAILS, LangKey.PERSONAL_DETAILS_ENTER)
IDENTITY_SINGLE = {
    ValueType.PASSPORT: (LangKey.IDENTITY_PASSPORT, LangKey.IDENTITY_PASSPORT_UPLOAD),
    ValueType.IDENTITY_CARD: (LangKey.IDENTITY_CARD, LangKey.IDENTITY_CARD_UPLOAD),
    ValueType.DRIVER_LICENSE: (LangKey.IDENTITY_LICENSE, LangKey.IDENTITY_LICENSE_UPLOAD),
}
IDENTITY_MULTIPLE = (LangKey.IDENTITY_TITLE, LangKey.IDENTITY_DESCRIPTION)

ADDRESS_EMPTY = (LangKey.ADDRESS, LangKey.ADDRESS_ENTER)
ADDRESS_SINGLE = {
    ValueType.BANK_STATEMENT: (LangKey.ADDRESS_STATEMENT, LangKey.ADDRESS_STATEMENT_UPLOAD),
    ValueType.UTILITY_BILL: (LangKey.ADDRESS_BILL, LangKey.ADDRESS_BILL_UPLOAD),
    ValueType.RENTAL_AGREEMENT: (LangKey.ADDRESS_AGREEMENT, LangKey.ADDRESS_AGREEMENT_UPLOAD),
}
ADDRESS_MULTIPLE = (LangKey.ADDRESS_TITLE, LangKey.ADDRESS_DESCRIPTION)

PHONE_KEYS = (LangKey.PHONE_TITLE, LangKey.PHONE_DESCRIPTION)
EMAIL_KEYS = (LangKey.EMAIL_TITLE, LangKey.EMAIL_DESCRIPTION)


class ComputeScopeRowUseCase:
    """
    Row Presenter.

    O resumo vem sempre do ScopeSummaryFormatter injetado;
    este use case nunca calcula o resumo por conta própria.
    """

    def __init__(self, summary: ScopeSummaryFormatter, lang: ILangProvider):
        self._summary = summary
        self._lang = lang

    def execute(self, scope: Scope) -> ScopeRow:
        title_key, subtitle_key = self._keys_for(scope)
        return ScopeRow(
            title=self._lang.lang(title_key),
            subtitle=self._lang.lang(subtitle_key),
            ready=self._summary.execute(scope),
        )

    def _keys_for(self, scope: Scope) -> tuple[LangKey, LangKey]:
        if scope.type == ScopeType.IDENTITY:
            return self._document_keys(
                scope, IDENTITY_EMPTY, IDENTITY_SINGLE, IDENTITY_MULTIPLE, "Identity"
            )
        if scope.type == ScopeType.ADDRESS:
            return self._document_keys(
                scope, ADDRESS_EMPTY, ADDRESS_SINGLE, ADDRESS_MULTIPLE, "Address"
            )
        if scope.type == ScopeType.PHONE:
            return PHONE_KEYS
        if scope.type == ScopeType.EMAIL:
            return EMAIL_KEYS
        raise UnknownScopeTypeError(f"Scope type {scope.type!r} in row")

    @staticmethod
    def _document_keys(scope: Scope, empty, single, multiple, kind: str):
        if not scope.documents:
            return empty
        if len(scope.documents) == 1:
            document_type = scope.documents[0].type
            if document_type not in single:
                raise UnexpectedValueTypeError(f"{kind} type {document_type!r} in row")
            return single[document_type]
        return multiple
