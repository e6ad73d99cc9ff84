"""
Use Case: Summarize Scope

Calcula a string de resumo ("ready string") de um escopo percorrendo
a tabela de campos da sua categoria. String vazia = incompleto.
Função pura: não altera Scope nem Value, não guarda estado entre chamadas.
"""

from src.core.entities.scope import Scope, ScopeType
from src.core.entities.value import Value, ValueType
from src.core.errors import UnexpectedValueTypeError, UnknownScopeTypeError
from src.core.interfaces.lang_provider import ILangProvider, LangKey
from src.core.interfaces.scheme_provider import ISchemeProvider, SchemeRow, ValueClass

CONTACT_VALUE_KEY = "value"

DOCUMENT_LABELS = {
    ValueType.PASSPORT: LangKey.IDENTITY_PASSPORT,
    ValueType.DRIVER_LICENSE: LangKey.IDENTITY_LICENSE,
    ValueType.IDENTITY_CARD: LangKey.IDENTITY_CARD,
    ValueType.BANK_STATEMENT: LangKey.ADDRESS_STATEMENT,
    ValueType.UTILITY_BILL: LangKey.ADDRESS_BILL,
    ValueType.RENTAL_AGREEMENT: LangKey.ADDRESS_AGREEMENT,
}


class ScopeSummaryFormatter:
    """
    Summary Formatter.

    Identity/Address: documento representativo (primeiro com scan) +
    campos do esquema, unidos por ", ". Qualquer campo ausente ou
    inválido torna o resumo vazio: não existe resumo parcial.
    Phone/Email: a chave "value" do valor primário, formatada.
    """

    SEPARATOR = ", "

    def __init__(self, schemes: ISchemeProvider, lang: ILangProvider):
        self._schemes = schemes
        self._lang = lang

    def execute(self, scope: Scope) -> str:
        if scope.type in (ScopeType.IDENTITY, ScopeType.ADDRESS):
            return self._document_summary(scope)
        if scope.type in (ScopeType.PHONE, ScopeType.EMAIL):
            return self._contact_summary(scope)
        raise UnknownScopeTypeError(f"Scope type {scope.type!r} in summary")

    def document_label(self, value_type: ValueType) -> str:
        key = DOCUMENT_LABELS.get(value_type)
        if key is None:
            raise UnexpectedValueTypeError(f"Files type {value_type!r} in summary")
        return self._lang.lang(key)

    @staticmethod
    def representative_document(scope: Scope) -> Value | None:
        """Primeiro documento com pelo menos um scan."""
        for document in scope.documents:
            if document.scans:
                return document
        return None

    # ─── Internos ───────────────────────────────────────────

    def _document_summary(self, scope: Scope) -> str:
        result: list[str] = []
        document = self.representative_document(scope)
        if document is not None and len(scope.documents) > 1:
            result.append(self.document_label(document.type))
        if document is not None and (
            not document.scans or (scope.selfie_required and document.selfie is None)
        ):
            return ""

        for row in self._schemes.document_scheme(scope.type).rows:
            if row.value_class == ValueClass.FIELDS:
                source = scope.fields
            elif document is None:
                return ""
            else:
                source = document
            value = self._read_row(row, source)
            if value is None:
                return ""
            result.append(value)
        return self.SEPARATOR.join(result)

    def _contact_summary(self, scope: Scope) -> str:
        value = scope.fields.fields.get(CONTACT_VALUE_KEY)
        if value is None:
            return ""
        fmt = self._schemes.contact_scheme(scope.type).format
        return fmt(value) if fmt else value

    @staticmethod
    def _read_row(row: SchemeRow, source: Value) -> str | None:
        """Valor formatado, ou None se ausente/inválido."""
        value = source.fields.get(row.key)
        if value is None:
            return None
        if row.validate is not None and not row.validate(value):
            return None
        return row.format(value) if row.format else value
