"""
Passport Scheme Provider.

Declarative field tables for each scope:
- Identity: personal details (fields) + document number (document)
- Address: street, city, country, post code (fields)
- Phone / Email: contact schemes over the "value" key

Rows are evaluated in declared order by the summary formatter.
"""

from src.core.entities.scope import ScopeType
from src.core.errors import UnknownScopeTypeError
from src.core.interfaces.lang_provider import ILangProvider, LangKey
from src.core.interfaces.scheme_provider import (
    ContactScheme,
    DocumentScheme,
    ISchemeProvider,
    SchemeRow,
    ValueClass,
)
from src.infrastructure.schemes.validators import (
    format_country,
    format_phone,
    validate_city,
    validate_country,
    validate_date,
    validate_document_no,
    validate_gender,
    validate_name,
    validate_post_code,
    validate_street,
)


class PassportSchemeProvider(ISchemeProvider):
    """
    Scheme tables for identity/address documents and contacts.

    The gender row is formatted through the lang provider, so the
    tables are built per provider instance, once.
    """

    def __init__(self, lang: ILangProvider):
        self._lang = lang
        self._document_schemes = {
            ScopeType.IDENTITY: DocumentScheme(
                scope_type=ScopeType.IDENTITY,
                rows=(
                    SchemeRow("first_name", ValueClass.FIELDS, validate_name),
                    SchemeRow("last_name", ValueClass.FIELDS, validate_name),
                    SchemeRow("birth_date", ValueClass.FIELDS, validate_date),
                    SchemeRow("gender", ValueClass.FIELDS, validate_gender, self._format_gender),
                    SchemeRow("country_code", ValueClass.FIELDS, validate_country, format_country),
                    SchemeRow("residence_country_code", ValueClass.FIELDS, validate_country, format_country),
                    SchemeRow("document_no", ValueClass.DOCUMENT, validate_document_no),
                ),
            ),
            ScopeType.ADDRESS: DocumentScheme(
                scope_type=ScopeType.ADDRESS,
                rows=(
                    SchemeRow("street_line1", ValueClass.FIELDS, validate_street),
                    SchemeRow("city", ValueClass.FIELDS, validate_city),
                    SchemeRow("country_code", ValueClass.FIELDS, validate_country, format_country),
                    SchemeRow("post_code", ValueClass.FIELDS, validate_post_code),
                ),
            ),
        }
        self._contact_schemes = {
            ScopeType.PHONE: ContactScheme(scope_type=ScopeType.PHONE, format=format_phone),
            ScopeType.EMAIL: ContactScheme(scope_type=ScopeType.EMAIL),
        }

    def document_scheme(self, scope_type: ScopeType) -> DocumentScheme:
        scheme = self._document_schemes.get(scope_type)
        if scheme is None:
            raise UnknownScopeTypeError(f"No document scheme for {scope_type!r}")
        return scheme

    def contact_scheme(self, scope_type: ScopeType) -> ContactScheme:
        scheme = self._contact_schemes.get(scope_type)
        if scheme is None:
            raise UnknownScopeTypeError(f"No contact scheme for {scope_type!r}")
        return scheme

    def _format_gender(self, value: str) -> str:
        if value == "male":
            return self._lang.lang(LangKey.GENDER_MALE)
        if value == "female":
            return self._lang.lang(LangKey.GENDER_FEMALE)
        return value
