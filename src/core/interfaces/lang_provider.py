"""
Contract: Lang Provider

Strings localizadas para títulos, subtítulos e rótulos de documento.
"""

from abc import ABC, abstractmethod
from enum import Enum


class LangKey(str, Enum):
    PERSONAL_DETAILS = "passport_personal_details"
    PERSONAL_DETAILS_ENTER = "passport_personal_details_enter"
    IDENTITY_TITLE = "passport_identity_title"
    IDENTITY_DESCRIPTION = "passport_identity_description"
    IDENTITY_PASSPORT = "passport_identity_passport"
    IDENTITY_PASSPORT_UPLOAD = "passport_identity_passport_upload"
    IDENTITY_CARD = "passport_identity_card"
    IDENTITY_CARD_UPLOAD = "passport_identity_card_upload"
    IDENTITY_LICENSE = "passport_identity_license"
    IDENTITY_LICENSE_UPLOAD = "passport_identity_license_upload"
    ADDRESS = "passport_address"
    ADDRESS_ENTER = "passport_address_enter"
    ADDRESS_TITLE = "passport_address_title"
    ADDRESS_DESCRIPTION = "passport_address_description"
    ADDRESS_STATEMENT = "passport_address_statement"
    ADDRESS_STATEMENT_UPLOAD = "passport_address_statement_upload"
    ADDRESS_BILL = "passport_address_bill"
    ADDRESS_BILL_UPLOAD = "passport_address_bill_upload"
    ADDRESS_AGREEMENT = "passport_address_agreement"
    ADDRESS_AGREEMENT_UPLOAD = "passport_address_agreement_upload"
    PHONE_TITLE = "passport_phone_title"
    PHONE_DESCRIPTION = "passport_phone_description"
    EMAIL_TITLE = "passport_email_title"
    EMAIL_DESCRIPTION = "passport_email_description"
    GENDER_MALE = "passport_gender_male"
    GENDER_FEMALE = "passport_gender_female"


class ILangProvider(ABC):
    """
    Port: Lang Provider

    Qualquer fonte de traduções (tabela em memória, arquivo, serviço)
    deve implementar este contrato.
    """

    @abstractmethod
    def lang(self, key: LangKey) -> str:
        """Retorna a string localizada para a chave."""
        ...
