"""
Entity: Value

Um valor enviado pelo formulário — documento (passaporte, conta de luz...)
ou um pacote simples de campos (dados pessoais, endereço, telefone, email).
Modelo puro — sem dependência de framework.
"""

from dataclasses import dataclass, field
from enum import Enum


class ValueType(str, Enum):
    PERSONAL_DETAILS = "PersonalDetails"
    PASSPORT = "Passport"
    DRIVER_LICENSE = "DriverLicense"
    IDENTITY_CARD = "IdentityCard"
    ADDRESS = "Address"
    UTILITY_BILL = "UtilityBill"
    BANK_STATEMENT = "BankStatement"
    RENTAL_AGREEMENT = "RentalAgreement"
    PHONE = "Phone"
    EMAIL = "Email"


@dataclass
class FileRef:
    """Arquivo anexado (scan ou selfie) — só a referência, nunca o conteúdo."""
    id: str
    name: str = ""
    size: int = 0


@dataclass(eq=False)
class Value:
    """
    Entidade de domínio: Value.

    Pertence à fonte de dados do formulário; o core só lê.
    eq=False: duas instâncias são o mesmo valor só se forem o mesmo objeto.
    """
    type: ValueType
    fields: dict[str, str] = field(default_factory=dict)
    scans: list[FileRef] = field(default_factory=list)
    selfie: FileRef | None = None


@dataclass
class Form:
    """Formulário: lista ordenada pedida + valores resolvidos."""
    request: list[ValueType] = field(default_factory=list)
    values: dict[ValueType, Value] = field(default_factory=dict)
    identity_selfie_required: bool = False
