"""
Adapter: Dict Lang Provider

English strings in memory, optionally overridden from a JSON file
({"passport_identity_passport": "Reisepass", ...}).
"""

import json
import logging
from pathlib import Path

from src.core.interfaces.lang_provider import ILangProvider, LangKey

logger = logging.getLogger(__name__)

DEFAULT_STRINGS = {
    LangKey.PERSONAL_DETAILS: "Personal details",
    LangKey.PERSONAL_DETAILS_ENTER: "Enter your personal details",
    LangKey.IDENTITY_TITLE: "Identity document",
    LangKey.IDENTITY_DESCRIPTION: "Upload a scan of your passport or other ID",
    LangKey.IDENTITY_PASSPORT: "Passport",
    LangKey.IDENTITY_PASSPORT_UPLOAD: "Upload a scan of your passport",
    LangKey.IDENTITY_CARD: "Identity card",
    LangKey.IDENTITY_CARD_UPLOAD: "Upload a scan of your identity card",
    LangKey.IDENTITY_LICENSE: "Driver's license",
    LangKey.IDENTITY_LICENSE_UPLOAD: "Upload a scan of your driver's license",
    LangKey.ADDRESS: "Address",
    LangKey.ADDRESS_ENTER: "Enter your home address",
    LangKey.ADDRESS_TITLE: "Residential address",
    LangKey.ADDRESS_DESCRIPTION: "Upload a proof of your address",
    LangKey.ADDRESS_STATEMENT: "Bank statement",
    LangKey.ADDRESS_STATEMENT_UPLOAD: "Upload a scan of your bank statement",
    LangKey.ADDRESS_BILL: "Utility bill",
    LangKey.ADDRESS_BILL_UPLOAD: "Upload a scan of your utility bill",
    LangKey.ADDRESS_AGREEMENT: "Tenancy agreement",
    LangKey.ADDRESS_AGREEMENT_UPLOAD: "Upload a scan of your tenancy agreement",
    LangKey.PHONE_TITLE: "Phone number",
    LangKey.PHONE_DESCRIPTION: "Enter your phone number",
    LangKey.EMAIL_TITLE: "Email",
    LangKey.EMAIL_DESCRIPTION: "Enter your email address",
    LangKey.GENDER_MALE: "Male",
    LangKey.GENDER_FEMALE: "Female",
}


class DictLangProvider(ILangProvider):
    """Lookup table with per-key overrides. Unknown keys fall back to the key name."""

    def __init__(self, overrides: dict[str, str] | None = None):
        self._strings: dict[str, str] = {k.value: v for k, v in DEFAULT_STRINGS.items()}
        if overrides:
            self._strings.update(overrides)
        self._missing: set[str] = set()

    @classmethod
    def from_file(cls, path: str | Path | None) -> "DictLangProvider":
        """Build from an optional JSON overrides file. No path → defaults only."""
        if not path:
            return cls()
        path = Path(path)
        overrides = json.loads(path.read_text(encoding="utf-8"))
        logger.info(f"Loaded {len(overrides)} lang overrides from {path.name}")
        return cls(overrides)

    def lang(self, key: LangKey) -> str:
        name = key.value if isinstance(key, LangKey) else str(key)
        text = self._strings.get(name)
        if text is None:
            if name not in self._missing:
                self._missing.add(name)
                logger.warning(f"Missing lang string: {name}")
            return name
        return text
