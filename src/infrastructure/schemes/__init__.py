from .passport_schemes import PassportSchemeProvider

__all__ = ["PassportSchemeProvider"]
