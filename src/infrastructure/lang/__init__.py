from .dict_lang_provider import DEFAULT_STRINGS, DictLangProvider

__all__ = ["DEFAULT_STRINGS", "DictLangProvider"]
