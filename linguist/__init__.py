"""Locale-aware string lookups with an embedded translation table."""

from .core.errors import TranslationFormatError
from .core.i18n import Translator, create_translator
from .core.locale_detect import DEFAULT_LOCALE, detect_system_locale
from .core.store import TranslationStore, parse_document

__all__ = [
    "DEFAULT_LOCALE",
    "TranslationFormatError",
    "TranslationStore",
    "Translator",
    "create_translator",
    "detect_system_locale",
    "parse_document",
]

__version__ = "0.1.0"
