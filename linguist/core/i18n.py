from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set, Union

from .config import Settings, get_settings
from .locale_detect import LocaleDetector, detect_system_locale, platform_detector
from .store import TranslationStore


log = logging.getLogger(__name__)


def _embedded_store() -> TranslationStore:
    from .._embedded import get_embedded_translations

    store = TranslationStore(provider=get_embedded_translations)
    store.load_embedded()
    return store


class Translator:
    """Locale-aware lookups over a :class:`TranslationStore`.

    Without an explicit store the translator starts from the embedded table,
    and without an explicit locale it asks ``detector`` for the system one.
    """

    def __init__(
        self,
        store: Optional[TranslationStore] = None,
        locale: Optional[str] = None,
        detector: LocaleDetector = detect_system_locale,
    ) -> None:
        self._store = store if store is not None else _embedded_store()
        self._locale = locale if locale is not None else detector()

    @property
    def store(self) -> TranslationStore:
        return self._store

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._locale = value

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def get_locale(self) -> str:
        return self._locale

    def load(self, content: Union[str, bytes]) -> bool:
        return self._store.load(content)

    def load_file(self, path: Union[str, Path]) -> bool:
        return self._store.load_file(path)

    def translate(self, identifier: str, fallback: Optional[str] = None) -> Optional[str]:
        """Translate ``identifier`` into the current locale.

        Lookup order: exact locale, then the first stored locale starting
        with the base language (``en`` for ``en-US``), then the first stored
        translation of any locale. Returns ``fallback`` when nothing matches.
        """
        locale_map = self._store.locale_map(identifier)
        if locale_map is None:
            return fallback

        text = locale_map.get(self._locale)
        if text is not None:
            return text

        base, sep, _ = self._locale.partition("-")
        if sep:
            # Plain prefix test: base "en" also matches a code like "english"
            for code, text in locale_map.items():
                if code.startswith(base):
                    return text

        if locale_map:
            return next(iter(locale_map.values()))

        return fallback

    def translate_for_locale(self, identifier: str, locale: str) -> Optional[str]:
        """Exact lookup, no base-language or first-entry fallback."""
        locale_map = self._store.locale_map(identifier)
        if locale_map is None:
            return None
        return locale_map.get(locale)

    def has_translation(self, identifier: str) -> bool:
        return self.translate(identifier) is not None

    def available_locales(self) -> Set[str]:
        return self._store.available_locales()


def create_translator(config: Optional[Settings] = None) -> Translator:
    """Build a translator from application settings."""
    if config is None:
        config = get_settings()

    detector = platform_detector(variable=config.LINGUIST_LOCALE_ENV)
    locale = config.LINGUIST_LOCALE

    if config.LINGUIST_TRANSLATIONS_FILE is not None:
        store = TranslationStore()
        if not store.load_file(config.LINGUIST_TRANSLATIONS_FILE):
            log.error("No translations loaded from %s", config.LINGUIST_TRANSLATIONS_FILE)
        translator = Translator(store=store, locale=locale, detector=detector)
    else:
        translator = Translator(locale=locale, detector=detector)

    log.info("Translator ready (locale=%s, identifiers=%d)", translator.locale, len(translator.store))
    return translator
