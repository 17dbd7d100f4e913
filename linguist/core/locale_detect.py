from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, Protocol

log = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

# Minimal/default platform locales carry no language information
_MINIMAL_LOCALES = {"", "C", "POSIX"}

# LOCALE_NAME_MAX_LENGTH from winnls.h
_LOCALE_NAME_MAX_LENGTH = 85


class LocaleDetector(Protocol):
    def __call__(self) -> str: ...


class EnvLocaleDetector:
    """Reads the locale from an environment variable such as ``LANG``.

    ``en_US.UTF-8`` becomes ``en-US``; unset, ``C`` and ``POSIX`` give
    ``en-US``.
    """

    def __init__(self, variable: str = "LANG", environ: Optional[Mapping[str, str]] = None) -> None:
        self.variable = variable
        self.environ = os.environ if environ is None else environ

    def __call__(self) -> str:
        value = self.environ.get(self.variable)
        if value is None:
            return DEFAULT_LOCALE

        locale = value.strip()
        # Drop codeset, "en_US.UTF-8" -> "en_US"
        locale = locale.split(".", 1)[0]
        if locale in _MINIMAL_LOCALES:
            return DEFAULT_LOCALE
        return locale.replace("_", "-", 1)


class WindowsLocaleDetector:
    """Asks Windows for the user default locale name (already ``en-US`` shaped)."""

    def __call__(self) -> str:
        try:
            import ctypes

            buffer = ctypes.create_unicode_buffer(_LOCALE_NAME_MAX_LENGTH)
            length = ctypes.windll.kernel32.GetUserDefaultLocaleName(buffer, _LOCALE_NAME_MAX_LENGTH)  # type: ignore[attr-defined]
        except (AttributeError, OSError) as e:
            log.debug("GetUserDefaultLocaleName unavailable: %s", e)
            return DEFAULT_LOCALE
        if length > 0 and buffer.value:
            return buffer.value
        return DEFAULT_LOCALE


def platform_detector(platform: Optional[str] = None, variable: str = "LANG") -> LocaleDetector:
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return WindowsLocaleDetector()
    return EnvLocaleDetector(variable)


def detect_system_locale() -> str:
    """Best guess at the current user's locale, ``en-US`` when unknown."""
    locale = platform_detector()()
    log.debug("Detected system locale %s", locale)
    return locale
