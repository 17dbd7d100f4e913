"""In-memory translation table.

Content is a two-level mapping ``identifier -> locale code -> text``. Entries
keep the order they had in the source document; the resolver relies on that
order when it has to pick the "first" translation of an identifier.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional, Set, Union

from pydantic import TypeAdapter, ValidationError

from .errors import TranslationFormatError

log = logging.getLogger(__name__)

LocaleMap = Dict[str, str]
Translations = Dict[str, LocaleMap]
TranslationsProvider = Callable[[], Translations]

_DOCUMENT = TypeAdapter(Translations)


def parse_document(content: Union[str, bytes], source: str | None = None) -> Translations:
    """Parse and validate a translations JSON document.

    The document must be an object of objects whose leaf values are all
    strings. Anything else raises :class:`TranslationFormatError`.
    """
    if not isinstance(content, (str, bytes, bytearray)):
        raise TranslationFormatError(
            f"expected JSON text, got {type(content).__name__}", source
        )
    try:
        return _DOCUMENT.validate_json(content, strict=True)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first.get("loc", ())) or "<document>"
        raise TranslationFormatError(f"{where}: {first['msg']}", source) from e


class TranslationStore:
    """Holds the identifier -> locale -> text table.

    ``provider`` is the source used by :meth:`load_embedded`, normally the
    generated ``get_embedded_translations`` function.
    """

    def __init__(self, provider: Optional[TranslationsProvider] = None) -> None:
        self._provider = provider
        self._translations: Translations = {}

    def load(self, content: Union[str, bytes]) -> bool:
        """Replace the table with a parsed document.

        Returns False (leaving the table empty) when the document is
        malformed or holds no identifiers. Never raises on bad input.
        """
        self._translations = {}
        try:
            self._translations = parse_document(content)
        except TranslationFormatError as e:
            log.warning("Failed to load translations: %s", e)
            return False
        if not self._translations:
            log.warning("Translations document is empty")
            return False
        log.debug("Loaded %d identifiers", len(self._translations))
        return True

    def load_file(self, path: Union[str, Path]) -> bool:
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self._translations = {}
            log.warning("Failed to read translations file %s: %s", path, e)
            return False
        return self.load(content)

    def load_embedded(self) -> None:
        if self._provider is None:
            self._translations = {}
            return
        self._translations = {
            identifier: dict(locale_map)
            for identifier, locale_map in self._provider().items()
        }
        log.debug("Loaded %d embedded identifiers", len(self._translations))

    def locale_map(self, identifier: str) -> Optional[LocaleMap]:
        return self._translations.get(identifier)

    def identifiers(self) -> Iterator[str]:
        return iter(self._translations)

    def available_locales(self) -> Set[str]:
        return {
            locale
            for locale_map in self._translations.values()
            for locale in locale_map
        }

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._translations

    def __len__(self) -> int:
        return len(self._translations)
