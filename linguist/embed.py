"""Build-time tool to generate embedded translation data from JSON.

Usage::

    linguist-embed <input.json> <output.py>

The output module defines ``get_embedded_translations()`` returning the
document as a nested dict literal, in document order.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from .core.config import get_settings
from .core.errors import TranslationFormatError
from .core.logging_config import setup_logging
from .core.store import Translations, parse_document

log = logging.getLogger(__name__)

INDENT = "    "


def _literal(text: str) -> str:
    # A JSON string is a valid double-quoted Python literal: '"' -> '\"'
    return json.dumps(text, ensure_ascii=False)


def render_module(translations: Translations, source: str) -> str:
    lines = [
        "#",
        "# Generated file - DO NOT EDIT",
        f"# Generated from: {source}",
        "#",
        "",
        "from typing import Dict",
        "",
        "",
        "def get_embedded_translations() -> Dict[str, Dict[str, str]]:",
        f"{INDENT}return {{",
    ]
    for identifier, locale_map in translations.items():
        lines.append(f"{INDENT * 2}{_literal(identifier)}: {{")
        for locale, text in locale_map.items():
            lines.append(f"{INDENT * 3}{_literal(locale)}: {_literal(text)},")
        lines.append(f"{INDENT * 2}}},")
    lines.append(f"{INDENT}}}")
    return "\n".join(lines) + "\n"


def embed_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    source: Optional[str] = None,
) -> int:
    """Generate ``output_path`` from ``input_path``; returns the identifier count.

    Raises ``OSError`` when the input cannot be read and
    :class:`TranslationFormatError` when it is not a translations document.
    The output file is only opened once the input has been validated.
    ``source`` overrides the input path named in the header comment.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    content = input_path.read_text(encoding="utf-8")
    translations = parse_document(content, source=str(input_path))

    output_path.write_text(render_module(translations, source or str(input_path)), encoding="utf-8")
    log.debug("Embedded %d identifiers into %s", len(translations), output_path)
    return len(translations)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: linguist-embed <input.json> <output.py>", file=sys.stderr)
        return 1

    input_file, output_file = args
    setup_logging(level=get_settings().LOG_LEVEL)

    if not Path(input_file).is_file():
        print(f"Error: Cannot open input file: {input_file}", file=sys.stderr)
        return 1

    try:
        embed_file(input_file, output_file)
    except (OSError, TranslationFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Generated {output_file} from {input_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
