#!/usr/bin/env python3
"""Regenerate linguist/_embedded.py from the packaged translations document."""
from __future__ import annotations

import sys
from pathlib import Path

from linguist.core.config import get_settings
from linguist.core.errors import TranslationFormatError
from linguist.core.logging_config import setup_logging
from linguist.embed import embed_file

ROOT = Path(__file__).resolve().parent.parent
SOURCE = "linguist/locales/translations.json"
OUTPUT = ROOT / "linguist" / "_embedded.py"


def main() -> int:
    setup_logging(level=get_settings().LOG_LEVEL, debug="-v" in sys.argv[1:])
    try:
        count = embed_file(ROOT / SOURCE, OUTPUT, source=SOURCE)
    except (OSError, TranslationFormatError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(f"Output: {OUTPUT}")
    print(f"Identifiers: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
