from __future__ import annotations


class TranslationFormatError(ValueError):
    """Raised when a translations document cannot be parsed or has the wrong shape."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
