"""Domain-level error definitions."""

from __future__ import annotations


class InvalidContentError(ValueError):
    """Raised when a web content value cannot be interpreted for its type."""

    def __init__(self, message: str, *, content_type: str, value: str) -> None:
        super().__init__(message)
        self.content_type = content_type
        self.value = value
