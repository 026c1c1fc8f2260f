"""Exception types raised by translations-lite."""

from __future__ import annotations


class OptionsError(TypeError):
    """Raised when the manager configuration is invalid."""


class ExtractorUnavailableError(RuntimeError):
    """Raised when messages must be extracted but no extractor is available."""


class DuplicateMessageError(ValueError):
    """Raised in strict mode when a message id carries two default texts."""

    def __init__(self, key: str, first: str, second: str) -> None:
        super().__init__(
            f"Duplicate message id '{key}' with different default messages: "
            f"{first!r} != {second!r}"
        )
        self.key = key
        self.first = first
        self.second = second


class TranslationFileError(ValueError):
    """Raised when a JSON file parses but does not have the expected shape."""


__all__ = [
    "DuplicateMessageError",
    "ExtractorUnavailableError",
    "OptionsError",
    "TranslationFileError",
]
