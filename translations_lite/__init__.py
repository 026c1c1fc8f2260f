"""Translations Lite package initialization."""

from .errors import (
    DuplicateMessageError,
    ExtractorUnavailableError,
    OptionsError,
    TranslationFileError,
)
from .manager import TranslationsManager
from .options import ManagerOptions
from .reconcile import (
    ReconciliationResult,
    build_template,
    reconcile,
    reconcile_locale,
)
from .reporters import render_report
from .writers import serialize_json, serialize_sorted_json

__all__ = [
    "DuplicateMessageError",
    "ExtractorUnavailableError",
    "ManagerOptions",
    "OptionsError",
    "ReconciliationResult",
    "TranslationFileError",
    "TranslationsManager",
    "build_template",
    "reconcile",
    "reconcile_locale",
    "render_report",
    "serialize_json",
    "serialize_sorted_json",
]
