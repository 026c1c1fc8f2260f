"""Pluggable message extraction from source files."""

from __future__ import annotations

import importlib
from typing import Any, Callable

from .errors import ExtractorUnavailableError

Extractor = Callable[[str], list[dict[str, Any]]]


def load_extractor(reference: str) -> Extractor:
    """Resolve ``package.module:function`` into an extractor callable."""

    module_name, _, attr = reference.partition(":")
    if not module_name or not attr:
        raise ExtractorUnavailableError(
            f"Extractor reference must look like 'module:function', got '{reference}'"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ExtractorUnavailableError(
            f"Could not import extractor module '{module_name}'"
        ) from exc
    extractor = getattr(module, attr, None)
    if not callable(extractor):
        raise ExtractorUnavailableError(
            f"Extractor '{attr}' not found or not callable in '{module_name}'"
        )
    return extractor


def extract_messages(pattern: str, extractor: Extractor | None) -> list[dict[str, Any]]:
    """Run ``extractor`` over ``pattern``."""

    if extractor is None:
        raise ExtractorUnavailableError(
            "An extractor is required when you want to extract messages directly "
            "from source files. Pass `extractor=` or `--extractor module:function`."
        )
    return list(extractor(pattern))


__all__ = ["Extractor", "extract_messages", "load_extractor"]
