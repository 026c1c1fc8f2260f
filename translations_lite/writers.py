"""Serialisation and persistence of translation files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Mapping

Serializer = Callable[[Mapping[str, str]], str]


def translation_file_path(
    translations_dir: Path | str, locale: str, ext: str = "json"
) -> Path:
    """Return ``{translations_dir}/{locale}.{ext}``."""

    return Path(translations_dir) / f"{locale}.{ext}"


def serialize_json(mapping: Mapping[str, str]) -> str:
    """Pretty-print ``mapping`` keeping insertion order."""

    return json.dumps(dict(mapping), indent=2, ensure_ascii=False) + "\n"


def serialize_sorted_json(mapping: Mapping[str, str]) -> str:
    """Pretty-print ``mapping`` with keys sorted alphabetically."""

    text = json.dumps(dict(mapping), indent=2, ensure_ascii=False, sort_keys=True)
    return text + "\n"


def _ensure_dir(path: Path) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def write_translation_file(
    path: Path,
    mapping: Mapping[str, str],
    serializer: Serializer = serialize_json,
) -> Path:
    """Write ``mapping`` to ``path`` creating parent directories on demand."""

    path = Path(path)
    _ensure_dir(path.parent)
    path.write_text(serializer(mapping), encoding="utf-8")
    return path


__all__ = [
    "Serializer",
    "serialize_json",
    "serialize_sorted_json",
    "translation_file_path",
    "write_translation_file",
]
