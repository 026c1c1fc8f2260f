"""Discovery and parsing helpers for message and translation files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import OptionsError, TranslationFileError


def load_config(path: Path | str | None) -> dict[str, Any]:
    """Load a manager configuration file.

    ``.yaml``/``.yml`` files are parsed as YAML, anything else as JSON. A
    missing file yields an empty configuration; unparsable content or a
    top level that is not a mapping raises :class:`OptionsError`.
    """

    if path is None or not Path(path).exists():
        return {}
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise OptionsError(f"Could not parse config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OptionsError(f"Config file must contain a mapping: {path}")
    return data


def read_translation_file(path: Path) -> dict[str, str] | None:
    """Return the mapping stored at ``path`` or ``None`` when it does not exist.

    Only a missing file is tolerated; decoding and permission errors
    propagate to the caller.
    """

    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return None
    if not isinstance(data, dict):
        raise TranslationFileError(f"Translation file must contain an object: {path}")
    return data


def read_messages_dir(messages_dir: Path | str) -> list[dict[str, Any]]:
    """Concatenate the message arrays stored below ``messages_dir``.

    Files are visited in sorted path order so the template order is stable
    across platforms.
    """

    messages: list[dict[str, Any]] = []
    for path in sorted(Path(messages_dir).glob("**/*.json")):
        if not path.is_file():
            continue
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise TranslationFileError(f"Messages file must contain an array: {path}")
        messages.extend(data)
    return messages


__all__ = [
    "load_config",
    "read_messages_dir",
    "read_translation_file",
]
