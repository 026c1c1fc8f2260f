"""Tests for the file loaders and writers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from translations_lite import loaders, writers
from translations_lite.errors import OptionsError, TranslationFileError


def test_read_translation_file_missing_returns_none(tmp_path: Path) -> None:
    assert loaders.read_translation_file(tmp_path / "fr.json") is None


def test_read_translation_file_keeps_order(tmp_path: Path) -> None:
    path = tmp_path / "de.json"
    path.write_text('{"z": "1", "a": "2"}', encoding="utf-8")
    assert list(loaders.read_translation_file(path)) == ["z", "a"]


def test_read_translation_file_rejects_arrays(tmp_path: Path) -> None:
    path = tmp_path / "de.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(TranslationFileError):
        loaders.read_translation_file(path)


def test_read_messages_dir_concatenates_sorted(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "one.json").write_text(
        json.dumps([{"id": "b1", "defaultMessage": "B1"}]), encoding="utf-8"
    )
    (tmp_path / "a.json").write_text(
        json.dumps([{"id": "a1", "defaultMessage": "A1"}]), encoding="utf-8"
    )
    messages = loaders.read_messages_dir(tmp_path)
    assert [message["id"] for message in messages] == ["a1", "b1"]


def test_read_messages_dir_rejects_objects(tmp_path: Path) -> None:
    (tmp_path / "bad.json").write_text('{"id": "x"}', encoding="utf-8")
    with pytest.raises(TranslationFileError):
        loaders.read_messages_dir(tmp_path)


def test_load_config_yaml_and_json(tmp_path: Path) -> None:
    yaml_path = tmp_path / "translations.yaml"
    yaml_path.write_text("locales: [en, de]\ndefaultLocale: en\n", encoding="utf-8")
    json_path = tmp_path / "translations.json"
    json_path.write_text(json.dumps({"locales": ["fr"]}), encoding="utf-8")

    assert loaders.load_config(yaml_path) == {
        "locales": ["en", "de"],
        "defaultLocale": "en",
    }
    assert loaders.load_config(json_path) == {"locales": ["fr"]}
    assert loaders.load_config(tmp_path / "missing.yaml") == {}
    assert loaders.load_config(None) == {}


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("- en\n- de\n", encoding="utf-8")
    with pytest.raises(OptionsError, match="mapping"):
        loaders.load_config(path)


def test_write_translation_file_creates_dirs(tmp_path: Path) -> None:
    path = writers.translation_file_path(tmp_path / "deep" / "dir", "pt-BR")
    assert path.name == "pt-BR.json"
    writers.write_translation_file(path, {"b": "", "a": "Olá"})
    assert path.read_text(encoding="utf-8") == '{\n  "b": "",\n  "a": "Olá"\n}\n'

    writers.write_translation_file(
        path, {"b": "", "a": "Olá"}, writers.serialize_sorted_json
    )
    assert path.read_text(encoding="utf-8") == '{\n  "a": "Olá",\n  "b": ""\n}\n'
