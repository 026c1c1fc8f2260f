"""Tests for option validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError
from translations_lite.errors import OptionsError, TranslationFileError
from translations_lite.options import ManagerOptions, parse_options, validate_messages


def test_camel_and_snake_case_names() -> None:
    camel = parse_options(
        {
            "messagesDir": "msgs",
            "translationsDir": "out",
            "defaultLocale": "en",
            "locales": ["en"],
        }
    )
    snake = parse_options(
        {
            "messages_dir": "msgs",
            "translations_dir": "out",
            "default_locale": "en",
            "locales": ["en"],
        }
    )
    assert camel == snake
    assert camel.translations_dir == Path("out")


def test_locales_accept_comma_separated_string() -> None:
    options = parse_options(
        {"messages": [], "translationsDir": "out", "locales": "en, de"}
    )
    assert options.locales == ["en", "de"]


def test_blank_translations_dir_is_missing() -> None:
    with pytest.raises(OptionsError, match="translationsDir"):
        parse_options({"messages": [], "translationsDir": "  "})


def test_messages_keep_extra_fields() -> None:
    options = parse_options(
        {
            "messages": [{"id": "a", "defaultMessage": "A", "description": "d"}],
            "translationsDir": "out",
            "locales": ["en"],
        }
    )
    assert options.message_dicts() == [
        {"id": "a", "defaultMessage": "A", "description": "d"}
    ]


def test_invalid_message_reports_location() -> None:
    with pytest.raises(OptionsError, match="messages"):
        parse_options({"messages": [{"defaultMessage": "A"}], "translationsDir": "out"})


def test_parse_options_passes_models_through() -> None:
    options = ManagerOptions(messages=[], translations_dir="out", locales=["en"])
    assert parse_options(options) is options

    with pytest.raises(ValidationError):
        ManagerOptions(messages=[], translations_dir="out")


@pytest.mark.parametrize("locales", [None, [], ""])
def test_locales_are_required(locales) -> None:
    with pytest.raises(OptionsError) as excinfo:
        parse_options({"messages": [], "translationsDir": "out", "locales": locales})
    assert str(excinfo.value) == 'Please provide "locales" option'


def test_validate_messages_fills_missing_default() -> None:
    assert validate_messages([{"id": "a"}], "test") == [
        {"id": "a", "defaultMessage": ""}
    ]
    with pytest.raises(TranslationFileError, match="id"):
        validate_messages([{"defaultMessage": "A"}], "test")
