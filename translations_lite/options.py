"""Validated configuration for :class:`~translations_lite.TranslationsManager`."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .errors import OptionsError, TranslationFileError

MISSING_MESSAGES = (
    'Please provide one of "messages", "messagesDir", or "source" options'
)
MISSING_TRANSLATIONS_DIR = 'Please provide "translationsDir" option'
MISSING_LOCALES = 'Please provide "locales" option'


class Message(BaseModel):
    """Single extracted message; extra keys such as ``description`` are kept."""

    id: str
    defaultMessage: str = ""

    model_config = ConfigDict(extra="allow")


class ManagerOptions(BaseModel):
    """Options accepted by the translations manager.

    Both snake_case names and the camelCase names used by message
    extraction tooling (``messagesDir``, ``translationsDir``,
    ``defaultLocale``) are accepted.
    """

    source: str | None = None
    messages: list[Message] | None = None
    messages_dir: Path | None = Field(default=None, alias="messagesDir")
    translations_dir: Path | None = Field(default=None, alias="translationsDir")
    locales: list[str] = Field(default_factory=list)
    default_locale: str | None = Field(default=None, alias="defaultLocale")
    strict_duplicates: bool = Field(default=False, alias="strictDuplicates")
    sort_keys: bool = Field(default=False, alias="sortKeys")
    run_log: Path | None = Field(default=None, alias="runLog")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("source", "messages_dir", "translations_dir", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("locales", mode="before")
    @classmethod
    def _split_locales(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @model_validator(mode="after")
    def _check_required(self) -> "ManagerOptions":
        if self.messages is None and not self.messages_dir and not self.source:
            raise ValueError(MISSING_MESSAGES)
        if not self.translations_dir:
            raise ValueError(MISSING_TRANSLATIONS_DIR)
        if not self.locales:
            raise ValueError(MISSING_LOCALES)
        return self

    def message_dicts(self) -> list[dict[str, Any]]:
        return [message.model_dump() for message in self.messages or []]


def _format_errors(exc: ValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        location = "->".join(str(piece) for piece in error.get("loc", ()))
        message = str(error.get("msg", ""))
        # model validators report "Value error, <text>" without a location
        message = message.removeprefix("Value error, ")
        messages.append(f"{location} {message}".strip())
    return "; ".join(messages)


def parse_options(options: ManagerOptions | Mapping[str, Any]) -> ManagerOptions:
    """Validate ``options`` raising :class:`OptionsError` on failure.

    A :class:`ManagerOptions` instance was validated when it was built and is
    returned as is; constructing one from bad input raises pydantic's
    ``ValidationError`` at that point instead.
    """

    if isinstance(options, ManagerOptions):
        return options
    try:
        return ManagerOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise OptionsError(_format_errors(exc)) from exc


def validate_messages(
    messages: Iterable[Mapping[str, Any]], origin: str
) -> list[dict[str, Any]]:
    """Normalise raw messages from ``origin`` through :class:`Message`."""

    try:
        return [Message.model_validate(message).model_dump() for message in messages]
    except ValidationError as exc:
        raise TranslationFileError(
            f"Invalid message from {origin}: {_format_errors(exc)}"
        ) from exc


__all__ = [
    "MISSING_LOCALES",
    "MISSING_MESSAGES",
    "MISSING_TRANSLATIONS_DIR",
    "ManagerOptions",
    "Message",
    "parse_options",
    "validate_messages",
]
