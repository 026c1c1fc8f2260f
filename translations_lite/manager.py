"""High level manager tying message sources, reconciliation and files together."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Mapping, TextIO

from .extract import Extractor, extract_messages
from .loaders import read_messages_dir, read_translation_file
from .options import ManagerOptions, parse_options, validate_messages
from .reconcile import ReconciliationResult, Template, build_template, reconcile
from .reporters import render_report
from .runlog import log_event
from .writers import (
    Serializer,
    serialize_json,
    serialize_sorted_json,
    translation_file_path,
    write_translation_file,
)


class TranslationsManager:
    """Keep per-locale translation files in sync with a message template.

    Options are validated on construction, before any file is touched, and
    the first reconciliation runs eagerly. Call :meth:`reload` to recompute
    against the current files on disk.

    Parameters
    ----------
    options
        Mapping or :class:`ManagerOptions` with the configuration.
    extractor
        Callable used when ``source`` is configured; receives the glob
        pattern and returns ``{id, defaultMessage}`` dictionaries.
    serializer
        Callable turning a translation mapping into file content. Defaults
        to pretty-printed JSON in template order (alphabetical when
        ``sort_keys`` is set).
    """

    def __init__(
        self,
        options: ManagerOptions | Mapping[str, Any],
        *,
        extractor: Extractor | None = None,
        serializer: Serializer | None = None,
    ) -> None:
        self.options = parse_options(options)
        self.extractor = extractor
        if serializer is None:
            serializer = (
                serialize_sorted_json if self.options.sort_keys else serialize_json
            )
        self.serializer = serializer
        self.messages: list[dict[str, Any]] = []
        self.template: Template = {}
        self._results: tuple[ReconciliationResult, ...] = ()
        self.reload()

    @property
    def translations_dir(self) -> Path:
        return Path(self.options.translations_dir)

    def reload(self) -> "TranslationsManager":
        """Resolve messages, rebuild the template and reconcile every locale."""

        self.messages = self._resolve_messages()
        self.template = build_template(
            self.messages, strict_duplicates=self.options.strict_duplicates
        )
        results = reconcile(
            self.template,
            self.options.locales,
            self.options.default_locale,
            self.read_translation_file,
        )
        self._results = tuple(results)
        self._log(
            "reload",
            {
                "messages": len(self.messages),
                "template": len(self.template),
                "locales": {result.locale: result.counts() for result in results},
            },
        )
        return self

    def translation_file_path(self, locale: str) -> Path:
        return translation_file_path(self.translations_dir, locale)

    def read_translation_file(self, locale: str) -> dict[str, str] | None:
        return read_translation_file(self.translation_file_path(locale))

    def stringify(self, translation: Mapping[str, str]) -> str:
        """Return file content for ``translation``; override to customise."""

        return self.serializer(translation)

    def write_translation_file(
        self, locale: str, translation: Mapping[str, str]
    ) -> Path:
        return write_translation_file(
            self.translation_file_path(locale), translation, self.stringify
        )

    def extract_messages(self) -> list[dict[str, Any]]:
        source = self.options.source
        return validate_messages(extract_messages(source, self.extractor), source)

    def read_messages(self) -> list[dict[str, Any]]:
        messages_dir = self.options.messages_dir
        return validate_messages(read_messages_dir(messages_dir), str(messages_dir))

    def render_translation_report(
        self,
        result: ReconciliationResult,
        *,
        short: bool = False,
        color: bool = False,
    ) -> str:
        return render_report(
            result, self.translation_file_path(result.locale), short=short, color=color
        )

    def report(
        self,
        *,
        short: bool = False,
        color: bool | None = None,
        stream: TextIO | None = None,
    ) -> "TranslationsManager":
        """Print one report block per locale.

        ``color`` defaults to whether ``stream`` is a terminal.
        """

        stream = stream if stream is not None else sys.stdout
        if color is None:
            color = bool(getattr(stream, "isatty", lambda: False)())
        for result in self._results:
            print(
                self.render_translation_report(result, short=short, color=color),
                file=stream,
            )
        self._log("report", {"short": short, "clean": self.is_clean})
        return self

    def write_files(self) -> "TranslationsManager":
        """Persist every locale's translation."""

        written = [
            str(self.write_translation_file(result.locale, result.translation))
            for result in self._results
        ]
        self._log("write_files", {"files": written})
        return self

    def results(self) -> tuple[ReconciliationResult, ...]:
        return self._results

    @property
    def is_clean(self) -> bool:
        return all(result.is_clean for result in self._results)

    def _resolve_messages(self) -> list[dict[str, Any]]:
        if self.options.messages is not None:
            return self.options.message_dicts()
        if self.options.messages_dir:
            return self.read_messages()
        if self.options.source:
            return self.extract_messages()
        raise ValueError("Messages required")

    def _log(self, event: str, payload: Mapping[str, Any]) -> None:
        log_event(event, payload, path=self.options.run_log)


__all__ = ["TranslationsManager"]
