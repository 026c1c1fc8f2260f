"""Reconciliation of a message template against per-locale translations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from .errors import DuplicateMessageError

Template = dict[str, str]
PriorLoader = Callable[[str], Mapping[str, str] | None]

CATEGORIES: tuple[str, ...] = ("added", "removed", "untranslated")


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    """Outcome of merging one locale file with the template."""

    locale: str
    translation: dict[str, str] = field(default_factory=dict)
    added: dict[str, str] = field(default_factory=dict)
    removed: dict[str, str] = field(default_factory=dict)
    untranslated: dict[str, str] = field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        return not (self.added or self.removed or self.untranslated)

    def counts(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in CATEGORIES}

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "translation": dict(self.translation),
            "added": dict(self.added),
            "removed": dict(self.removed),
            "untranslated": dict(self.untranslated),
        }


def build_template(
    messages: Iterable[Mapping[str, Any]], *, strict_duplicates: bool = False
) -> Template:
    """Collapse extracted messages into an ordered ``id -> defaultMessage`` map.

    A repeated id keeps its first position and takes the last default text.
    With ``strict_duplicates`` a repeated id whose text differs raises
    :class:`DuplicateMessageError`.
    """

    template: Template = {}
    for message in messages:
        key = message["id"]
        text = message.get("defaultMessage")
        if strict_duplicates and key in template and template[key] != text:
            raise DuplicateMessageError(key, template[key], text)
        template[key] = text
    return template


def reconcile_locale(
    template: Mapping[str, str],
    locale: str,
    prior: Mapping[str, str] | None,
    *,
    default_locale: str | None,
) -> ReconciliationResult:
    """Merge the ``prior`` translation file of ``locale`` with ``template``."""

    is_default = locale == default_locale
    prior = prior or {}
    translation: dict[str, str] = {}
    added: dict[str, str] = {}
    removed: dict[str, str] = {}
    untranslated: dict[str, str] = {}

    for key, default_message in template.items():
        if key in prior:
            message = prior[key]
            translation[key] = message
            if not is_default and message == default_message:
                untranslated[key] = message
        else:
            translation[key] = default_message if is_default else ""
            added[key] = translation[key]

    for key, message in prior.items():
        if key not in translation:
            removed[key] = message

    return ReconciliationResult(
        locale=locale,
        translation=translation,
        added=added,
        removed=removed,
        untranslated=untranslated,
    )


def reconcile(
    template: Mapping[str, str],
    locales: Iterable[str],
    default_locale: str | None,
    prior_file_of: PriorLoader,
) -> list[ReconciliationResult]:
    """Reconcile every locale in order.

    Errors raised by ``prior_file_of`` propagate and abort the whole run.
    """

    return [
        reconcile_locale(
            template, locale, prior_file_of(locale), default_locale=default_locale
        )
        for locale in locales
    ]


__all__ = [
    "CATEGORIES",
    "PriorLoader",
    "ReconciliationResult",
    "Template",
    "build_template",
    "reconcile",
    "reconcile_locale",
]
