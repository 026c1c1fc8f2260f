"""Tests for report rendering."""

from __future__ import annotations

from translations_lite.reconcile import ReconciliationResult
from translations_lite.reporters import render_report, render_summary


def _dirty() -> ReconciliationResult:
    return ReconciliationResult(
        locale="de",
        translation={"a": "", "b": "B"},
        added={"a": ""},
        removed={"old": "Alt"},
        untranslated={"b": "B"},
    )


def test_clean_result_summary() -> None:
    result = ReconciliationResult(locale="en", translation={"a": "A"})
    assert render_summary(result, "i18n/en.json") == "📄 i18n/en.json: ✓"
    assert render_report(result, "i18n/en.json") == "📄 i18n/en.json: ✓"


def test_dirty_result_lists_sections_in_order() -> None:
    report = render_report(_dirty(), "i18n/de.json")
    assert report.splitlines() == [
        "📄 i18n/de.json: (1 added, 1 removed, 1 untranslated)",
        "(+) Added:",
        '  a: ""',
        "(-) Removed:",
        "  old: Alt",
        "(!) Untranslated:",
        "  b: B",
    ]


def test_summary_skips_empty_categories() -> None:
    result = ReconciliationResult(locale="de", removed={"x": "1", "y": "2"})
    assert render_summary(result, "de.json") == "📄 de.json: (2 removed)"


def test_short_report_only_has_summary() -> None:
    report = render_report(_dirty(), "de.json", short=True)
    assert report == "📄 de.json: (1 added, 1 removed, 1 untranslated)"


def test_color_wraps_paths_and_keys() -> None:
    report = render_report(_dirty(), "de.json", color=True)
    assert "\033[1;4;33mde.json\033[0m" in report
    assert "\033[32ma\033[0m" in report
    assert "\033[31mold\033[0m" in report
    assert '\033[90m""\033[0m' in report
