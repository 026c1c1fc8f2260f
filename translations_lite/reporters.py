"""Text report rendering for reconciliation results."""

from __future__ import annotations

from pathlib import Path

from .reconcile import CATEGORIES, ReconciliationResult

_RESET = "\033[0m"
_STYLES = {
    "bold_green": "\033[1;4;32m",
    "bold_yellow": "\033[1;4;33m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "red": "\033[31m",
    "grey": "\033[90m",
}

_SECTIONS = (
    ("added", "(+) Added:", "green"),
    ("removed", "(-) Removed:", "red"),
    ("untranslated", "(!) Untranslated:", "yellow"),
)


def _paint(text: str, style: str, color: bool) -> str:
    if not color:
        return text
    return f"{_STYLES[style]}{text}{_RESET}"


def _display_value(value: str) -> str:
    return '""' if value == "" else str(value)


def render_summary(
    result: ReconciliationResult, file_path: Path | str, *, color: bool = False
) -> str:
    """Return the one-line summary for ``result``."""

    if result.is_clean:
        return (
            f"📄 {_paint(str(file_path), 'bold_green', color)}: "
            f"{_paint('✓', 'green', color)}"
        )
    counts = result.counts()
    parts = [f"{counts[name]} {name}" for name in CATEGORIES if counts[name] > 0]
    return f"📄 {_paint(str(file_path), 'bold_yellow', color)}: ({', '.join(parts)})"


def render_report(
    result: ReconciliationResult,
    file_path: Path | str,
    *,
    short: bool = False,
    color: bool = False,
) -> str:
    """Render the report block of one locale.

    ``short`` keeps only the summary line.
    """

    lines = [render_summary(result, file_path, color=color)]
    if short:
        return lines[0]
    for name, title, style in _SECTIONS:
        entries = getattr(result, name)
        if not entries:
            continue
        lines.append(title)
        for key, value in entries.items():
            lines.append(
                f"  {_paint(key, style, color)}: "
                f"{_paint(_display_value(value), 'grey', color)}"
            )
    return "\n".join(lines)


__all__ = ["render_report", "render_summary"]
