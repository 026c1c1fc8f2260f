"""Opt-in JSONL run log recording what each reconciliation did."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator, Mapping

ENV_VAR = "TRANSLATIONS_LITE_RUN_LOG"


def resolve_log_path(path: Path | str | None = None) -> Path | None:
    """Return the run log path, falling back to ``$TRANSLATIONS_LITE_RUN_LOG``.

    ``None`` means logging is disabled.
    """

    if path is not None:
        return Path(path)
    value = os.getenv(ENV_VAR)
    if not value:
        return None
    return Path(value)


def log_event(
    event: str,
    payload: Mapping[str, Any] | None = None,
    *,
    path: Path | str | None = None,
) -> dict[str, Any] | None:
    """Append an event to the run log when enabled."""

    log_path = resolve_log_path(path)
    if log_path is None:
        return None
    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "payload": dict(payload or {}),
    }
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(entry, ensure_ascii=False) + "\n")
    return entry


def iter_events(path: Path | str) -> Iterator[dict[str, Any]]:
    path = Path(path)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                yield json.loads(line)


__all__ = ["ENV_VAR", "iter_events", "log_event", "resolve_log_path"]
