"""Opt-in debug output for seeip requests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone


def log_debug(debug: bool, message: str, source: str = "seeip") -> None:
    """Write ``message`` tagged with ``source`` when ``debug`` is set.

    Lines look like ``[2024-01-01 12:00:00 UTC][DEBUG][seeip.v4] ...``.
    """
    if not debug:
        return
    _write_line(f"[{_ts()} UTC][DEBUG][{source}] {message}\n")


def set_log_file(path: str | None) -> None:
    """Send debug lines to ``path`` instead of stderr (``None`` restores stderr)."""
    global _LOG_FILE
    _LOG_FILE = path


def _ts() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def _write_line(line: str) -> None:
    if _LOG_FILE:
        with open(_LOG_FILE, "a", encoding="utf-8") as handle:
            handle.write(line)
    else:
        sys.stderr.write(line)


_LOG_FILE: str | None = None
