from __future__ import annotations

"""Explain Mode: one trace line per selection, outcome and ignored key.

Lines look like ``[EXPLAIN] key.symbol_selected :: {"symbol":"a"}``. Every
event is namespaced under ``key.`` so traces from a front-end embedding the
engine can be told apart. Enable with the CLI flag ``--explain``.
"""

import json
import sys
from typing import Any, Dict, Optional, TextIO

EVENT_PREFIX = "key."

_ENABLED = False
_STREAM: Optional[TextIO] = None


def enable(flag: bool = True, stream: Optional[TextIO] = None) -> None:
    """Turn tracing on or off; ``stream`` defaults to stdout at write time."""
    global _ENABLED, _STREAM
    _ENABLED = bool(flag)
    _STREAM = stream


def enabled() -> bool:
    return _ENABLED


def format_event(event: str, payload: Dict[str, Any] | None = None) -> str:
    name = event if event.startswith(EVENT_PREFIX) else EVENT_PREFIX + event
    if not payload:
        return f"[EXPLAIN] {name}"
    try:
        encoded = json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError):
        encoded = json.dumps({k: repr(v) for k, v in payload.items()}, separators=(",", ":"))
    return f"[EXPLAIN] {name} :: {encoded}"


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    print(format_event(event, payload), file=_STREAM or sys.stdout)
