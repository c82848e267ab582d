from __future__ import annotations

"""Single-key drill: turns raw key presses into session outcomes.

A correct key advances to a newly selected symbol. A wrong key that belongs
to the alphabet counts as an error on the symbol being shown and keeps it on
screen. Anything else is ignored.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from ..app.explain import trace as xtrace
from ..app.session_manager import TrainerSession


@dataclass(frozen=True)
class Feedback:
    kind: Literal["correct", "error", "ignored"]
    expected: Optional[str]
    key: str
    next_symbol: Optional[str] = None

    @property
    def advanced(self) -> bool:
        return self.next_symbol is not None


def normalize_key(raw: str, *, case_sensitive: bool = False) -> str:
    key = raw.strip()
    if not case_sensitive:
        key = key.lower()
    return key


class KeyDrill:
    def __init__(self, session: TrainerSession, *, case_sensitive: bool = False) -> None:
        self.session = session
        self.case_sensitive = case_sensitive

    @property
    def current(self) -> Optional[str]:
        return self.session.current_symbol

    def start(self) -> str:
        return self.session.request_next()

    def handle_key(self, raw: str) -> Feedback:
        key = normalize_key(raw, case_sensitive=self.case_sensitive)
        expected = self.session.current_symbol
        if expected is None:
            expected = self.start()

        if key == expected:
            self.session.report_outcome(expected, False)
            nxt = self.session.request_next()
            return Feedback(kind="correct", expected=expected, key=key, next_symbol=nxt)

        if self.session.stat_for(key) is not None:
            self.session.report_outcome(expected, True)
            return Feedback(kind="error", expected=expected, key=key)

        xtrace("key_ignored", {"key": key, "expected": expected})
        return Feedback(kind="ignored", expected=expected, key=key)
