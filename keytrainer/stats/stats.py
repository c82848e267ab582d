from __future__ import annotations

"""Per-symbol attempt/error counters and summary formatting."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..results.schema import SessionSummary


@dataclass
class SymbolStat:
    """Attempts and errors recorded for one symbol.

    Both counters only ever grow, and ``errors`` never exceeds ``attempts``.
    """

    symbol: str
    attempts: int = 0
    errors: int = 0

    def record_attempt(self, is_error: bool) -> None:
        self.attempts += 1
        if is_error:
            self.errors += 1

    def error_rate(self) -> float:
        """Fraction of attempts that were errors; 0.0 before any attempt."""
        if self.attempts == 0:
            return 0.0
        return self.errors / self.attempts


def write_stats(summary: "SessionSummary", path: str) -> None:
    """Write a session summary as JSON to path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        f.write(summary.model_dump_json(indent=2))


def format_summary(session: Any, top_n: int = 10) -> str:
    """Return a human-readable summary of a trainer session."""
    total = int(session.total_correct) + int(session.total_errors)
    lines = [
        f"Total: {session.total_correct}/{total} correct",
        f"Error rate: {session.global_error_rate()}%",
    ]
    ranked = session.ranked_difficulty(top_n)
    if ranked:
        lines.append(f"Top {len(ranked)} most missed:")
        for entry in ranked:
            lines.append(f"  {entry.symbol}: {entry.error_rate_percent}% of {entry.attempts}")
    return "\n".join(lines)
