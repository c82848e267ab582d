from __future__ import annotations

"""Trainer session: ties per-symbol statistics to a selection strategy.

The presentation layer drives a session through a request/report cycle:
``request_next()`` picks the symbol to show, ``report_outcome()`` records how
the user did on it. Callers keep at most one prompt outstanding at a time and
serialize access if they share a session between threads.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..policy.selection import SelectionStrategy, WeightedRandomStrategy
from ..results.schema import DifficultyEntry, SessionSummary, SymbolRow
from ..stats.stats import SymbolStat
from .explain import trace as xtrace


class EmptyAlphabetError(ValueError):
    """Raised when a session is configured without usable symbols."""


class TrainerSession:
    def __init__(self, alphabet: Iterable[str], strategy: Optional[SelectionStrategy] = None) -> None:
        symbols = list(alphabet)
        if not symbols:
            raise EmptyAlphabetError("alphabet must contain at least one symbol")
        if any(not isinstance(s, str) or not s for s in symbols):
            raise EmptyAlphabetError("alphabet symbols must be non-empty strings")
        duplicates = sorted({s for s in symbols if symbols.count(s) > 1})
        if duplicates:
            raise EmptyAlphabetError(f"alphabet contains duplicate symbols: {''.join(duplicates)}")

        self.symbols: List[SymbolStat] = [SymbolStat(s) for s in symbols]
        self.strategy: SelectionStrategy = strategy or WeightedRandomStrategy()
        self.current_symbol: Optional[str] = None
        self.total_correct = 0
        self.total_errors = 0
        self.started_at = datetime.now(timezone.utc)
        self._index = {stat.symbol: stat for stat in self.symbols}

    @property
    def alphabet(self) -> str:
        return "".join(stat.symbol for stat in self.symbols)

    @property
    def total_attempts(self) -> int:
        return self.total_correct + self.total_errors

    def stat_for(self, symbol: str) -> Optional[SymbolStat]:
        if not isinstance(symbol, str):
            return None
        return self._index.get(symbol)

    def request_next(self) -> str:
        """Select the next symbol to present and remember it as current."""
        symbol = self.strategy.next_symbol(self.symbols)
        if symbol is None:
            raise EmptyAlphabetError("selection strategy returned no symbol")
        self.current_symbol = symbol
        xtrace("symbol_selected", {"symbol": symbol})
        return symbol

    def report_outcome(self, symbol: str, is_error: bool) -> bool:
        """Record one response for ``symbol``.

        Symbols outside the alphabet are ignored. Returns True when the
        outcome was recorded.
        """
        stat = self.stat_for(symbol)
        if stat is None:
            xtrace("outcome_ignored", {"symbol": symbol if isinstance(symbol, str) else repr(symbol)})
            return False
        stat.record_attempt(is_error)
        if is_error:
            self.total_errors += 1
        else:
            self.total_correct += 1
        xtrace(
            "outcome_reported",
            {"symbol": symbol, "error": bool(is_error), "attempts": stat.attempts, "errors": stat.errors},
        )
        return True

    def global_error_rate(self) -> float:
        """Session-wide error percentage, rounded to one decimal."""
        total = self.total_attempts
        if total == 0:
            return 0.0
        return round(self.total_errors / total * 100, 1)

    def ranked_difficulty(self, limit: int = 10) -> List[DifficultyEntry]:
        """Attempted symbols sorted by error rate, highest first.

        Ties keep alphabet order. At most ``limit`` entries are returned.
        """
        entries = [
            DifficultyEntry(
                symbol=stat.symbol,
                error_rate_percent=round(stat.error_rate() * 100, 1),
                attempts=stat.attempts,
            )
            for stat in self.symbols
            if stat.attempts > 0
        ]
        entries.sort(key=lambda e: e.error_rate_percent, reverse=True)
        return entries[: max(0, int(limit))]

    def summary(self, top_n: int = 10) -> SessionSummary:
        return SessionSummary(
            started_at=self.started_at,
            alphabet=self.alphabet,
            strategy=type(self.strategy).__name__,
            total_correct=self.total_correct,
            total_errors=self.total_errors,
            global_error_rate=self.global_error_rate(),
            symbols=[SymbolRow(symbol=s.symbol, attempts=s.attempts, errors=s.errors) for s in self.symbols],
            difficult=self.ranked_difficulty(top_n),
        )
