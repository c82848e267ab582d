from __future__ import annotations

"""Per-symbol tables and selection probabilities for display layers."""

from typing import Any, Sequence

import numpy as np
import pandas as pd

from ..policy.selection import DEFAULT_FLOOR, selection_weights
from ..stats.stats import SymbolStat

STATS_COLUMNS = ["symbol", "attempts", "errors", "error_rate_pct"]
DIFFICULTY_COLUMNS = ["symbol", "error_rate_pct", "attempts"]


def stats_frame(session: Any) -> pd.DataFrame:
    """One row per alphabet symbol, in alphabet order.

    error_rate_pct is 0 for symbols never attempted.
    """
    df = pd.DataFrame(
        {
            "symbol": pd.Series([s.symbol for s in session.symbols], dtype="string"),
            "attempts": pd.Series([s.attempts for s in session.symbols], dtype="int64"),
            "errors": pd.Series([s.errors for s in session.symbols], dtype="int64"),
        }
    )
    q = df["attempts"].astype("float64").where(df["attempts"] > 0, other=1.0)
    df["error_rate_pct"] = (df["errors"].astype("float64") / q * 100).round(1)
    return df[STATS_COLUMNS]


def difficulty_frame(session: Any, limit: int = 10) -> pd.DataFrame:
    """Most-missed ranking as a DataFrame, highest error rate first."""
    entries = session.ranked_difficulty(limit)
    if not entries:
        return pd.DataFrame({c: pd.Series(dtype=t) for c, t in zip(DIFFICULTY_COLUMNS, ["string", "float64", "int64"])})
    df = pd.DataFrame([e.model_dump() for e in entries]).rename(columns={"error_rate_percent": "error_rate_pct"})
    df["symbol"] = df["symbol"].astype("string")
    return df[DIFFICULTY_COLUMNS].reset_index(drop=True)


def selection_probabilities(stats: Sequence[SymbolStat], floor: float = DEFAULT_FLOOR) -> np.ndarray:
    """Probability of each symbol being drawn by the weighted random strategy."""
    weights = np.asarray(selection_weights(stats, floor), dtype="float64")
    if weights.size == 0:
        return weights
    return weights / weights.sum()
