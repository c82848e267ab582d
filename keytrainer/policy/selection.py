from __future__ import annotations

"""Selection strategies: decide which symbol to present next.

A strategy is any object with ``next_symbol(stats)``. Strategies read the
statistics they are given and never modify them.
"""

import math
import random
from typing import Callable, List, Optional, Protocol, Sequence

from ..stats.stats import SymbolStat

RandomSource = Callable[[], float]

# Added to every error rate so untried and error-free symbols keep a chance.
DEFAULT_FLOOR = 0.1


class SelectionStrategy(Protocol):
    def next_symbol(self, stats: Sequence[SymbolStat]) -> Optional[str]: ...


def selection_weights(stats: Sequence[SymbolStat], floor: float = DEFAULT_FLOOR) -> List[float]:
    """Return ``error_rate + floor`` for each stat, in input order."""
    return [stat.error_rate() + floor for stat in stats]


class WeightedRandomStrategy:
    """Draw a symbol with probability proportional to its error rate plus a floor.

    With the default floor of 0.1 a symbol missed every time is drawn up to
    eleven times as often as one never missed.
    """

    def __init__(self, random_source: Optional[RandomSource] = None, floor: float = DEFAULT_FLOOR) -> None:
        if not math.isfinite(floor) or floor <= 0:
            raise ValueError(f"floor must be a finite number > 0, got {floor!r}")
        self.random_source: RandomSource = random_source or random.random
        self.floor = float(floor)

    def next_symbol(self, stats: Sequence[SymbolStat]) -> Optional[str]:
        if not stats:
            return None

        weights = selection_weights(stats, self.floor)
        total_weight = sum(weights)

        r = self.random_source() * total_weight
        for stat, weight in zip(stats, weights):
            r -= weight
            if r <= 0:
                return stat.symbol

        # Rounding in the running subtraction can leave r slightly above zero.
        return stats[-1].symbol
