from __future__ import annotations

"""Strategy registry and metadata.

Expose the available selection strategies by id and construct them via a
simple factory.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..policy.selection import DEFAULT_FLOOR, RandomSource, SelectionStrategy, WeightedRandomStrategy


@dataclass(frozen=True)
class StrategyMeta:
    id: str
    name: str
    description: str


def _weighted_random_meta() -> StrategyMeta:
    return StrategyMeta(
        id="weighted_random",
        name="Weighted Random",
        description="Draw symbols in proportion to their error rate plus a floor.",
    )


def list_strategies() -> List[StrategyMeta]:
    return [_weighted_random_meta()]


def get_strategy(strategy_id: str) -> StrategyMeta:
    for m in list_strategies():
        if m.id == strategy_id:
            return m
    raise KeyError(f"Unknown strategy id: {strategy_id}")


def make_strategy(
    strategy_id: str,
    *,
    random_source: Optional[RandomSource] = None,
    floor: float = DEFAULT_FLOOR,
) -> SelectionStrategy:
    """Factory that builds the concrete strategy for an id."""
    meta = get_strategy(strategy_id)
    if meta.id == "weighted_random":
        return WeightedRandomStrategy(random_source=random_source, floor=floor)
    raise KeyError(f"No factory for strategy id: {strategy_id}")
