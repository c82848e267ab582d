from .selection import (  # noqa: F401
    DEFAULT_FLOOR,
    RandomSource,
    SelectionStrategy,
    WeightedRandomStrategy,
    selection_weights,
)
