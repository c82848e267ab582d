from .schema import DifficultyEntry, SessionSummary, SymbolRow  # noqa: F401
