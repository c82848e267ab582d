from .stats import SymbolStat, format_summary, write_stats  # noqa: F401
