"""keytrainer package initialization.

Adaptive per-character keyboard trainer: tracks errors per symbol and
presents the symbols you miss most often more frequently.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
