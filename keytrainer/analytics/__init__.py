"""Tabular views over session statistics for display layers."""

from .difficulty import difficulty_frame, selection_probabilities, stats_frame  # noqa: F401
