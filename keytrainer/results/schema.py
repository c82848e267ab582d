from __future__ import annotations

"""Pydantic models for session results handed to display and export code."""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class DifficultyEntry(BaseModel):
    """One row of the most-missed ranking."""

    symbol: str = Field(min_length=1)
    error_rate_percent: float = Field(ge=0, le=100)
    attempts: int = Field(ge=1)


class SymbolRow(BaseModel):
    symbol: str = Field(min_length=1)
    attempts: int = Field(ge=0)
    errors: int = Field(ge=0)

    @model_validator(mode="after")
    def _errors_le_attempts(self) -> "SymbolRow":
        if self.errors > self.attempts:
            raise ValueError("errors must be <= attempts")
        return self


class SessionSummary(BaseModel):
    started_at: datetime
    alphabet: str
    strategy: str
    total_correct: int = Field(ge=0)
    total_errors: int = Field(ge=0)
    global_error_rate: float = Field(ge=0, le=100)
    symbols: List[SymbolRow] = Field(default_factory=list)
    difficult: List[DifficultyEntry] = Field(default_factory=list)

    @field_validator("started_at")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @model_validator(mode="after")
    def _totals_match_symbols(self) -> "SessionSummary":
        if self.symbols:
            attempts = sum(row.attempts for row in self.symbols)
            if attempts != self.total_correct + self.total_errors:
                raise ValueError("total_correct + total_errors must equal the sum of symbol attempts")
        return self
