"""Validated configuration models for path searches."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HeuristicKind(str, Enum):
    """Distance estimates available to the search."""

    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"


class SearchSettings(BaseModel):
    """Tuning knobs shared by :func:`~tilepath.astar.find_path` and the facade."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    heuristic: HeuristicKind = Field(default=HeuristicKind.MANHATTAN)
    min_step_cost: float | None = Field(default=None, gt=0.0)
    cache_size: int = Field(default=128, ge=0)

    @field_validator("heuristic", mode="before")
    @classmethod
    def _normalise_heuristic(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("min_step_cost")
    @classmethod
    def _coerce_float(cls, value: float | None) -> float | None:
        if value is None:
            return None
        return float(value)


DEFAULT_SETTINGS = SearchSettings()


__all__ = ["DEFAULT_SETTINGS", "HeuristicKind", "SearchSettings"]
