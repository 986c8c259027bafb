"""Validated settings for the navigation engine."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HeuristicKind(str, Enum):
    """Remaining-cost estimates the engine can use."""

    EUCLIDEAN = "euclidean"
    HEX = "hex"
    SQUARED = "squared"
    ZERO = "zero"


class NavigationSettings(BaseModel):
    """Grid constants shared by every search."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    step_cost: float = Field(default=1.0, gt=0.0)
    heuristic: HeuristicKind = HeuristicKind.EUCLIDEAN

    @field_validator("step_cost")
    @classmethod
    def _finite_step(cls, value: float) -> float:
        if value == float("inf"):
            raise ValueError("step_cost must be finite")
        return float(value)

    @property
    def admissible(self) -> bool:
        """Whether the configured heuristic guarantees optimal paths."""

        return self.heuristic is not HeuristicKind.SQUARED


DEFAULT_SETTINGS = NavigationSettings()
