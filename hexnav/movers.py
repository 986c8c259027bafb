"""Mover profiles translating terrain into obstacle tables.

Each kind of mover reacts to terrain differently, so the same map produces a
different obstacle table per mover. Profiles can be declared in TOML::

    [movers.horse]
    terrain_costs = { forest = 2.0, swamp = 3.0, water = inf }

    [movers.bird]
    terrain_costs = {}
"""

from __future__ import annotations

import math
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cells import Key
from .obstacles import Obstacle

TerrainMap = Mapping[Key | Tuple[int, int], str]


class MoverProfile(BaseModel):
    """Terrain multipliers for one kind of mover."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    terrain_costs: Dict[str, float] = Field(default_factory=dict)
    default_cost: float = Field(default=1.0, gt=0.0)

    @field_validator("terrain_costs")
    @classmethod
    def _positive_costs(cls, value: Dict[str, float]) -> Dict[str, float]:
        for terrain, cost in value.items():
            if math.isnan(cost) or cost <= 0:
                raise ValueError(f"cost for terrain {terrain!r} must be positive")
        return {terrain: float(cost) for terrain, cost in value.items()}

    def multiplier(self, terrain: str) -> float:
        return self.terrain_costs.get(terrain, self.default_cost)

    def obstacles(self, terrain: TerrainMap) -> List[Obstacle]:
        """Return obstacle entries for every cell this mover does not cross at unit cost.

        Entries are ordered by coordinate so the same map always yields the
        same table.
        """

        entries: List[Obstacle] = []
        for coord, kind in terrain.items():
            key = coord if isinstance(coord, Key) else Key(*coord)
            cost = self.multiplier(kind)
            if cost != 1.0:
                entries.append(Obstacle(key.q, key.r, cost))
        entries.sort(key=lambda entry: entry.key)
        return entries


def load_profiles(source: Mapping[str, Any] | Path | str) -> Dict[str, MoverProfile]:
    """Load mover profiles from a TOML file path or an already parsed mapping."""

    if isinstance(source, str | Path):
        with Path(source).open("rb") as handle:
            data: Mapping[str, Any] = tomllib.load(handle)
    else:
        data = source

    movers = data.get("movers", {})
    if not isinstance(movers, Mapping):
        raise TypeError("movers must be a table of profile definitions")
    profiles: Dict[str, MoverProfile] = {}
    for name, payload in movers.items():
        if not isinstance(payload, Mapping):
            raise TypeError(f"profile {name!r} must be a table")
        profiles[name] = MoverProfile(name=name, **payload)
    return profiles
