"""Cell model consumed by the search engine, plus a bounded axial hex grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import hypot, sqrt
from typing import ClassVar, Iterable, Iterator, Protocol, Tuple, runtime_checkable


@dataclass(frozen=True, slots=True, order=True)
class Key:
    """Value identity of a cell in axial ``(q, r)`` coordinates."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def distance_to(self, other: Key) -> int:
        return max(abs(self.q - other.q), abs(self.r - other.r), abs(self.s - other.s))

    def __str__(self) -> str:
        return f"{self.q},{self.r}"


@runtime_checkable
class Cell(Protocol):
    """Anything the engine can walk: a stable key, a planar position and neighbours."""

    @property
    def key(self) -> Key: ...

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    def neighbors(self) -> Iterable[Cell]: ...


def planar_distance(a: Cell, b: Cell) -> float:
    return hypot(a.x - b.x, a.y - b.y)


class Orientation(str, Enum):
    """Hex orientation used for the planar projection."""

    POINTY = "pointy"
    FLAT = "flat"


# axial (q, r) -> pixel, per unit size
_FORWARD = {
    Orientation.POINTY: (sqrt(3.0), sqrt(3.0) / 2.0, 0.0, 3.0 / 2.0),
    Orientation.FLAT: (3.0 / 2.0, 0.0, sqrt(3.0) / 2.0, sqrt(3.0)),
}


@dataclass(frozen=True)
class HexGrid:
    """A finite rhombus of axial cells, ``0 <= q < width`` and ``0 <= r < height``."""

    width: int
    height: int
    orientation: Orientation = Orientation.POINTY
    size: float = 1.0

    DIRECTIONS: ClassVar[Tuple[Tuple[int, int], ...]] = (
        (1, 0),
        (1, -1),
        (0, -1),
        (-1, 0),
        (-1, 1),
        (0, 1),
    )

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid dimensions must be positive")
        if self.size <= 0:
            raise ValueError("size must be positive")
        object.__setattr__(self, "orientation", Orientation(self.orientation))

    def contains(self, q: int, r: int) -> bool:
        return 0 <= q < self.width and 0 <= r < self.height

    def cell(self, q: int, r: int) -> GridHex:
        if not self.contains(q, r):
            raise ValueError(f"cell {q},{r} lies outside a {self.width}x{self.height} grid")
        return GridHex(q, r, self)

    def cells(self) -> Iterator[GridHex]:
        for r in range(self.height):
            for q in range(self.width):
                yield GridHex(q, r, self)

    def project(self, q: int, r: int) -> Tuple[float, float]:
        f0, f1, f2, f3 = _FORWARD[self.orientation]
        return (f0 * q + f1 * r) * self.size, (f2 * q + f3 * r) * self.size

    @property
    def spacing(self) -> float:
        """Planar distance between the centres of two adjacent cells."""

        return sqrt(3.0) * self.size


@dataclass(frozen=True)
class GridHex:
    """A cell of a :class:`HexGrid`. Equality and hashing use ``(q, r)`` only."""

    q: int
    r: int
    grid: HexGrid = field(compare=False, repr=False)

    @property
    def key(self) -> Key:
        return Key(self.q, self.r)

    @property
    def x(self) -> float:
        return self.grid.project(self.q, self.r)[0]

    @property
    def y(self) -> float:
        return self.grid.project(self.q, self.r)[1]

    def neighbors(self) -> Iterator[GridHex]:
        for dq, dr in HexGrid.DIRECTIONS:
            q, r = self.q + dq, self.r + dr
            if self.grid.contains(q, r):
                yield GridHex(q, r, self.grid)

    def __str__(self) -> str:
        return f"{self.q},{self.r}"
