"""Conway's game of life on a bounded grid."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, Optional


class CellState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


class LifeBoard:
    """A width x height grid of cells, stored row by row; edges do not wrap."""

    def __init__(self, width: int, height: int, cells: Optional[Iterable[CellState]] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        if cells is None:
            self.cells = [CellState.DEAD] * (width * height)
        else:
            self.cells = list(cells)
            if len(self.cells) != width * height:
                raise ValueError("cell count does not match board size")

    @classmethod
    def random(cls, width: int, height: int, rng: Optional[random.Random] = None) -> LifeBoard:
        """A board where each cell is alive with probability one in five."""
        rng = rng if rng is not None else random.Random()
        return cls(
            width,
            height,
            (CellState.ALIVE if rng.randrange(5) == 0 else CellState.DEAD for _ in range(width * height)),
        )

    @classmethod
    def from_rows(cls, rows: list[str], alive: str = "#") -> LifeBoard:
        """Build from equal-length strings where ``alive`` marks a live cell."""
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("rows must be non-empty and of equal length")
        cells = [CellState.ALIVE if ch == alive else CellState.DEAD for row in rows for ch in row]
        return cls(len(rows[0]), len(rows), cells)

    def to_rows(self, alive: str = "#", dead: str = ".") -> list[str]:
        return [
            "".join(alive if self.is_alive(x, y) else dead for x in range(self.width))
            for y in range(self.height)
        ]

    def is_alive(self, x: int, y: int) -> bool:
        return self.cells[y * self.width + x] is CellState.ALIVE

    @property
    def population(self) -> int:
        return sum(cell is CellState.ALIVE for cell in self.cells)

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the eight around (x, y)."""
        return sum(
            self.is_alive(x + i, y + j)
            for j in (-1, 0, 1)
            for i in (-1, 0, 1)
            if (i, j) != (0, 0) and 0 <= x + i < self.width and 0 <= y + j < self.height
        )

    def _next_state(self, x: int, y: int) -> CellState:
        current = self.cells[y * self.width + x]
        count = self.neighbors(x, y)
        if current is CellState.ALIVE:
            return CellState.ALIVE if count in (2, 3) else CellState.DEAD
        return CellState.ALIVE if count == 3 else CellState.DEAD

    def step(self) -> None:
        """Advance the whole board by one generation."""
        self.cells = [
            self._next_state(x, y) for y in range(self.height) for x in range(self.width)
        ]