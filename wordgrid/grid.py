from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GridGeometry:
    """Row-major rows x cols grid with 8-directional adjacency."""

    rows: int = 4
    cols: int = 4
    _neighbors: tuple[frozenset[int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.rows, int) or not isinstance(self.cols, int):
            raise ValueError(f"Grid dimensions must be integers, got {self.rows!r}x{self.cols!r}")
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")

        # Precompute adjacency lists
        neighbors = []
        for idx in range(self.rows * self.cols):
            r, c = divmod(idx, self.cols)
            adj = set()
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    if dr == 0 and dc == 0:
                        continue
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < self.rows and 0 <= nc < self.cols:
                        adj.add(nr * self.cols + nc)
            neighbors.append(frozenset(adj))
        object.__setattr__(self, "_neighbors", tuple(neighbors))

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def neighbors(self, index: int) -> frozenset[int]:
        if not 0 <= index < self.size:
            raise IndexError(f"Cell {index} outside {self.rows}x{self.cols} grid")
        return self._neighbors[index]

    def windows(self) -> Iterator[tuple[int, int, int, int]]:
        """Yield the cell indices of every 2x2 sub-square, top-left first."""
        for r in range(self.rows - 1):
            for c in range(self.cols - 1):
                top_left = r * self.cols + c
                yield (top_left, top_left + 1, top_left + self.cols, top_left + self.cols + 1)

    def check_board(self, board: Sequence[str]):
        if len(board) != self.size:
            raise ValueError(
                f"Board has {len(board)} cells, expected {self.size} for a {self.rows}x{self.cols} grid"
            )


DEFAULT_GRID = GridGeometry(4, 4)
