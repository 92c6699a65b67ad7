from __future__ import annotations

import math
from typing import Iterable, Sequence

from wordsearch.errors import InvalidArgumentError
from wordsearch.lexicon import fold

DEFAULT_TILES = (
    "E", "E", "C", "A",
    "A", "L", "E", "P",
    "H", "N", "B", "O",
    "Q", "T", "T", "Y",
)


def _neighbor_table(size: int) -> list[list[int]]:
    # Row offset outer, column offset inner: row-major neighbor order.
    neighbors: list[list[int]] = []
    for idx in range(size * size):
        r, c = divmod(idx, size)
        adj = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = r + dr, c + dc
                if 0 <= nr < size and 0 <= nc < size:
                    adj.append(nr * size + nc)
        neighbors.append(adj)
    return neighbors


class Board:
    """Square grid of tiles stored in row-major order.

    A tile may hold several letters (e.g. "QU"). Positions are linear
    indexes from 0 (top-left) to N*N - 1 (bottom-right).
    """

    __slots__ = ("tiles", "size", "_neighbors")

    def __init__(self, tiles: Sequence[str], max_size: int | None = None):
        if tiles is None:
            raise InvalidArgumentError("Board tiles must not be None")
        tiles = list(tiles)
        for i, tile in enumerate(tiles):
            if not isinstance(tile, str) or not tile:
                raise InvalidArgumentError(f"Tile {i} must be a non-empty string, got {tile!r}")

        size = math.isqrt(len(tiles))
        if size == 0 or size * size != len(tiles):
            raise InvalidArgumentError(f"Tile count {len(tiles)} is not a positive perfect square")
        if max_size is not None and size > max_size:
            raise InvalidArgumentError(f"Board size {size} exceeds maximum {max_size}")

        self.tiles: tuple[str, ...] = tuple(fold(t) for t in tiles)
        self.size: int = size
        self._neighbors = _neighbor_table(size)

    @classmethod
    def default(cls) -> Board:
        return cls(DEFAULT_TILES)

    def __len__(self) -> int:
        return len(self.tiles)

    def _check(self, position: int):
        if not isinstance(position, int) or not 0 <= position < len(self.tiles):
            raise InvalidArgumentError(f"Position {position!r} is outside a {self.size}x{self.size} board")

    def tile_at(self, position: int) -> str:
        self._check(position)
        return self.tiles[position]

    def row_col(self, position: int) -> tuple[int, int]:
        self._check(position)
        return divmod(position, self.size)

    def index_of(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise InvalidArgumentError(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        return row * self.size + col

    def neighbors(self, position: int) -> list[int]:
        return self._neighbors[position]

    def adjacent_positions(self, position: int, excluding: Iterable[int] = ()) -> list[int]:
        self._check(position)
        excluded = set(excluding)
        return [p for p in self._neighbors[position] if p not in excluded]

    def is_adjacent(self, a: int, b: int) -> bool:
        self._check(a)
        self._check(b)
        return b in self._neighbors[a]

    def word_for(self, path: Iterable[int]) -> str:
        return "".join(self.tile_at(p) for p in path)

    def rows(self) -> list[list[str]]:
        n = self.size
        return [list(self.tiles[r * n:(r + 1) * n]) for r in range(n)]

    def render(self) -> str:
        return "".join("\n| " + "".join(t + " " for t in row) + "|" for row in self.rows())
