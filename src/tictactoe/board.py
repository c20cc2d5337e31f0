"""
Board model: a fixed 3x3 grid of optional marks, line scans, winner/tie checks.
Notes:
- A cell holds a Mark or None. There is no "empty" mark.
- Positions are (row, column) pairs, row-major, each coordinate in [0, 2].
- Boards serialize to 9 digits (0=empty, 1=X, 2=O) for the CLI.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

Position = Tuple[int, int]
Cell = Optional["Mark"]


class Mark(Enum):
    X = 1
    O = 2

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.name


class IllegalMoveError(Exception):
    """Raised when a mark is placed on an occupied cell."""


ROWS = [[(r, c) for c in range(3)] for r in range(3)]
COLUMNS = [[(r, c) for r in range(3)] for c in range(3)]
DIAGONALS = [
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]
WIN_LINES = ROWS + COLUMNS + DIAGONALS
ALL_POSITIONS = [(r, c) for r in range(3) for c in range(3)]


class Board:
    def __init__(self, grid: Optional[List[List[Cell]]] = None) -> None:
        if grid is None:
            grid = self.blank_grid()
        self._grid: List[List[Cell]] = [list(row) for row in grid]

    @staticmethod
    def blank_grid() -> List[List[Cell]]:
        return [[None] * 3 for _ in range(3)]

    def get(self, pos: Position) -> Cell:
        row, col = pos
        return self._grid[row][col]

    def set(self, pos: Position, mark: Mark) -> None:
        if not self.is_empty(pos):
            raise IllegalMoveError(f"mark already placed at {pos}")
        row, col = pos
        self._grid[row][col] = mark

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) is None

    def empty_positions(self) -> List[Position]:
        return [pos for pos in ALL_POSITIONS if self.is_empty(pos)]

    def rows(self) -> List[List[Cell]]:
        return [list(row) for row in self._grid]

    def columns(self) -> List[List[Cell]]:
        return [[self.get(pos) for pos in line] for line in COLUMNS]

    def diagonals(self) -> List[List[Cell]]:
        return [[self.get(pos) for pos in line] for line in DIAGONALS]

    def lines(self) -> Iterator[List[Cell]]:
        for line in WIN_LINES:
            yield [self.get(pos) for pos in line]

    def winner(self) -> Optional[Mark]:
        g = self._grid
        for (r0, c0), (r1, c1), (r2, c2) in WIN_LINES:
            a = g[r0][c0]
            if a is not None and a is g[r1][c1] and a is g[r2][c2]:
                return a
        return None

    def is_won(self) -> bool:
        return self.winner() is not None

    def is_tied(self) -> bool:
        if self.is_won():
            return False
        return all(cell is not None for row in self._grid for cell in row)

    def is_over(self) -> bool:
        return self.is_won() or self.is_tied()

    def clone(self) -> "Board":
        return Board(self._grid)

    def count(self, mark: Mark) -> int:
        return sum(1 for row in self._grid for cell in row if cell is mark)

    def serialize(self) -> str:
        return ''.join('0' if cell is None else str(cell.value) for row in self._grid for cell in row)

    @classmethod
    def from_string(cls, raw: str) -> "Board":
        raw = raw.strip()
        if len(raw) != 9 or any(c not in "012" for c in raw):
            raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
        cells = [None if c == '0' else Mark(int(c)) for c in raw]
        return cls([cells[r * 3:r * 3 + 3] for r in range(3)])

    def render(self) -> str:
        return "\n".join(
            " ".join('.' if cell is None else cell.name for cell in row) for row in self._grid
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"Board({self.serialize()!r})"


def next_mark(board: Board) -> Mark:
    return Mark.X if board.count(Mark.X) == board.count(Mark.O) else Mark.O


def is_valid_state(board: Board) -> bool:
    x_count, o_count = board.count(Mark.X), board.count(Mark.O)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    # no double winners
    def count_wins(mark: Mark) -> int:
        return sum(1 for line in board.lines() if all(cell is mark for cell in line))
    x_wins, o_wins = count_wins(Mark.X), count_wins(Mark.O)
    if x_wins > 0 and o_wins > 0:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True
