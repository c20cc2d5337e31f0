from typing import Callable, Iterable, List

import pytest

from tictactoe.board import Board, Mark, Position


def board_from_marks(xs: Iterable[Position] = (), os_: Iterable[Position] = ()) -> Board:
    b = Board()
    for pos in xs:
        b.set(pos, Mark.X)
    for pos in os_:
        b.set(pos, Mark.O)
    return b


class ScriptedPlayer:
    """Plays a fixed list of positions, one per request."""

    def __init__(self, name: str, moves: List[Position]):
        self.name = name
        self.moves = list(moves)
        self.requests = 0

    def move(self, game, mark):
        self.requests += 1
        return self.moves.pop(0)


@pytest.fixture
def silent() -> Callable[[str], None]:
    return lambda _msg: None
