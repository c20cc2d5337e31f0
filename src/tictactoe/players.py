"""
Player strategies. Every player exposes a display ``name`` and
``move(game, mark) -> Position``. Players read ``game.board`` but never write
to it; the runner applies the returned position.
"""
from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from .board import Board, Mark, Position
from .node import GameTreeNode
from .tactics import immediate_winning_moves

logger = logging.getLogger(__name__)

DEFAULT_COMPUTER_NAME = "Tandy 400"


class Player(ABC):
    name: str

    @abstractmethod
    def move(self, game, mark: Mark) -> Position:
        """Return the position to play; the runner writes it to the board."""


class HumanPlayer(Player):
    def __init__(
        self,
        name: str,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.name = name
        self._input = input_fn
        self._output = output_fn

    def move(self, game, mark: Mark) -> Position:
        game.show()
        while True:
            self._output(f"{self.name}: please select your space")
            pos = parse_position(self._input(""))
            if pos is not None:
                return pos
            self._output("Invalid coordinate!")


def parse_position(raw: str) -> Optional[Position]:
    """Parse ``"row,col"``; None when malformed or off the grid."""
    parts = raw.strip().split(",")
    if len(parts) != 2:
        return None
    try:
        row, col = (int(p) for p in parts)
    except ValueError:
        return None
    if not all(0 <= coord <= 2 for coord in (row, col)):
        return None
    return row, col


class RandomComputerPlayer(Player):
    def __init__(self, name: str = DEFAULT_COMPUTER_NAME, rng: Optional[random.Random] = None) -> None:
        self.name = name
        self.rng = rng if rng is not None else random.Random()

    def move(self, game, mark: Mark) -> Position:
        return self.random_move(game.board)

    def random_move(self, board: Board) -> Position:
        while True:
            pos = (self.rng.randrange(3), self.rng.randrange(3))
            if board.is_empty(pos):
                return pos


class ComputerPlayer(RandomComputerPlayer):
    """Takes an immediate win when one exists, otherwise plays at random."""

    def move(self, game, mark: Mark) -> Position:
        wins = immediate_winning_moves(game.board, mark)
        if wins:
            return wins[0]
        return self.random_move(game.board)


class PerfectComputerPlayer(Player):
    def __init__(self, name: str = DEFAULT_COMPUTER_NAME) -> None:
        self.name = name

    def move(self, game, mark: Mark) -> Position:
        return self.best_move(game.board, mark)

    def best_move(self, board: Board, mark: Mark) -> Position:
        """Greedy scan of the root's children in row-major order.

        The first child is kept unless it is losing and a later child is not,
        or a later child is winning outright.
        """
        root = GameTreeNode(board.clone(), mark)

        best: Optional[GameTreeNode] = None
        for child in root.iter_children():
            if best is None:
                best = child
            elif best.is_losing_for(mark) and not child.is_losing_for(mark):
                best = child
            elif child.is_winning_for(mark):
                best = child

        if best is None:
            raise ValueError("no legal moves left on the board")
        logger.debug("%s (%s) picks %s on %s", self.name, mark, best.prev_move, board.serialize())
        return best.prev_move  # type: ignore[return-value]


PLAYER_KINDS: Tuple[str, ...] = ("human", "random", "computer", "perfect")


def make_player(kind: str, name: Optional[str] = None, rng: Optional[random.Random] = None) -> Player:
    if kind == "human":
        return HumanPlayer(name or "Player")
    if kind == "random":
        return RandomComputerPlayer(name or DEFAULT_COMPUTER_NAME, rng=rng)
    if kind == "computer":
        return ComputerPlayer(name or DEFAULT_COMPUTER_NAME, rng=rng)
    if kind == "perfect":
        return PerfectComputerPlayer(name or DEFAULT_COMPUTER_NAME)
    raise ValueError(f"Unknown player kind: {kind}")
