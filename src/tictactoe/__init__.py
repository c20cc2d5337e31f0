"""tictactoe package.

Board model, exhaustive game-tree search, player strategies, a game runner,
and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, IllegalMoveError, Mark
from .game import GameResult, TicTacToe
from .node import GameTreeNode
from .players import (
    ComputerPlayer,
    HumanPlayer,
    PerfectComputerPlayer,
    RandomComputerPlayer,
    make_player,
)

__all__ = [
    "Board",
    "Mark",
    "IllegalMoveError",
    "GameTreeNode",
    "TicTacToe",
    "GameResult",
    "HumanPlayer",
    "RandomComputerPlayer",
    "ComputerPlayer",
    "PerfectComputerPlayer",
    "make_player",
]
