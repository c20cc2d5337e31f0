"""
Game runner: owns the live board and two players keyed by mark, alternates
turns, and re-asks the same player whenever a move is rejected.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .board import ALL_POSITIONS, Board, IllegalMoveError, Mark, Position
from .players import Player

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    winner: Optional[Mark]
    winner_name: Optional[str]
    board: Board
    moves: List[Tuple[Mark, Position]] = field(default_factory=list)

    @property
    def is_tie(self) -> bool:
        return self.winner is None


class TicTacToe:
    def __init__(
        self,
        player_x: Player,
        player_o: Player,
        first: Mark = Mark.X,
        board: Optional[Board] = None,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.board = board if board is not None else Board()
        self.players: Dict[Mark, Player] = {Mark.X: player_x, Mark.O: player_o}
        self.turn = first
        self.moves: List[Tuple[Mark, Position]] = []
        self._output = output_fn

    def run(self) -> GameResult:
        while not self.board.is_over():
            self.play_turn()

        self.show()
        winner = self.board.winner()
        if winner is not None:
            name = self.players[winner].name
            self._output(f"{name} won the game!")
        else:
            name = None
            self._output("No one wins!")
        logger.debug("game over: winner=%s moves=%d", winner, len(self.moves))
        return GameResult(winner=winner, winner_name=name, board=self.board, moves=list(self.moves))

    def show(self) -> None:
        self._output(self.board.render())

    def play_turn(self) -> None:
        player = self.players[self.turn]
        while True:
            pos = player.move(self, self.turn)
            if self._place_mark(pos, self.turn):
                break
            logger.debug("%s (%s) tried %s; asking again", player.name, self.turn, pos)

        self.moves.append((self.turn, pos))
        self.turn = self.turn.other

    def _place_mark(self, pos: Position, mark: Mark) -> bool:
        if tuple(pos) not in ALL_POSITIONS:
            return False
        try:
            self.board.set(pos, mark)
        except IllegalMoveError:
            return False
        return True
