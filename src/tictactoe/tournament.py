"""
Silent matches between computer strategies.

Useful as a sanity harness: perfect vs perfect should always tie, and the
perfect player should never lose to the random or greedy players.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .board import Mark
from .game import TicTacToe
from .players import make_player

logger = logging.getLogger(__name__)

COMPUTER_KINDS = ("random", "computer", "perfect")

# outcome codes for np.bincount
_TIE, _X, _O = 0, 1, 2


@dataclass
class MatchSummary:
    kind_x: str
    kind_o: str
    games: int
    x_wins: int
    o_wins: int
    ties: int
    mean_length: float

    @property
    def x_win_rate(self) -> float:
        return self.x_wins / self.games if self.games else 0.0

    @property
    def o_win_rate(self) -> float:
        return self.o_wins / self.games if self.games else 0.0

    @property
    def tie_rate(self) -> float:
        return self.ties / self.games if self.games else 0.0

    def as_metrics(self) -> Dict[str, float]:
        return {
            "x_wins": float(self.x_wins),
            "o_wins": float(self.o_wins),
            "ties": float(self.ties),
            "x_win_rate": self.x_win_rate,
            "o_win_rate": self.o_win_rate,
            "tie_rate": self.tie_rate,
            "mean_length": self.mean_length,
        }


def play_match(kind_x: str, kind_o: str, games: int, seed: Optional[int] = None) -> MatchSummary:
    for kind in (kind_x, kind_o):
        if kind not in COMPUTER_KINDS:
            raise ValueError(f"Matches need computer players, got: {kind}")
    if games < 1:
        raise ValueError(f"games must be positive, got: {games}")

    rng = random.Random(seed)
    outcomes = np.zeros(games, dtype=np.int64)
    lengths = np.zeros(games, dtype=np.int64)
    for i in range(games):
        game = TicTacToe(
            make_player(kind_x, name=f"{kind_x} (X)", rng=rng),
            make_player(kind_o, name=f"{kind_o} (O)", rng=rng),
            output_fn=lambda _msg: None,
        )
        result = game.run()
        if result.winner is Mark.X:
            outcomes[i] = _X
        elif result.winner is Mark.O:
            outcomes[i] = _O
        else:
            outcomes[i] = _TIE
        lengths[i] = len(result.moves)
        logger.debug("game %d: winner=%s length=%d", i, result.winner, lengths[i])

    counts = np.bincount(outcomes, minlength=3)
    summary = MatchSummary(
        kind_x=kind_x,
        kind_o=kind_o,
        games=games,
        x_wins=int(counts[_X]),
        o_wins=int(counts[_O]),
        ties=int(counts[_TIE]),
        mean_length=float(np.mean(lengths)),
    )
    logger.info(
        "%s vs %s over %d games: x=%d o=%d ties=%d mean_length=%.2f",
        kind_x, kind_o, games, summary.x_wins, summary.o_wins, summary.ties, summary.mean_length,
    )
    return summary
