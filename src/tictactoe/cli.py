from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from .board import Board, is_valid_state, next_mark
from .game import TicTacToe
from .players import HumanPlayer, PerfectComputerPlayer, make_player
from .tactics import fork_moves, immediate_winning_moves
from .tournament import COMPUTER_KINDS, play_match
from .tracking import log_metrics, log_params, maybe_mlflow_run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Global seed for reproducibility")

    # play: human vs computer
    p_play = sub.add_parser("play", help="Play a game against the computer (default command)")
    p_play.add_argument(
        "--name",
        default=None,
        help="Your display name (default: $TTT_PLAYER_NAME or 'Player')",
    )
    p_play.add_argument(
        "--opponent",
        choices=list(COMPUTER_KINDS),
        default="perfect",
        help="Computer strategy to play against (default: perfect)",
    )

    # move: perfect move for a board
    p_move = sub.add_parser("move", help="Show the perfect move for the side to move")
    p_move.add_argument("--board", required=True, help="Board string, e.g., 100020000 (0=empty,1=X,2=O)")

    # match: computer vs computer
    p_match = sub.add_parser("match", help="Play silent games between two computer strategies")
    p_match.add_argument("--x", dest="kind_x", choices=list(COMPUTER_KINDS), default="perfect")
    p_match.add_argument("--o", dest="kind_o", choices=list(COMPUTER_KINDS), default="random")
    p_match.add_argument("--games", type=int, default=10, help="Number of games (default: 10)")
    p_match.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default="none",
        help="Experiment tracking backend",
    )
    p_match.add_argument(
        "--log-dir",
        type=Path,
        default=Path("runs"),
        help="Directory for tracking logs (for mlflow local backend)",
    )

    return p


def _set_global_seed(seed: Optional[int]) -> None:
    if seed is None:
        return
    import random

    import numpy as np

    random.seed(seed)
    np.random.seed(seed)


def _parse_board_arg(raw: str) -> Optional[Board]:
    try:
        board = Board.from_string(raw)
    except ValueError as exc:
        logging.error("%s", exc)
        return None
    if not is_valid_state(board):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def _cmd_play(ns: argparse.Namespace) -> int:
    name = ns.name or os.getenv("TTT_PLAYER_NAME") or "Player"
    human = HumanPlayer(name)
    TicTacToe(human, make_player(ns.opponent)).run()
    return 0


def _cmd_move(ns: argparse.Namespace) -> int:
    board = _parse_board_arg(ns.board)
    if board is None:
        return 2
    if board.is_over():
        logging.error("Game is already over.")
        return 2
    mark = next_mark(board)
    pos = PerfectComputerPlayer().best_move(board, mark)
    logging.info(
        "to_move=%s move=%d,%d wins=%s forks=%s",
        mark,
        pos[0],
        pos[1],
        immediate_winning_moves(board, mark),
        fork_moves(board, mark),
    )
    return 0


def _cmd_match(ns: argparse.Namespace) -> int:
    if ns.games < 1:
        logging.error("--games must be positive: %s", ns.games)
        return 2
    with maybe_mlflow_run(ns.tracking == "mlflow", run_name="match", log_dir=ns.log_dir) as tracking:
        summary = play_match(ns.kind_x, ns.kind_o, ns.games, seed=ns.seed)
        if tracking:
            log_params({"x": ns.kind_x, "o": ns.kind_o, "games": ns.games, "seed": ns.seed})
            log_metrics(summary.as_metrics())
        elif ns.tracking == "mlflow":
            logging.warning("mlflow is not installed; skipping tracking")
    logging.info(
        "x_win_rate=%.3f o_win_rate=%.3f tie_rate=%.3f",
        summary.x_win_rate,
        summary.o_win_rate,
        summary.tie_rate,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("tictactoe-perfect-play"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    _set_global_seed(ns.seed)

    if ns.cmd == "move":
        return _cmd_move(ns)
    if ns.cmd == "match":
        return _cmd_match(ns)
    if ns.cmd is None:
        ns = parser.parse_args(["play"])
    return _cmd_play(ns)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
