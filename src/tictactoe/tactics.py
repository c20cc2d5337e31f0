"""
Tactics and simple motifs: immediate wins and forks.
Notes:
- Local motifs are cheap one-ply lookaheads; they never replace the full search.
"""
from typing import List

from .board import Board, Mark, Position


def immediate_winning_moves(board: Board, mark: Mark) -> List[Position]:
    wins: List[Position] = []
    for pos in board.empty_positions():
        b = board.clone()
        b.set(pos, mark)
        if b.winner() is mark:
            wins.append(pos)
    return wins


def fork_moves(board: Board, mark: Mark) -> List[Position]:
    forks: List[Position] = []
    for pos in board.empty_positions():
        b = board.clone()
        b.set(pos, mark)
        if b.is_won():
            continue
        if len(immediate_winning_moves(b, mark)) >= 2:
            forks.append(pos)
    return forks
