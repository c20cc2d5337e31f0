"""
Game-tree node: exhaustive minimax classification for a given mark.

A node is (board snapshot, mark to move next, move that produced it). The
predicates walk the full subtree on every call; nothing is cached.
- losing for M: M to move and every child loses, or the opponent to move and
  some child loses. Terminal: the opponent has won (a tie is not a loss).
- winning for M: M to move and some child wins, or the opponent to move and
  every child wins. Terminal: M has won.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

from .board import Board, Mark, Position


class GameTreeNode:
    def __init__(self, board: Board, next_player: Mark, prev_move: Optional[Position] = None) -> None:
        self.board = board
        self.next_player = next_player
        self.prev_move = prev_move

    def iter_children(self) -> Iterator["GameTreeNode"]:
        """Yield one child per empty cell in row-major order."""
        for pos in self.board.empty_positions():
            new_board = self.board.clone()
            new_board.set(pos, self.next_player)
            yield GameTreeNode(new_board, self.next_player.other, pos)

    def children(self) -> List["GameTreeNode"]:
        return list(self.iter_children())

    def is_losing_for(self, player: Mark) -> bool:
        if self.board.is_over():
            return self.board.winner() is player.other

        if self.next_player is player:
            return all(node.is_losing_for(player) for node in self.iter_children())
        return any(node.is_losing_for(player) for node in self.iter_children())

    def is_winning_for(self, player: Mark) -> bool:
        if self.board.is_over():
            return self.board.winner() is player

        if self.next_player is player:
            return any(node.is_winning_for(player) for node in self.iter_children())
        return all(node.is_winning_for(player) for node in self.iter_children())

    def __repr__(self) -> str:
        return f"GameTreeNode({self.board.serialize()}, next={self.next_player}, prev={self.prev_move})"
