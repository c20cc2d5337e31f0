from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from tictactoe.board import ALL_POSITIONS, WIN_LINES, Board, IllegalMoveError, Mark
from tictactoe.players import PerfectComputerPlayer

cells = st.sampled_from([None, Mark.X, Mark.O])
grids = st.lists(st.lists(cells, min_size=3, max_size=3), min_size=3, max_size=3)
positions = st.sampled_from(ALL_POSITIONS)
marks = st.sampled_from(list(Mark))


def _play(order: List[tuple], plies: int) -> Board:
    b = Board()
    mark = Mark.X
    for pos in order[:plies]:
        if b.is_over():
            break
        b.set(pos, mark)
        mark = mark.other
    return b


@given(grids)
def test_winner_only_with_a_full_line(grid):
    b = Board(grid)
    w = b.winner()
    if w is None:
        for line in WIN_LINES:
            vals = [b.get(p) for p in line]
            assert not (vals[0] is not None and vals[0] == vals[1] == vals[2])
    else:
        assert any(all(b.get(p) is w for p in line) for line in WIN_LINES)


@given(grids, positions, marks)
def test_clone_mutation_never_leaks(grid, pos, mark):
    b = Board(grid)
    before = b.get(pos)
    c = b.clone()
    if c.is_empty(pos):
        c.set(pos, mark)
    assert b.get(pos) is before
    assert b.serialize() == Board(grid).serialize()


@given(grids, positions, marks)
def test_set_on_occupied_always_fails(grid, pos, mark):
    b = Board(grid)
    if b.is_empty(pos):
        return
    before = b.serialize()
    with pytest.raises(IllegalMoveError):
        b.set(pos, mark)
    assert b.serialize() == before


@settings(max_examples=40, deadline=None)
@given(st.permutations(ALL_POSITIONS), st.integers(min_value=3, max_value=8))
def test_perfect_move_is_always_empty(order, plies):
    b = _play(order, plies)
    if b.is_over():
        return
    mark = Mark.X if b.count(Mark.X) == b.count(Mark.O) else Mark.O
    assert b.is_empty(PerfectComputerPlayer().best_move(b, mark))
