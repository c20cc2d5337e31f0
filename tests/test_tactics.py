from tictactoe.board import Board, Mark
from tictactoe.tactics import fork_moves, immediate_winning_moves

from conftest import board_from_marks


def test_immediate_wins_row_major():
    # X can finish row 0 or column 0
    b = board_from_marks(xs=[(0, 0), (0, 1), (1, 0)], os_=[(1, 1), (2, 2)])
    assert immediate_winning_moves(b, Mark.X) == [(0, 2), (2, 0)]
    assert immediate_winning_moves(b, Mark.O) == []


def test_no_wins_on_empty_board():
    assert immediate_winning_moves(Board(), Mark.X) == []
    assert fork_moves(Board(), Mark.X) == []


def test_fork_moves():
    b = board_from_marks(xs=[(0, 0), (1, 1)], os_=[(0, 1), (2, 2)])
    forks = fork_moves(b, Mark.X)
    assert (1, 0) in forks
    for pos in forks:
        c = b.clone()
        c.set(pos, Mark.X)
        assert len(immediate_winning_moves(c, Mark.X)) >= 2
