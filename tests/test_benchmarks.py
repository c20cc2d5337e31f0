from tictactoe.board import Board, Mark
from tictactoe.players import PerfectComputerPlayer


def test_benchmark_perfect_reply_to_corner_opening(benchmark):
    board = Board.from_string("100000000")
    pos = benchmark(PerfectComputerPlayer().best_move, board, Mark.O)
    assert pos == (1, 1)
