from misere_nim.models import Move, Run
from misere_nim.runs import RunScanner, parity_vector


def test_runs_of_row(board_factory):
    board = board_factory("UUMUMMUUU")
    assert RunScanner(board).runs_of(1) == [
        Run(row=1, left=1, right=2),
        Run(row=1, left=4, right=4),
        Run(row=1, left=7, right=9),
    ]


def test_fully_marked_row_has_no_runs(board_factory):
    assert RunScanner(board_factory("MMM")).runs_of(1) == []


def test_singles_and_multi_runs(board_factory):
    scanner = RunScanner(board_factory("UMUUMU"))
    assert [str(r) for r in scanner.singles_of(1)] == ["1:1-1", "1:6-6"]
    assert [str(r) for r in scanner.multi_runs_of(1)] == ["1:3-4"]


def test_summary_counts_and_last_seen(board_factory):
    board = board_factory("UMUU", "U", "UUUMU", "MMM")
    summary = RunScanner(board).summarize()

    assert summary.big_run_count == 2
    assert summary.single_count == 3
    assert summary.last_big_run == Run(row=3, left=1, right=3)
    assert summary.last_single == Run(row=3, left=5, right=5)
    # 1 ^ 2 ^ 1 ^ 3 ^ 1
    assert summary.nim_sum == 0
    assert summary.parity_bits == (0, 0, 0, 0)
    assert summary.is_balanced
    assert not summary.high_bits_set
    assert not summary.low_bit_set


def test_summary_parity_bits(board_factory):
    summary = RunScanner(board_factory("UUUUUU", "U")).summarize()
    # 6 ^ 1 = 7
    assert summary.nim_sum == 7
    assert summary.parity_bits == (0, 1, 1, 1)
    assert summary.high_bits_set
    assert summary.low_bit_set


def test_summary_of_empty_board(board_factory):
    summary = RunScanner(board_factory("MM", "M")).summarize()
    assert summary.runs == ()
    assert summary.big_run_count == 0
    assert summary.single_count == 0
    assert summary.last_big_run is None
    assert summary.last_single is None
    assert summary.is_balanced
    assert summary.parity_bits == (0, 0, 0, 0)


def test_parity_width_grows_for_long_runs():
    from misere_nim.board import Board

    summary = RunScanner(Board([20, 3])).summarize(bit_width=4)
    assert summary.bit_width == 5
    # 20 ^ 3 = 23
    assert summary.parity_bits == (1, 0, 1, 1, 1)


def test_parity_vector_matches_xor():
    lengths = [1, 3, 5, 7, 9]
    bits = parity_vector(lengths, 4)
    assert int("".join(map(str, bits)), 2) == 1 ^ 3 ^ 5 ^ 7 ^ 9


def test_first_run_with_bit_and_last_odd_run(board_factory):
    summary = RunScanner(board_factory("UU", "UUUUU", "UUU", "UU")).summarize()
    assert summary.first_run_with_bit(2) == Run(row=2, left=1, right=5)
    assert summary.first_run_with_bit(1) == Run(row=1, left=1, right=2)
    assert summary.last_odd_run() == Run(row=3, left=1, right=3)


def test_rescan_after_move_excludes_marked_range(default_board):
    default_board.apply_move(Move(row=5, left=2, right=6))
    runs = RunScanner(default_board).runs_of(5)
    assert [(r.left, r.right) for r in runs] == [(1, 1), (7, 9)]
