"""Random AI implementation for Misère Nim.

This agent does not draw uniformly from the set of legal moves. It samples
a row, then a left stick, then a right stick, rejecting each draw until it
is acceptable. Downstream statistics depend on that exact process, so the
three rejection loops below must stay as they are.
"""

from __future__ import annotations

from ..board import Board
from ..models import Move
from .base import BaseAI


class RandomAI(BaseAI):
    """AI that produces rejection-sampled legal moves."""

    def produce_move(self, board: Board) -> Move:
        """Sample a legal move for ``board``.

        Each loop is unbounded; it terminates almost surely because the
        board has at least one unmarked stick whenever this is called.
        """
        row = self._draw_row(board)
        left = self._draw_left(board, row)
        right = self._draw_right(board, row, left)

        self.move_count += 1
        return Move(row=row, left=left, right=right)

    def _draw_row(self, board: Board) -> int:
        while True:
            row = self.random_index(board.row_count())
            if board.unmarked_mask(row).any():
                return row

    def _draw_left(self, board: Board, row: int) -> int:
        length = board.row_length(row)
        while True:
            left = self.random_index(length)
            if board.is_unmarked(row, left):
                return left

    def _draw_right(self, board: Board, row: int, left: int) -> int:
        length = board.row_length(row)
        while True:
            right = self.random_index(length)
            if right < left:
                continue
            if all(board.is_unmarked(row, i) for i in range(left, right + 1)):
                return right

    def evaluate_position(self, board: Board) -> float:
        """Return a small random evaluation for ``board``.

        RandomAI does not attempt to evaluate positions meaningfully.

        Returns:
            A small random float in ``[-0.1, 0.1]``.
        """
        _ = board  # unused in this implementation
        return self.rng.uniform(-0.1, 0.1)
