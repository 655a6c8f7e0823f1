"""Greedy pair AI for Misère Nim.

When the number of sticks left is odd, take the first pair of adjacent
unmarked sticks in scan order; otherwise, or when no such pair exists,
play a random move. Shown as "Smart" in competition transcripts.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from ..board import Board
from ..models import AIConfig, Move
from .base import BaseAI
from .random_ai import RandomAI

logger = logging.getLogger(__name__)


class GreedyPairAI(BaseAI):
    """AI that clears the first adjacent pair on odd stick counts."""

    def __init__(
        self,
        player_number: int,
        config: Optional[AIConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(player_number, config, rng)
        # The fallback shares this instance's generator.
        self._fallback = RandomAI(player_number, self.config, rng=self.rng)

    def produce_move(self, board: Board) -> Move:
        self.move_count += 1
        if board.unmarked_count() % 2 == 0:
            return self._fallback.produce_move(board)

        pair = self.find_adjacent_pair(board)
        if pair is None:
            logger.debug("No adjacent pair left; falling back to random play")
            return self._fallback.produce_move(board)
        return pair

    @staticmethod
    def find_adjacent_pair(board: Board) -> Move | None:
        """First ``(i, i+1)`` pair of unmarked sticks in scan order."""
        for row in range(1, board.row_count() + 1):
            mask = board.unmarked_mask(row)
            for i in range(len(mask) - 1):
                if mask[i] and mask[i + 1]:
                    return Move(row=row, left=i + 1, right=i + 2)
        return None

    def evaluate_position(self, board: Board) -> float:
        """Odd stick counts favour the mover under this heuristic."""
        return 1.0 if board.unmarked_count() % 2 == 1 else 0.0
