"""
Base AI Player class for Misère Nim
Abstract base class that all computer strategies inherit from
"""

from abc import ABC, abstractmethod
from typing import Optional
import random

from ..board import Board
from ..models import AIConfig, Move
from ..runs import RunScanner, RunSummary


class BaseAI(ABC):
    """Abstract base class for all AI implementations"""

    def __init__(
        self,
        player_number: int,
        config: Optional[AIConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize AI player

        Args:
            player_number: The player number this AI controls (1-based)
            config: AI configuration settings
            rng: Random generator to use instead of one built from config
        """
        self.player_number = player_number
        self.config = config or AIConfig()
        self.move_count = 0

        # Per-instance RNG used for all stochastic behaviour. An explicit
        # generator wins, then rng_seed; otherwise the generator is seeded
        # from system entropy and play is not reproducible.
        if rng is not None:
            self.rng: random.Random = rng
        elif self.config.rng_seed is not None:
            self.rng = random.Random(int(self.config.rng_seed))
        else:
            self.rng = random.Random()

    @abstractmethod
    def produce_move(self, board: Board) -> Move:
        """
        Choose the next move for ``board``.

        Only called while ``board.unmarked_count() > 0``. Implementations
        must not mutate the board and must return a move the board accepts.

        Args:
            board: Current board

        Returns:
            Selected move
        """
        pass

    @abstractmethod
    def evaluate_position(self, board: Board) -> float:
        """
        Evaluate the current position from the mover's perspective

        Args:
            board: Current board

        Returns:
            Evaluation score (positive = good for the mover)
        """
        pass

    def summarize(self, board: Board) -> RunSummary:
        """Scan ``board`` once using the configured parity width."""
        return RunScanner(board).summarize(self.config.bit_width)

    def random_index(self, upper: int) -> int:
        """Uniform 1-based index in ``[1, upper]``."""
        return 1 + self.rng.randrange(upper)

    def __repr__(self) -> str:
        """String representation of AI"""
        return f"{self.__class__.__name__}(player={self.player_number})"
