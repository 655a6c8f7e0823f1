"""
Optimal heuristic AI for Misère Nim.

Every run of unmarked sticks is a Nim pile whose size is the run length.
A move removes a contiguous span from one run, possibly splitting it in
two; the normal-play value of a run of length ``n`` is still ``n`` because
``a XOR b <= a + b < n`` for any split ``(a, b)``. Ordinary Nim-sum play is
therefore correct as long as at least one run longer than a single stick
survives the move, which always holds when two or more big runs exist.

Misère play only changes the end-game, when the last big run disappears:

1. No big run: only singles remain, so take one.
2. One big run: reduce it to one stick or clear it, whichever leaves the
   opponent an odd number of singles.
3. Two or more big runs, Nim-sum above the low bit: standard Nim move.
   Take the most significant bit of the Nim-sum, pick the first run whose
   length has it, and trim that run from its left end to
   ``length XOR nim_sum`` sticks.
4. Only the low bit is set: remove the last scanned single (or the
   right-end stick of the last odd-length run when no single exists).
5. Nim-sum zero: the mover is losing against best play; mark one stick
   from the last big run.

The parity vector is the XOR of all run lengths across the whole board.
"""

from __future__ import annotations

import logging

from ..board import Board
from ..errors import InvalidStateError
from ..models import Move, Run
from ..runs import RunSummary
from .base import BaseAI

logger = logging.getLogger(__name__)


def _trim_from_left(run: Run, keep: int) -> Move:
    """Move that leaves only the rightmost ``keep`` sticks of ``run``."""
    remove = run.length - keep
    if not 0 < remove <= run.length:
        raise InvalidStateError(
            f"Cannot trim run {run} to {keep} sticks",
            context={"run": str(run), "keep": keep},
        )
    return Move(row=run.row, left=run.left, right=run.left + remove - 1)


def _single_stick(row: int, index: int) -> Move:
    return Move(row=row, left=index, right=index)


class HeuristicAI(BaseAI):
    """AI that plays the misère Nim-sum strategy over runs."""

    def produce_move(self, board: Board) -> Move:
        summary = self.summarize(board)
        move = self.choose_move(summary)
        self.move_count += 1
        logger.debug(
            "H=%d S=%d P=%s -> %s",
            summary.big_run_count,
            summary.single_count,
            "".join(map(str, summary.parity_bits)),
            move,
        )
        return move

    def choose_move(self, summary: RunSummary) -> Move:
        """Pick a move from a precomputed run summary."""
        if not summary.runs:
            raise InvalidStateError("No unmarked sticks left to move on")

        if summary.big_run_count == 0:
            single = self._require(summary.last_single, "single")
            return _single_stick(single.row, single.left)

        if summary.big_run_count == 1:
            run = self._require(summary.last_big_run, "big run")
            keep = 1 if summary.single_count % 2 == 0 else 0
            return _trim_from_left(run, keep)

        if summary.high_bits_set:
            bit = summary.nim_sum.bit_length() - 1
            run = self._require(summary.first_run_with_bit(bit), "pile")
            return _trim_from_left(run, run.length ^ summary.nim_sum)

        if summary.low_bit_set:
            if summary.last_single is not None:
                single = summary.last_single
                return _single_stick(single.row, single.left)
            run = self._require(summary.last_odd_run(), "odd run")
            return _single_stick(run.row, run.right)

        run = self._require(summary.last_big_run, "big run")
        return _single_stick(run.row, run.left)

    def evaluate_position(self, board: Board) -> float:
        """Return 1.0 if the mover can force a win, else -1.0."""
        return 1.0 if self.is_winning(self.summarize(board)) else -1.0

    @staticmethod
    def is_winning(summary: RunSummary) -> bool:
        """Misère outcome for the player to move.

        With only singles left the mover wins on an even count (an empty
        board included). Otherwise the ordinary Nim-sum decides.
        """
        if summary.big_run_count == 0:
            return summary.single_count % 2 == 0
        return summary.nim_sum != 0

    @staticmethod
    def _require(run: Run | None, what: str) -> Run:
        if run is None:
            raise InvalidStateError(f"Run summary has no {what}")
        return run
