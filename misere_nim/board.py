"""Stick board for Misère Nim.

Each row is stored as a numpy boolean array where ``True`` means the stick
at that position has been marked (removed). Rows and sticks are addressed
with 1-based indices everywhere in the public API; the arrays themselves
are 0-based.

The board is the only mutable object in a round. Strategies read it through
the query methods or :class:`misere_nim.runs.RunScanner` and never modify
it; the competition loop is the sole caller of :meth:`Board.apply_move`.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from .errors import InvalidMoveError, InvalidMoveReason, OutOfRangeError
from .models import BoardConfig, Move, default_row_lengths

__all__ = ["Board"]

UNMARKED_GLYPH = "|"
MARKED_GLYPH = "x"


class Board:
    """Rows of sticks with monotonic mark state."""

    def __init__(self, row_lengths: Iterable[int]):
        lengths = [int(n) for n in row_lengths]
        if not lengths:
            raise ValueError("A board needs at least one row")
        if any(n < 1 for n in lengths):
            raise ValueError(f"Row lengths must be positive, got {lengths}")
        self._rows: list[np.ndarray] = [np.zeros(n, dtype=bool) for n in lengths]

    @classmethod
    def from_config(cls, config: BoardConfig) -> Board:
        return cls(config.row_lengths)

    @classmethod
    def default(cls) -> Board:
        return cls(default_row_lengths())

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self._rows)

    def row_length(self, row: int) -> int:
        """Return the number of positions in ``row`` (1-based)."""
        return len(self._row(row))

    def row_lengths(self) -> list[int]:
        return [len(r) for r in self._rows]

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    def is_unmarked(self, row: int, index: int) -> bool:
        """Return True if stick ``index`` of ``row`` is still on the board.

        Raises:
            OutOfRangeError: if ``row`` or ``index`` is outside the board.
        """
        marks = self._row(row)
        if not 1 <= index <= len(marks):
            raise OutOfRangeError(
                f"Index {index} outside row {row} of length {len(marks)}",
                row=row,
                index=index,
            )
        return not bool(marks[index - 1])

    def unmarked_count(self) -> int:
        """Total unmarked sticks; zero means the round is over."""
        return int(sum(r.size - np.count_nonzero(r) for r in self._rows))

    def unmarked_mask(self, row: int) -> np.ndarray:
        """Return a read-only boolean array, ``True`` where unmarked."""
        mask = ~self._row(row)
        mask.flags.writeable = False
        return mask

    def snapshot(self) -> tuple[tuple[bool, ...], ...]:
        """Immutable copy of the mark state (``True`` = marked)."""
        return tuple(tuple(bool(v) for v in r) for r in self._rows)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def validate_move(self, move: Move) -> InvalidMoveReason | None:
        """Return why ``move`` is illegal, or ``None`` if it may be applied."""
        if not 1 <= move.row <= len(self._rows):
            return InvalidMoveReason.ROW_OUT_OF_RANGE
        length = len(self._rows[move.row - 1])
        if not (1 <= move.left <= length and 1 <= move.right <= length):
            return InvalidMoveReason.INDEX_OUT_OF_RANGE
        if move.left > move.right:
            return InvalidMoveReason.EMPTY_OR_INVERTED
        if self._rows[move.row - 1][move.left - 1:move.right].any():
            return InvalidMoveReason.ALREADY_MARKED
        return None

    def is_legal(self, move: Move) -> bool:
        return self.validate_move(move) is None

    def apply_move(self, move: Move) -> None:
        """Mark every stick covered by ``move``.

        Validation completes before any position is touched, so a rejected
        move leaves the board exactly as it was.

        Raises:
            InvalidMoveError: carrying the first violated rule.
        """
        reason = self.validate_move(move)
        if reason is not None:
            raise InvalidMoveError(
                f"Cannot apply move {move}: {reason.value}",
                reason=reason,
                move=move,
            )
        self._rows[move.row - 1][move.left - 1:move.right] = True

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def copy(self) -> Board:
        clone = Board.__new__(Board)
        clone._rows = [r.copy() for r in self._rows]
        return clone

    @classmethod
    def from_marks(cls, rows: Sequence[Sequence[bool]]) -> Board:
        """Build a board from explicit mark state (``True`` = marked)."""
        board = cls(len(r) for r in rows)
        for arr, marks in zip(board._rows, rows):
            arr[:] = np.asarray(marks, dtype=bool)
        return board

    def render(self) -> str:
        lines = []
        for i, marks in enumerate(self._rows, start=1):
            sticks = " ".join(MARKED_GLYPH if m else UNMARKED_GLYPH for m in marks)
            lines.append(f"{i}: {sticks}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Board(rows={self.row_lengths()}, "
            f"unmarked={self.unmarked_count()})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # mutable

    def _row(self, row: int) -> np.ndarray:
        if not 1 <= row <= len(self._rows):
            raise OutOfRangeError(
                f"Row {row} outside board of {len(self._rows)} rows",
                row=row,
            )
        return self._rows[row - 1]
