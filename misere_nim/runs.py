"""Run view over a :class:`~misere_nim.board.Board`.

A run is a maximal span of unmarked sticks inside one row. The optimal
strategy treats every run on the board as an independent Nim pile, so this
module also folds the runs into a :class:`RunSummary`: big-run and single
counts, the most recently scanned instance of each, and the Nim-sum with
its bit decomposition.

Scan order is row ascending, then left to right within a row. "Last"
always refers to that order.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from functools import reduce
from operator import xor

import numpy as np

from .board import Board
from .models import DEFAULT_BIT_WIDTH, Run

__all__ = [
    "RunScanner",
    "RunSummary",
    "parity_vector",
    "scan_mask",
]


def scan_mask(row: int, unmarked: np.ndarray) -> list[Run]:
    """Return the runs of one row given its unmarked mask."""
    padded = np.concatenate(([0], unmarked.astype(np.int8), [0]))
    edges = np.diff(padded)
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return [
        Run(row=row, left=int(s) + 1, right=int(e))
        for s, e in zip(starts, ends)
    ]


def parity_vector(lengths: Sequence[int], bit_width: int) -> tuple[int, ...]:
    """XOR the fixed-width binary digits of ``lengths`` column by column.

    Returns the bits most significant first. An empty input yields all
    zeros.
    """
    if not lengths:
        return (0,) * bit_width
    values = np.asarray(lengths, dtype=np.int64)
    shifts = np.arange(bit_width - 1, -1, -1, dtype=np.int64)
    digits = (values[:, None] >> shifts) & 1
    return tuple(int(b) for b in np.bitwise_xor.reduce(digits, axis=0))


@dataclasses.dataclass(frozen=True)
class RunSummary:
    """Immutable result of a single pass over every run on the board.

    Attributes:
        runs: Every run in scan order.
        big_run_count: Runs longer than one stick (H).
        single_count: Runs of exactly one stick (S).
        last_big_run: Most recently scanned run longer than one stick.
        last_single: Most recently scanned single-stick run.
        nim_sum: XOR of all run lengths.
        bit_width: Width of ``parity_bits``; at least the requested width
            and wide enough for the longest run.
        parity_bits: Bits of ``nim_sum``, most significant first (P).
    """
    runs: tuple[Run, ...]
    big_run_count: int
    single_count: int
    last_big_run: Run | None
    last_single: Run | None
    nim_sum: int
    bit_width: int
    parity_bits: tuple[int, ...]

    @property
    def is_balanced(self) -> bool:
        return self.nim_sum == 0

    @property
    def high_bits_set(self) -> bool:
        """True if any bit above the least significant one is set in P."""
        return self.nim_sum > 1

    @property
    def low_bit_set(self) -> bool:
        return bool(self.nim_sum & 1)

    def last_odd_run(self) -> Run | None:
        for run in reversed(self.runs):
            if run.length % 2 == 1:
                return run
        return None

    def first_run_with_bit(self, bit: int) -> Run | None:
        """First run in scan order whose length has ``bit`` set."""
        for run in self.runs:
            if (run.length >> bit) & 1:
                return run
        return None


class RunScanner:
    """Pure queries over a board's unmarked runs."""

    def __init__(self, board: Board):
        self.board = board

    def runs_of(self, row: int) -> list[Run]:
        return scan_mask(row, self.board.unmarked_mask(row))

    def singles_of(self, row: int) -> list[Run]:
        return [r for r in self.runs_of(row) if r.is_single]

    def multi_runs_of(self, row: int) -> list[Run]:
        return [r for r in self.runs_of(row) if not r.is_single]

    def all_runs(self) -> list[Run]:
        runs: list[Run] = []
        for row in range(1, self.board.row_count() + 1):
            runs.extend(self.runs_of(row))
        return runs

    def summarize(self, bit_width: int = DEFAULT_BIT_WIDTH) -> RunSummary:
        runs = tuple(self.all_runs())
        singles = [r for r in runs if r.is_single]
        bigs = [r for r in runs if not r.is_single]
        lengths = [r.length for r in runs]
        nim_sum = reduce(xor, lengths, 0)

        width = max(bit_width, max(lengths, default=0).bit_length())
        return RunSummary(
            runs=runs,
            big_run_count=len(bigs),
            single_count=len(singles),
            last_big_run=bigs[-1] if bigs else None,
            last_single=singles[-1] if singles else None,
            nim_sum=nim_sum,
            bit_width=width,
            parity_bits=parity_vector(lengths, width),
        )
