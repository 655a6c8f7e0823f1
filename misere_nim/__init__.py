"""Misère Nim engine.

Board state, run analysis, computer strategies and the competition loop
for Nim played on rows of sticks where taking the last stick loses.
"""

from misere_nim.board import Board
from misere_nim.errors import (
    ConfigurationError,
    InvalidMoveError,
    InvalidMoveReason,
    InvalidStateError,
    MoveNotationError,
    NimError,
    OutOfRangeError,
)
from misere_nim.models import AIConfig, BoardConfig, Move, PlayerKind, Run
from misere_nim.runs import RunScanner, RunSummary

__all__ = [
    "AIConfig",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "InvalidMoveError",
    "InvalidMoveReason",
    "InvalidStateError",
    "Move",
    "MoveNotationError",
    "NimError",
    "OutOfRangeError",
    "PlayerKind",
    "Run",
    "RunScanner",
    "RunSummary",
]
