"""
Misère Nim Error Hierarchy

Unified exception hierarchy for consistent error handling across the package.
All custom exceptions inherit from NimError for easy catching and filtering.

Usage:
    from misere_nim.errors import InvalidMoveError, InvalidMoveReason

    try:
        board.apply_move(move)
    except InvalidMoveError as e:
        if e.reason is InvalidMoveReason.ALREADY_MARKED:
            ...
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import Move

__all__ = [
    "ConfigurationError",
    "InvalidMoveError",
    "InvalidMoveReason",
    "InvalidStateError",
    "MoveNotationError",
    # Base error
    "NimError",
    "OutOfRangeError",
]


class NimError(Exception):
    """Base exception for all Misère Nim errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "NIM_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Board Errors
# =============================================================================


class OutOfRangeError(NimError):
    """Row or stick index outside the board shape."""
    code: str = "OUT_OF_RANGE"

    def __init__(
        self,
        message: str,
        row: int | None = None,
        index: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.row = row
        self.index = index
        if row is not None:
            self.context["row"] = row
        if index is not None:
            self.context["index"] = index


class InvalidMoveReason(str, Enum):
    """Why a board rejected a move."""
    ROW_OUT_OF_RANGE = "row_out_of_range"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    EMPTY_OR_INVERTED = "empty_or_inverted"
    ALREADY_MARKED = "already_marked"


class InvalidMoveError(NimError):
    """Move that cannot be applied to the current board.

    The board is guaranteed to be unchanged when this is raised.

    Attributes:
        reason: The first validation rule the move violated
        move: The rejected move
    """
    code: str = "INVALID_MOVE"

    def __init__(
        self,
        message: str,
        reason: InvalidMoveReason,
        move: Move | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.reason = reason
        self.move = move
        self.context["reason"] = reason.value
        if move is not None:
            self.context["move"] = str(move)


class MoveNotationError(NimError):
    """Text that is not a ``<row>:<left>-<right>`` move."""
    code: str = "MOVE_NOTATION"


class InvalidStateError(NimError):
    """Corrupted or unexpected game state.

    Raised when a computer strategy produces a move the board rejects, or
    a scan summary contradicts itself. Both indicate a programming error
    rather than a recoverable condition.
    """
    code: str = "INVALID_STATE"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NimError):
    """Invalid configuration (unknown player kind, malformed config file)."""
    code: str = "CONFIGURATION_ERROR"
