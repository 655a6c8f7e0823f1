"""
Pydantic Models for Misère Nim
Value types shared by the board, the strategies and the competition loop.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from .errors import ConfigurationError, MoveNotationError

DEFAULT_ROW_COUNT = 5
DEFAULT_BIT_WIDTH = 4

_NOTATION_RE = re.compile(r"^\s*(-?\d+):(-?\d+)-(-?\d+)\s*$")


def default_row_lengths(row_count: int = DEFAULT_ROW_COUNT) -> List[int]:
    """Row ``i`` holds ``2i - 1`` sticks."""
    return [2 * i - 1 for i in range(1, row_count + 1)]


class PlayerKind(str, Enum):
    """Player kind enumeration"""
    RANDOM = "random"
    HEURISTIC = "heuristic"
    GREEDY_PAIR = "greedy_pair"
    HUMAN = "human"

    @classmethod
    def parse(cls, token: str | int) -> "PlayerKind":
        """Resolve a kind name or one of the legacy integer codes.

        Codes follow the legacy command line: 1 random, 2 heuristic,
        3 greedy pair ("smart"), 4 human.
        """
        text = str(token).strip().lower().replace("-", "_")
        if text in _LEGACY_CODES:
            return _LEGACY_CODES[text]
        if text == "smart":
            return cls.GREEDY_PAIR
        try:
            return cls(text)
        except ValueError:
            raise ConfigurationError(
                f"Unknown player kind: {token!r}",
                context={"available": [k.value for k in cls]},
            ) from None

    @property
    def type_name(self) -> str:
        """Display name used in competition transcripts."""
        return _TYPE_NAMES[self]


_LEGACY_CODES = {
    "1": PlayerKind.RANDOM,
    "2": PlayerKind.HEURISTIC,
    "3": PlayerKind.GREEDY_PAIR,
    "4": PlayerKind.HUMAN,
}

_TYPE_NAMES = {
    PlayerKind.RANDOM: "Random",
    PlayerKind.HEURISTIC: "Heuristic",
    PlayerKind.GREEDY_PAIR: "Smart",
    PlayerKind.HUMAN: "Human",
}


class Move(BaseModel):
    """Move representation.

    Removes the sticks ``left..right`` (inclusive, 1-indexed) of ``row``.
    Bounds are not range-checked here; the board decides validity so it can
    report the precise rejection reason.
    """
    model_config = ConfigDict(frozen=True)

    row: int
    left: int
    right: int

    def __str__(self) -> str:
        return f"{self.row}:{self.left}-{self.right}"

    @property
    def size(self) -> int:
        """Number of sticks the move removes (0 or less when inverted)."""
        return self.right - self.left + 1

    @classmethod
    def from_notation(cls, text: str) -> "Move":
        """Parse ``"<row>:<left>-<right>"``."""
        match = _NOTATION_RE.match(text)
        if match is None:
            raise MoveNotationError(
                f"Expected '<row>:<left>-<right>', got {text!r}"
            )
        row, left, right = (int(g) for g in match.groups())
        return cls(row=row, left=left, right=right)


class Run(BaseModel):
    """Maximal span of unmarked sticks within one row."""
    model_config = ConfigDict(frozen=True)

    row: int
    left: int
    right: int

    @property
    def length(self) -> int:
        return self.right - self.left + 1

    @property
    def is_single(self) -> bool:
        return self.left == self.right

    def __str__(self) -> str:
        return f"{self.row}:{self.left}-{self.right}"


class AIConfig(BaseModel):
    """AI configuration"""
    model_config = ConfigDict(populate_by_name=True)

    rng_seed: Optional[int] = Field(None, alias="rngSeed")
    bit_width: int = Field(DEFAULT_BIT_WIDTH, ge=1, le=63, alias="bitWidth")


class BoardConfig(BaseModel):
    """Board layout: number of sticks in each row, top to bottom."""
    model_config = ConfigDict(populate_by_name=True)

    row_lengths: List[PositiveInt] = Field(
        default_factory=default_row_lengths,
        min_length=1,
        alias="rowLengths",
    )


class CompetitionConfig(BaseModel):
    """Competition settings"""
    rounds: PositiveInt = 1
