"""Players taking part in a competition.

A player is either a computer player wrapping a strategy or a human player
that holds nothing; the human's moves come from an input callable supplied
to the competition.
"""
from __future__ import annotations

import dataclasses
from typing import Union

from .ai.base import BaseAI
from .ai.factory import AIFactory
from .models import AIConfig, PlayerKind

__all__ = ["ComputerPlayer", "HumanPlayer", "Player", "create_player"]


@dataclasses.dataclass(frozen=True)
class ComputerPlayer:
    player_id: int
    kind: PlayerKind
    ai: BaseAI

    @property
    def type_name(self) -> str:
        return self.kind.type_name


@dataclasses.dataclass(frozen=True)
class HumanPlayer:
    player_id: int
    kind: PlayerKind = dataclasses.field(default=PlayerKind.HUMAN, init=False)

    @property
    def type_name(self) -> str:
        return self.kind.type_name


Player = Union[ComputerPlayer, HumanPlayer]


def create_player(
    kind: PlayerKind | str,
    player_id: int,
    config: AIConfig | None = None,
) -> Player:
    """Build the player case matching ``kind``.

    Raises:
        ConfigurationError: for an unknown kind.
    """
    if not isinstance(kind, PlayerKind):
        kind = PlayerKind.parse(kind)
    if kind is PlayerKind.HUMAN:
        return HumanPlayer(player_id)
    return ComputerPlayer(player_id, kind, AIFactory.create(kind, player_id, config))
