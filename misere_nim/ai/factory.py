"""Strategy construction for computer players.

Player kinds map onto strategy classes here and nowhere else. A kind with
no computer strategy (``HUMAN``) is rejected when the player is built, so
a competition never starts with a seat that cannot move.

Usage:
    from misere_nim.ai.factory import AIFactory

    ai = AIFactory.create(PlayerKind.HEURISTIC, player_number=1)
    ai = AIFactory.create("smart", player_number=2)
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from misere_nim.errors import ConfigurationError
from misere_nim.models import AIConfig, PlayerKind

if TYPE_CHECKING:
    from misere_nim.ai.base import BaseAI


class AIFactory:
    """Resolves player kinds to strategy instances."""

    # Strategy modules are imported on first use
    _class_cache: dict[PlayerKind, type[BaseAI]] = {}

    @classmethod
    def _get_ai_class(cls, kind: PlayerKind) -> type[BaseAI]:
        """Strategy class for ``kind``; HUMAN has none."""
        if kind in cls._class_cache:
            return cls._class_cache[kind]

        if kind == PlayerKind.RANDOM:
            from misere_nim.ai.random_ai import RandomAI
            ai_class = RandomAI
        elif kind == PlayerKind.GREEDY_PAIR:
            from misere_nim.ai.greedy_pair_ai import GreedyPairAI
            ai_class = GreedyPairAI
        elif kind == PlayerKind.HEURISTIC:
            from misere_nim.ai.heuristic_ai import HeuristicAI
            ai_class = HeuristicAI
        else:
            raise ConfigurationError(
                f"No computer strategy for player kind: {kind.value}",
                context={"kind": kind.value},
            )

        cls._class_cache[kind] = ai_class
        return ai_class

    @classmethod
    def create(
        cls,
        kind: PlayerKind | str,
        player_number: int,
        config: AIConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> BaseAI:
        """Create the strategy for ``kind``.

        Args:
            kind: Player kind, or a name/legacy code accepted by
                  :meth:`PlayerKind.parse`
            player_number: Seat of the player, 1 or 2
            config: Strategy configuration (seed, parity width)
            rng: Generator to use instead of one built from the seed

        Raises:
            ConfigurationError: If the kind is unknown or is HUMAN
        """
        if not isinstance(kind, PlayerKind):
            kind = PlayerKind.parse(kind)
        ai_class = cls._get_ai_class(kind)
        return ai_class(player_number, config or AIConfig(), rng=rng)


def create_ai(
    kind: PlayerKind | str,
    player_number: int,
    config: AIConfig | None = None,
) -> BaseAI:
    """Shorthand for :meth:`AIFactory.create`."""
    return AIFactory.create(kind, player_number, config)
