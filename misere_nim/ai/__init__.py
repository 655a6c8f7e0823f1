"""Computer strategies for Misère Nim.

Use the factory to build strategies by player kind:

    from misere_nim.ai import AIFactory, PlayerKind

    ai = AIFactory.create(PlayerKind.HEURISTIC, player_number=1)
    move = ai.produce_move(board)

Architecture:
- base.py: BaseAI abstract base class
- factory.py: AIFactory for creating AI instances
- random_ai.py: rejection-sampled random moves
- greedy_pair_ai.py: first adjacent pair on odd stick counts
- heuristic_ai.py: misère Nim-sum strategy over runs
"""

from misere_nim.ai.base import BaseAI
from misere_nim.ai.factory import AIFactory, create_ai
from misere_nim.ai.greedy_pair_ai import GreedyPairAI
from misere_nim.ai.heuristic_ai import HeuristicAI
from misere_nim.ai.random_ai import RandomAI
from misere_nim.models import PlayerKind

__all__ = [
    "AIFactory",
    "BaseAI",
    "GreedyPairAI",
    "HeuristicAI",
    "PlayerKind",
    "RandomAI",
    "create_ai",
]
