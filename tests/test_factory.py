import random

import pytest

from misere_nim.ai import AIFactory, GreedyPairAI, HeuristicAI, RandomAI, create_ai
from misere_nim.errors import ConfigurationError
from misere_nim.models import AIConfig, PlayerKind


@pytest.mark.parametrize(
    "kind, expected",
    [
        (PlayerKind.RANDOM, RandomAI),
        (PlayerKind.GREEDY_PAIR, GreedyPairAI),
        (PlayerKind.HEURISTIC, HeuristicAI),
        ("smart", GreedyPairAI),
        ("2", HeuristicAI),
    ],
)
def test_create_builtin(kind, expected):
    ai = AIFactory.create(kind, player_number=2, config=AIConfig(rng_seed=1))
    assert isinstance(ai, expected)
    assert ai.player_number == 2
    assert repr(ai) == f"{expected.__name__}(player=2)"


def test_create_human_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        AIFactory.create(PlayerKind.HUMAN, player_number=1)


def test_create_unknown_kind_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        create_ai("minimax", 1)


def test_injected_rng_is_used():
    rng = random.Random(3)
    ai = AIFactory.create(PlayerKind.RANDOM, 1, rng=rng)
    assert ai.rng is rng


def test_seeded_config_gives_reproducible_rng():
    a = AIFactory.create(PlayerKind.RANDOM, 1, AIConfig(rng_seed=42))
    b = AIFactory.create(PlayerKind.RANDOM, 1, AIConfig(rng_seed=42))
    assert a.rng.random() == b.rng.random()


@pytest.mark.parametrize("kind", [k for k in PlayerKind if k is not PlayerKind.HUMAN])
def test_every_computer_kind_plays_a_legal_move(kind, default_board):
    ai = AIFactory.create(kind, player_number=1, config=AIConfig(rng_seed=5))
    assert default_board.validate_move(ai.produce_move(default_board)) is None
