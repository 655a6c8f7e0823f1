import pytest
from pydantic import ValidationError

from misere_nim.errors import ConfigurationError, MoveNotationError
from misere_nim.models import (
    AIConfig,
    BoardConfig,
    Move,
    PlayerKind,
    Run,
    default_row_lengths,
)


def test_move_notation():
    assert str(Move(row=2, left=3, right=5)) == "2:3-5"


def test_move_from_notation():
    assert Move.from_notation(" 2:3-5\n") == Move(row=2, left=3, right=5)


@pytest.mark.parametrize("text", ["", "2:3", "2-3:5", "a:b-c", "2 : 3-5"])
def test_move_from_bad_notation(text):
    with pytest.raises(MoveNotationError):
        Move.from_notation(text)


def test_move_is_frozen():
    move = Move(row=1, left=1, right=1)
    with pytest.raises(ValidationError):
        move.row = 2


def test_move_size():
    assert Move(row=1, left=2, right=4).size == 3


def test_run_length():
    run = Run(row=1, left=4, right=4)
    assert run.length == 1
    assert run.is_single
    assert not Run(row=1, left=1, right=2).is_single


@pytest.mark.parametrize(
    "token, kind",
    [
        ("random", PlayerKind.RANDOM),
        ("HEURISTIC", PlayerKind.HEURISTIC),
        ("greedy-pair", PlayerKind.GREEDY_PAIR),
        ("smart", PlayerKind.GREEDY_PAIR),
        ("human", PlayerKind.HUMAN),
        (1, PlayerKind.RANDOM),
        ("2", PlayerKind.HEURISTIC),
        ("3", PlayerKind.GREEDY_PAIR),
        ("4", PlayerKind.HUMAN),
    ],
)
def test_player_kind_parse(token, kind):
    assert PlayerKind.parse(token) is kind


@pytest.mark.parametrize("token", ["0", "5", "minimax", ""])
def test_player_kind_parse_unknown(token):
    with pytest.raises(ConfigurationError):
        PlayerKind.parse(token)


def test_type_names():
    assert PlayerKind.GREEDY_PAIR.type_name == "Smart"
    assert PlayerKind.HUMAN.type_name == "Human"


def test_default_row_lengths():
    assert default_row_lengths(3) == [1, 3, 5]
    assert BoardConfig().row_lengths == [1, 3, 5, 7, 9]


def test_board_config_validation():
    with pytest.raises(ValidationError):
        BoardConfig(row_lengths=[])
    with pytest.raises(ValidationError):
        BoardConfig(row_lengths=[3, 0])


def test_ai_config_aliases():
    config = AIConfig(rngSeed=7, bitWidth=5)
    assert config.rng_seed == 7
    assert config.bit_width == 5
    assert AIConfig().rng_seed is None
