import pytest

from misere_nim.config import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, NimConfig, load_config
from misere_nim.errors import ConfigurationError


def test_explicit_file(tmp_path):
    path = tmp_path / "nim.yaml"
    path.write_text(
        "board:\n"
        "  row_lengths: [2, 4, 6]\n"
        "heuristic:\n"
        "  bit_width: 5\n"
        "  rng_seed: 3\n"
        "competition:\n"
        "  rounds: 12\n"
    )
    config = load_config(path)
    assert config.board.row_lengths == [2, 4, 6]
    assert config.heuristic.bit_width == 5
    assert config.heuristic.rng_seed == 3
    assert config.competition.rounds == 12


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "nim.yaml"
    path.write_text("competition:\n  rounds: 4\n")
    config = load_config(path)
    assert config.board.row_lengths == [1, 3, 5, 7, 9]
    assert config.competition.rounds == 4


def test_empty_file_is_defaults(tmp_path):
    path = tmp_path / "nim.yaml"
    path.write_text("")
    assert load_config(path) == NimConfig()


def test_env_var(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("board:\n  row_lengths: [3]\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().board.row_lengths == [3]


def test_project_default_file(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert DEFAULT_CONFIG_PATH.exists()
    config = load_config()
    assert config.board.row_lengths == [1, 3, 5, 7, 9]
    assert config.heuristic.bit_width == 4


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "board: [1, 2\n",
        "- 1\n- 2\n",
        "board:\n  row_lengths: [0]\n",
        "competition:\n  rounds: 0\n",
        "unknown_section: {}\n",
    ],
)
def test_invalid_files(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(path)
