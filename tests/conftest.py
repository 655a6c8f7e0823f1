"""
Shared pytest fixtures for misere_nim tests.

Boards are described with strings, one per row: ``U`` for an unmarked stick
and ``M`` for a marked one, e.g. ``board_factory("UUM", "U")``.
"""

import functools
import sys
from pathlib import Path
from typing import Callable, Iterator, List, Tuple

import pytest

# Ensure the project root is on sys.path so `import misere_nim` works when
# running pytest without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from misere_nim.board import Board
from misere_nim.models import AIConfig
from misere_nim.runs import RunScanner


def make_board(*rows: str) -> Board:
    """Build a board from ``U``/``M`` row strings."""
    return Board.from_marks([[c == "M" for c in row] for row in rows])


def board_piles(board: Board) -> Tuple[int, ...]:
    """Sorted run lengths, the position as the solver sees it."""
    return tuple(sorted(r.length for r in RunScanner(board).all_runs()))


@functools.lru_cache(maxsize=None)
def mover_wins(piles: Tuple[int, ...]) -> bool:
    """Exhaustive misère outcome: can the player to move force a win?

    A move removes a contiguous span from one pile of size ``n``, leaving
    two piles ``a`` and ``b`` with ``a + b <= n - 1``. The player facing an
    empty board wins.
    """
    if not piles:
        return True
    for i, n in enumerate(piles):
        rest = piles[:i] + piles[i + 1:]
        for a in range(n):
            for b in range(n - a):
                nxt = tuple(sorted(rest + tuple(p for p in (a, b) if p)))
                if not mover_wins(nxt):
                    return True
    return False


class ScriptedRandom:
    """Stand-in generator whose ``randrange`` replays a fixed script."""

    def __init__(self, values: List[int]):
        self._values: Iterator[int] = iter(values)
        self.calls: List[int] = []

    def randrange(self, start, stop=None, step=1):
        value = next(self._values)
        upper = start if stop is None else stop
        assert 0 <= value < upper, f"scripted {value} outside range({upper})"
        self.calls.append(upper)
        return value


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Factory for boards described by ``U``/``M`` row strings."""
    return make_board


@pytest.fixture
def default_board() -> Board:
    return Board.default()


@pytest.fixture
def seeded_config() -> AIConfig:
    return AIConfig(rng_seed=1234)


@pytest.fixture
def scripted_rng() -> Callable[[List[int]], ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def mover_wins_solver() -> Callable[[Tuple[int, ...]], bool]:
    """Exhaustive misère solver over sorted pile tuples."""
    return mover_wins


@pytest.fixture
def piles_of() -> Callable[[Board], Tuple[int, ...]]:
    return board_piles
