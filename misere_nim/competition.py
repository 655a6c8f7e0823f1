"""Round loop and score keeping for a two-player Misère Nim competition.

The competition owns the board for each round, alternates turns starting
with player 1, and credits the round to the player left to move on an
empty board. Console output is not performed here; pass ``announce`` to
receive the transcript lines and ``human_input`` to supply human moves.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from .board import Board
from .errors import (
    ConfigurationError,
    InvalidMoveError,
    InvalidStateError,
    MoveNotationError,
)
from .models import BoardConfig, Move
from .players import ComputerPlayer, HumanPlayer, Player

logger = logging.getLogger(__name__)

HumanInput = Callable[[Board, HumanPlayer], Move]
Announce = Callable[[str], None]

__all__ = ["Announce", "Competition", "HumanInput"]


class Competition:
    """A match of several rounds between two players."""

    def __init__(
        self,
        player1: Player,
        player2: Player,
        *,
        human_input: HumanInput | None = None,
        announce: Announce | None = None,
        board_config: BoardConfig | None = None,
    ):
        has_human = any(isinstance(p, HumanPlayer) for p in (player1, player2))
        if has_human and human_input is None:
            raise ConfigurationError("A human player needs a human_input source")

        self.players: tuple[Player, Player] = (player1, player2)
        self.human_input = human_input
        self.announce = announce
        self.board_config = board_config or BoardConfig()
        self._scores = [0, 0]

    def get_player_score(self, player_position: int) -> int:
        """Rounds won by player 1 or 2; -1 for any other position."""
        if player_position in (1, 2):
            return self._scores[player_position - 1]
        return -1

    @property
    def scores(self) -> tuple[int, int]:
        return self._scores[0], self._scores[1]

    def play_round(self) -> int:
        """Play one round on a fresh board and return the winner's id."""
        board = Board.from_config(self.board_config)
        self._say("Welcome to the sticks game!")

        turn = 0
        show_turn_message = True
        while board.unmarked_count() > 0:
            current = self.players[turn]
            if show_turn_message:
                self._say(f"Player {current.player_id}, it is now your turn!")

            try:
                move = self._next_move(current, board)
                board.apply_move(move)
            except (InvalidMoveError, MoveNotationError) as exc:
                if isinstance(current, ComputerPlayer):
                    raise InvalidStateError(
                        f"{current.type_name} player produced an illegal move",
                        context={"player": current.player_id, "error": str(exc)},
                    ) from exc
                self._say("Invalid move. Enter another:")
                show_turn_message = False
                continue

            self._say(f"Player {current.player_id} made the move: {move}")
            turn = 1 - turn
            show_turn_message = True

        winner = self.players[turn]
        self._scores[turn] += 1
        self._say(f"Player {winner.player_id} won!")
        logger.debug("Round won by player %d", winner.player_id)
        return winner.player_id

    def play_multiple_rounds(self, number_of_rounds: int) -> tuple[int, int]:
        """Play ``number_of_rounds`` rounds and return the score pair."""
        for _ in range(number_of_rounds):
            self.play_round()
        summary = f"The results are {self._scores[0]}:{self._scores[1]}"
        self._say(summary)
        logger.info(summary)
        return self.scores

    def _next_move(self, player: Player, board: Board) -> Move:
        if isinstance(player, ComputerPlayer):
            return player.ai.produce_move(board)
        if self.human_input is None:
            raise InvalidStateError(
                "No input source for human player",
                context={"player": player.player_id},
            )
        return self.human_input(board, player)

    def _say(self, message: str) -> None:
        if self.announce is not None:
            self.announce(message)
