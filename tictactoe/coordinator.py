"""
Turn sequencing between the board, the human player(s) and the AI opponent.

The window owns one TurnCoordinator and forwards clicks, reset and mode
toggles to it; everything it draws comes from snapshot().
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import (
    HUMAN_MARK, OPPONENT_LABEL, OPPONENT_MARK, PLAYER_LABELS, VS_OPPONENT_DEFAULT,
)
from .game_logic import GameState, Mark
from .opponent import OpponentPolicy

logger = logging.getLogger(__name__)


class Phase(Enum):
    HUMAN_TURN = "human"
    OPPONENT_TURN = "opponent"
    FINISHED = "finished"


@dataclass(frozen=True)
class GameSnapshot:
    """
    read-only view of the game for rendering
    """
    cells: Tuple[Mark, ...]
    active_mark: Mark
    phase: Phase
    vs_opponent: bool
    game_over: bool
    winner: Optional[Mark]
    winning_line: Optional[Tuple[int, int, int]]
    clickable: Tuple[bool, ...]

    @property
    def is_draw(self) -> bool:
        return self.game_over and self.winner is None

    def label_for(self, mark: Mark) -> str:
        if self.vs_opponent and mark is OPPONENT_MARK:
            return OPPONENT_LABEL
        return PLAYER_LABELS[mark]

    @property
    def status_text(self) -> str:
        if not self.game_over:
            return f"Turn: {self.label_for(self.active_mark)}"
        if self.winner is None:
            return "Result: Draw"
        return f"Winner: {self.label_for(self.winner)}"


class TurnCoordinator:
    """
    Runs the HUMAN_TURN -> OPPONENT_TURN -> FINISHED state machine.

    In opponent mode the human plays X and the AI answers as O inside the
    same on_cell_clicked() call, so callers never see OPPONENT_TURN. In
    two-player mode both humans share HUMAN_TURN and marks just alternate.
    """

    def __init__(self, vs_opponent: bool = VS_OPPONENT_DEFAULT, rng=None):
        """
        Args:
            vs_opponent: Start with the AI opponent enabled.
            rng: random.Random used for the opponent's random tier. Created
                once here (clock seeded) when not supplied.
        """
        self.state = GameState()
        self.policy = OpponentPolicy(OPPONENT_MARK, rng)
        self.vs_opponent = vs_opponent
        self.phase = Phase.HUMAN_TURN

    def start_up(self):
        """Begin a fresh game. Called once by the UI at launch."""
        self._reset()
        logger.info("game started (vs_opponent=%s)", self.vs_opponent)

    def on_cell_clicked(self, index: int) -> bool:
        """
        Apply a human move at index, then the opponent's reply if due.

        Returns:
            True if the human move was accepted.
        """
        if self.phase is not Phase.HUMAN_TURN:
            logger.debug("click on %r ignored in phase %s", index, self.phase.name)
            return False
        mover = self.state.active_mark
        if not self.state.apply_move(index):
            logger.debug("rejected move %r by %s", index, mover.value)
            return False
        logger.debug("%s played %d", mover.value, index)

        if self.state.game_over:
            self._finish()
        elif self.vs_opponent:
            self.phase = Phase.OPPONENT_TURN
            self._opponent_reply()
        return True

    def on_reset_requested(self):
        self._reset()
        logger.info("game reset")

    def on_mode_toggled(self, enabled: bool):
        """Switch between vs-AI and two-player; always starts a new game."""
        self.vs_opponent = bool(enabled)
        self._reset()
        logger.info("mode changed (vs_opponent=%s)", self.vs_opponent)

    def is_clickable(self, index: int) -> bool:
        if self.state.game_over or not self.state.is_cell_empty(index):
            return False
        if self.vs_opponent:
            return self.phase is Phase.HUMAN_TURN \
                   and self.state.active_mark is HUMAN_MARK
        return True

    def snapshot(self) -> GameSnapshot:
        s = self.state
        return GameSnapshot(
            cells=s.board,
            active_mark=s.active_mark,
            phase=self.phase,
            vs_opponent=self.vs_opponent,
            game_over=s.game_over,
            winner=s.winner,
            winning_line=s.winning_line,
            clickable=tuple(self.is_clickable(i) for i in range(len(s.board))),
        )

    def _opponent_reply(self):
        move = self.policy.choose_move(self.state)
        if move is None or not self.state.apply_move(move):
            # unreachable while the board has room
            logger.error("opponent could not move on board %s",
                         [m.value for m in self.state.board])
        if self.state.game_over:
            self._finish()
        else:
            self.phase = Phase.HUMAN_TURN

    def _finish(self):
        self.phase = Phase.FINISHED
        if self.state.winner is None:
            logger.info("game over: draw")
        else:
            logger.info("game over: %s wins (line %s)",
                        self.state.winner.value, self.state.winning_line)

    def _reset(self):
        self.state.reset_game()
        self.phase = Phase.HUMAN_TURN
