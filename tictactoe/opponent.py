import logging
import random
import time

from .game_logic import Mark, WINNING_LINES

logger = logging.getLogger(__name__)


def find_completing_cell(board, mark):
    """
    first empty cell that would complete a line for mark
    lines are scanned in WINNING_LINES order, cells low to high
    """
    for line in WINNING_LINES:
        vals = [board[i] for i in line]
        if vals.count(mark) == 2 and vals.count(Mark.EMPTY) == 1:
            return min(i for i in line if board[i] is Mark.EMPTY)
    return None


class OpponentPolicy:
    """
    simple three step opponent: win now, else block, else random
    """
    def __init__(self, mark=Mark.O, rng=None):
        """
        mark: the mark this opponent plays
        rng: random.Random to draw from; seeded from the clock when omitted
        """
        self.mark = mark
        self.rng = rng if rng is not None else random.Random(time.time_ns())
        self.last_tier = None             # 'win', 'block' or 'random'

    def choose_move(self, state):
        """
        pick one empty cell index, or None if the board is full
        """
        board = state.board
        move = find_completing_cell(board, self.mark)
        if move is not None:
            self.last_tier = 'win'
        else:
            move = find_completing_cell(board, self.mark.other())
            if move is not None:
                self.last_tier = 'block'
        if move is None:
            empty = state.empty_cells()
            if not empty:
                self.last_tier = None
                return None
            move = self.rng.choice(empty)
            self.last_tier = 'random'
        logger.debug("opponent %s picks %d (%s)", self.mark.value, move, self.last_tier)
        return move
