from enum import Enum

BOARD_SIZE = 3                        # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags; order matters for tie-breaks
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(Enum):
    """
    contents of a single cell
    """
    EMPTY = ''
    X = 'X'
    O = 'O'

    def other(self):
        """
        opposite player mark
        """
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("empty cell has no opposite mark")


def index_to_row_col(index):
    # row-major layout
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row, col):
    return row * BOARD_SIZE + col


class GameState:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        init board and flags
        """
        self.reset_game()

    @property
    def board(self):
        # read-only copy for callers
        return tuple(self._cells)

    @property
    def is_draw(self):
        return self.game_over and self.winner is None

    def cell(self, index):
        return self._cells[index]

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if self._valid_index(index):
            return self._cells[index] is Mark.EMPTY
        return False

    def empty_cells(self):
        """
        indexes of blank cells, ascending
        """
        return [i for i, m in enumerate(self._cells) if m is Mark.EMPTY]

    def apply_move(self, index):
        """
        place active mark, check result
        returns True if the move was applied, False otherwise
        """
        # only if index valid, game not over and cell empty
        if self.game_over or not self.is_cell_empty(index):
            return False
        self._cells[index] = self.active_mark
        self.move_count += 1              # count this move
        self._evaluate()
        if not self.game_over:
            self.active_mark = self.active_mark.other()
        return True

    def _evaluate(self):
        """
        scan all lines for a win, then check for a full board
        """
        c = self._cells
        for line in WINNING_LINES:
            a, b, d = (c[i] for i in line)
            if a is not Mark.EMPTY and a == b == d:
                self.game_over = True; self.winner = a
                self.winning_line = line
                return
        # full board and no line completed
        if Mark.EMPTY not in c:
            self.game_over = True; self.winner = None

    @staticmethod
    def _valid_index(index):
        # bool is an int subclass, reject it explicitly
        return isinstance(index, int) and not isinstance(index, bool) \
               and 0 <= index < CELL_COUNT

    def copy(self):
        new_state = GameState()
        new_state._cells = list(self._cells)
        new_state.active_mark = self.active_mark
        new_state.game_over = self.game_over
        new_state.winner = self.winner
        new_state.winning_line = self.winning_line
        new_state.move_count = self.move_count
        return new_state

    def reset_game(self):
        """
        clear board and reset flags
        """
        # back to fresh state
        self._cells = [Mark.EMPTY] * CELL_COUNT
        self.active_mark = Mark.X         # X always moves first
        self.game_over = False
        self.winner = None                # Mark.X, Mark.O, or None
        self.winning_line = None          # completed triple, if any
        self.move_count = 0               # how many moves done
