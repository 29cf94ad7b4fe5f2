import pytest

from tictactoe.game_logic import (
    GameState, Mark, WINNING_LINES, index_to_row_col, row_col_to_index,
)


def play(state, moves):
    for i in moves:
        assert state.apply_move(i), f"move {i} rejected"
    return state


def state_tuple(state):
    return (state.board, state.active_mark, state.game_over, state.winner)


def test_fresh_state():
    state = GameState()
    assert state.board == (Mark.EMPTY,) * 9
    assert state.active_mark is Mark.X
    assert not state.game_over
    assert state.winner is None
    assert state.winning_line is None


def test_move_places_mark_and_flips_turn():
    state = GameState()
    assert state.apply_move(4)
    assert state.cell(4) is Mark.X
    assert state.active_mark is Mark.O
    assert state.apply_move(0)
    assert state.cell(0) is Mark.O
    assert state.active_mark is Mark.X
    assert state.move_count == 2


@pytest.mark.parametrize("bad", [-1, 9, 100, 1.0, "3", None, True])
def test_invalid_index_is_rejected(bad):
    state = play(GameState(), [4])
    before = state_tuple(state)
    assert not state.apply_move(bad)
    assert state_tuple(state) == before


def test_occupied_cell_is_rejected():
    state = play(GameState(), [4])
    before = state_tuple(state)
    assert not state.apply_move(4)
    assert state_tuple(state) == before


def test_move_after_game_over_is_rejected():
    state = play(GameState(), [0, 3, 1, 4, 2])
    before = state_tuple(state)
    assert not state.apply_move(8)
    assert state_tuple(state) == before


def test_cells_never_change_once_set():
    state = GameState()
    order = [4, 0, 8, 2, 1, 7, 6, 3, 5]
    seen = {}
    for i in order:
        if not state.apply_move(i):
            break
        seen[i] = state.cell(i)
        for j, mark in seen.items():
            assert state.cell(j) is mark


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_every_line_wins(line, mark):
    state = GameState()
    state._cells = [Mark.EMPTY] * 9
    for i in line:
        state._cells[i] = mark
    state._evaluate()
    assert state.game_over
    assert state.winner is mark
    assert state.winning_line == line


def test_winning_move_keeps_active_mark():
    state = play(GameState(), [0, 3, 1, 4, 2])
    assert state.game_over
    assert state.winner is Mark.X
    assert state.winning_line == (0, 1, 2)
    assert state.active_mark is Mark.X


def test_draw_on_full_board():
    # X O X / X O O / O X X
    state = play(GameState(), [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert state.game_over
    assert state.winner is None
    assert state.is_draw
    assert state.winning_line is None


def test_win_on_last_cell_is_not_a_draw():
    # X O X / O X O / O X X, last move completes the diagonal
    state = play(GameState(), [0, 1, 2, 3, 4, 5, 7, 6, 8])
    assert state.winner is Mark.X
    assert not state.is_draw


def test_reset_restores_fresh_state():
    state = play(GameState(), [0, 3, 1, 4, 2])
    state.reset_game()
    assert state_tuple(state) == state_tuple(GameState())
    assert state.winning_line is None
    assert state.move_count == 0


def test_reset_mid_game():
    state = play(GameState(), [0, 4])
    state.reset_game()
    assert state_tuple(state) == state_tuple(GameState())


def test_empty_cells_ascending():
    state = play(GameState(), [4, 0])
    assert state.empty_cells() == [1, 2, 3, 5, 6, 7, 8]


def test_board_is_a_copy():
    state = GameState()
    board = state.board
    state.apply_move(0)
    assert board[0] is Mark.EMPTY


def test_copy_is_independent():
    state = play(GameState(), [0])
    clone = state.copy()
    clone.apply_move(1)
    assert state.cell(1) is Mark.EMPTY
    assert state.active_mark is Mark.O


def test_mark_other():
    assert Mark.X.other() is Mark.O
    assert Mark.O.other() is Mark.X
    with pytest.raises(ValueError):
        Mark.EMPTY.other()


def test_index_row_col_helpers():
    assert index_to_row_col(5) == (1, 2)
    assert row_col_to_index(2, 0) == 6
