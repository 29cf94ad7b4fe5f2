import random

from tictactoe.game_logic import GameState, Mark
from tictactoe.opponent import OpponentPolicy, find_completing_cell

E, X, O = Mark.EMPTY, Mark.X, Mark.O


def state_from(cells):
    state = GameState()
    state._cells = list(cells)
    return state


def test_blocks_two_in_a_row():
    policy = OpponentPolicy(Mark.O, random.Random(0))
    state = state_from([X, X, E, E, E, E, E, E, E])
    assert policy.choose_move(state) == 2
    assert policy.last_tier == 'block'


def test_takes_the_win():
    policy = OpponentPolicy(Mark.O, random.Random(0))
    state = state_from([O, O, E, E, E, E, E, E, E])
    assert policy.choose_move(state) == 2
    assert policy.last_tier == 'win'


def test_win_beats_block():
    policy = OpponentPolicy(Mark.O, random.Random(0))
    # X threatens 2, but O finishes the middle row at 5
    state = state_from([X, X, E, O, O, E, E, E, E])
    assert policy.choose_move(state) == 5
    assert policy.last_tier == 'win'


def test_tie_break_uses_line_order_then_cell():
    # X can complete row 0 at 2 and column 0 at 6; row lines come first
    board = [X, X, E, X, E, E, E, E, E]
    assert find_completing_cell(board, X) == 2
    # only a diagonal left: 0,4 taken -> 8
    board = [X, E, E, E, X, E, E, E, E]
    assert find_completing_cell(board, X) == 8


def test_line_with_other_mark_does_not_count():
    board = [X, X, O, E, E, E, E, E, E]
    assert find_completing_cell(board, X) is None


def test_random_tier_picks_an_empty_cell():
    policy = OpponentPolicy(Mark.O, random.Random(1))
    state = state_from([X, E, E, E, E, E, E, E, E])
    move = policy.choose_move(state)
    assert move in state.empty_cells()
    assert policy.last_tier == 'random'


def test_random_tier_is_deterministic_for_a_seed():
    a = OpponentPolicy(Mark.O, random.Random(42))
    b = OpponentPolicy(Mark.O, random.Random(42))
    state = GameState()
    assert [a.choose_move(state) for _ in range(5)] == \
           [b.choose_move(state) for _ in range(5)]


def test_random_tier_varies_across_seeds():
    state = GameState()
    picks = {OpponentPolicy(Mark.O, random.Random(seed)).choose_move(state)
             for seed in range(50)}
    assert len(picks) > 1
    assert picks <= set(range(9))


def test_rng_is_reused_between_calls():
    rng = random.Random(7)
    policy = OpponentPolicy(Mark.O, rng)
    assert policy.rng is rng
    state = GameState()
    policy.choose_move(state)
    assert policy.rng is rng


def test_full_board_returns_none():
    policy = OpponentPolicy(Mark.O, random.Random(0))
    state = state_from([X, O, X, X, O, O, O, X, X])
    assert policy.choose_move(state) is None


def test_default_rng_is_created():
    policy = OpponentPolicy()
    assert isinstance(policy.rng, random.Random)
    assert policy.choose_move(GameState()) in range(9)
