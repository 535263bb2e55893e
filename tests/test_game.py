import pytest
from tetris_config import DIFFICULTY_TIMEOUTS, POINTS_FOR_LINES, SCORE_PER_LEVEL
from tetris_game import GameState
from tetris_piece import CONFIRM, Block, DOWN, LEFT, RIGHT, ROTATE
from tests.helpers import fill_row


def test_new_game_waits_for_start(make_game, ticker):
    game = make_game("O")
    assert game.state is GameState.NOT_STARTED
    assert game.piece is None
    assert game.next_piece is not None
    assert not ticker.active
    assert not game.handle_input(LEFT)
    game.tick()
    assert game.piece is None


def test_start_spawns_pair_and_arms_clock(make_game, ticker, events):
    game = make_game("T", "O")
    assert game.handle_input(CONFIRM)
    assert game.running and game.started
    assert game.piece.kind == "T"
    assert game.next_piece.kind == "O"
    assert (game.piece.x, game.piece.y) == (4, 0)
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[0]
    assert "game_started" in events


def test_tick_moves_down_then_bakes(make_game, ticker, events):
    game = make_game("O")
    game.start()
    first = game.piece
    ticker.callback = game.tick
    ticker.advance(18 * 1000)
    assert game.piece is first and first.y == 18
    ticker.advance(1000)
    assert game.piece is not first
    assert game.board.occupied_count() == 4
    assert "piece_baked" in events
    assert game.score == 0


def test_down_input_bakes_on_floor(make_game):
    game = make_game("O")
    game.start()
    for _ in range(18):
        assert game.handle_input(DOWN)
    assert game.piece.y == 18
    assert game.handle_input(DOWN)
    assert game.board.occupied_count() == 4
    assert game.piece.y == 0


def test_rejected_input_changes_nothing(make_game, events):
    game = make_game("O")
    game.start()
    game.piece.x = 0
    events.clear()
    assert not game.handle_input(LEFT)
    assert game.piece.x == 0
    assert events == []
    assert game.handle_input(RIGHT)
    assert game.handle_input(ROTATE)
    assert events == ["piece_moved", "piece_moved"]


def test_unknown_action(make_game):
    with pytest.raises(ValueError):
        make_game("O").handle_input("jump")


def test_pause_and_resume(make_game, ticker, events):
    game = make_game("T")
    game.start()
    game.handle_input(CONFIRM)
    assert game.paused
    assert not ticker.active
    x, y = game.piece.x, game.piece.y
    assert not game.handle_input(LEFT)
    assert not game.handle_input(DOWN)
    game.tick()
    assert (game.piece.x, game.piece.y) == (x, y)
    game.handle_input(CONFIRM)
    assert game.running
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[0]
    assert events[-2:] == ["paused", "resumed"]


def test_prefilled_top_ends_game_at_spawn(make_game, ticker, events):
    game = make_game("O")
    fill_row(game.board, 1, gap=0)
    game.start()
    assert game.game_over
    assert game.piece is None
    assert not ticker.active
    assert "game_over" in events
    assert "game_started" not in events


def test_stack_reaching_spawn_ends_game(make_game, ticker, events):
    game = make_game("O")
    game.start()
    game.board.grid[2][4] = Block(0)
    game.handle_input(DOWN)       # cannot move, bakes at the top
    assert game.state is GameState.GAME_OVER
    assert game.piece is None
    assert not ticker.active
    assert events[-1] == "game_over"
    assert not game.handle_input(DOWN)


def test_zero_size_board_is_over_at_once(make_game):
    game = make_game("O", width=0, height=0)
    game.start()
    assert game.game_over
    assert game.piece is None


def test_confirm_after_game_over_resets(make_game, ticker):
    game = make_game("O")
    fill_row(game.board, 1, gap=0)
    game.score = 500
    game.difficulty = 3
    game.start()
    assert game.game_over
    game.handle_input(CONFIRM)
    assert game.running
    assert game.score == 0 and game.difficulty == 0
    assert game.board.occupied_count() == 0
    assert game.piece is not None
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[0]


def test_reset_from_any_state(make_game, ticker):
    game = make_game("O")
    game.start()
    game.handle_input(DOWN)
    game.add_score(1300)
    game.handle_input(CONFIRM)
    assert game.paused
    game.reset()
    assert game.running
    assert (game.score, game.difficulty) == (0, 0)
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[0]
    assert game.piece.y == 0


def test_line_clear_scores_with_difficulty(make_game):
    game = make_game("O")
    game.start()
    game.difficulty = 2
    for y in (18, 19):
        fill_row(game.board, y, gap=None)
        game.board.grid[y][4] = None
        game.board.grid[y][5] = None
    for _ in range(18):
        game.handle_input(DOWN)
    game.handle_input(DOWN)
    assert game.score == POINTS_FOR_LINES[1] * 3
    assert game.board.occupied_count() == 0


def test_level_up_rearms_clock(make_game, ticker, events):
    game = make_game("O")
    game.start()
    game.add_score(SCORE_PER_LEVEL[0])
    assert game.difficulty == 0          # must exceed, not reach
    game.add_score(1)
    assert game.difficulty == 1
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[1]
    assert events[-1] == "difficulty_changed"


def test_level_never_skips(make_game, ticker):
    game = make_game("O")
    game.start()
    game.add_score(SCORE_PER_LEVEL[5] + 1)
    assert game.difficulty == 1
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[1]
    game.add_score(40)
    assert game.difficulty == 2


def test_difficulty_caps_at_nine(make_game, ticker):
    game = make_game("O")
    game.start()
    for _ in range(20):
        game.add_score(SCORE_PER_LEVEL[-1])
    assert game.difficulty == 9
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[9]


def test_score_never_decreases(make_game):
    game = make_game(seed=99)
    game.start()
    last = game.score
    for i in range(600):
        if game.game_over:
            game.handle_input(CONFIRM)
            last = game.score
        game.handle_input((ROTATE, LEFT, RIGHT, DOWN, DOWN)[i % 5])
        game.add_score(-50)
        assert game.score >= last
        last = game.score


def test_resize_applies_to_next_reset(make_game):
    game = make_game("O")
    game.start()
    game.resize(6, 8)
    assert (game.board.width, game.board.height) == (6, 8)
    game.reset()
    assert (game.board.width, game.board.height) == (6, 8)
    assert game.piece.x == 2


def test_level_up_during_tick_uses_new_interval(make_game, ticker):
    game = make_game("O")
    game.start()
    ticker.callback = game.tick
    game.score = SCORE_PER_LEVEL[0]
    for y in (18, 19):
        fill_row(game.board, y)
        game.board.grid[y][4] = None
        game.board.grid[y][5] = None
    ticker.advance(19 * 1000)
    assert game.difficulty == 1
    assert ticker.interval_ms == DIFFICULTY_TIMEOUTS[1]
    assert ticker.arm_count == 2
