import pytest

from skyrunner.character import FRAME_DELAY, START_COLUMN, START_GROUND
from skyrunner.collision import Outcome
from skyrunner.game import COLUMN_PERIOD, GameState, run
from skyrunner.tilemap import TILE_SIZE, parse_map

WIDTH = 20


def _map(rows):
    return parse_map("\n".join(rows) + "\n")


def _flat():
    return _map(["." * WIDTH] * 10 + ["X" * WIDTH])


def test_flat_ground_continues_and_sets_ground():
    state = GameState(_flat())
    assert state.step(0.0, 0.0) is Outcome.CONTINUE
    assert state.character.ground == 10 * TILE_SIZE - 100
    assert state.character.ground == START_GROUND


def test_runner_below_grass_dies():
    state = GameState(_map(["." * WIDTH] * 5 + ["X" * WIDTH]))
    assert state.step(0.0, 0.0) is Outcome.DEAD


def test_end_tile_wins():
    state = GameState(_map(["." * WIDTH] * 10 + ["X" * 8 + "E" + "X" * 11]))
    assert state.step(0.0, 0.0) is Outcome.WIN


def test_scroll_grows_linearly_with_frames():
    state = GameState(_flat())
    state.step(0.0, 0.0)
    first = state.tilemap.offset
    state.step(0.0, 0.0)
    assert first > 0
    assert state.tilemap.offset == pytest.approx(2 * first)


def test_column_advances_after_period():
    state = GameState(_map(["X" * WIDTH]))
    for _ in range(COLUMN_PERIOD - 1):
        state.step(0.0, 0.0)
    assert state.character.column == START_COLUMN
    state.step(0.0, 0.0)
    assert state.character.column == START_COLUMN + 1
    assert state.character.column_clock == 0


def test_score_ticks_only_after_frame_delay():
    state = GameState(_flat())
    state.step(FRAME_DELAY / 2, 0.0)
    assert state.score.visible_digits() == (0,)
    state.step(FRAME_DELAY * 2, 0.0)
    assert state.score.visible_digits() == (1,)


def test_layers_advance_by_their_thresholds():
    state = GameState(_flat())
    state.step(0.05, 0.0)
    assert [layer.left for layer in state.layers] == [0, 1, 4]


def test_gravity_moves_airborne_runner():
    state = GameState(_flat())
    state.character.jump()
    before = state.character.jump_y
    state.step(0.0, 0.01)
    assert state.gravity_moved is True
    assert state.character.jump_y < before


def test_gravity_waits_for_elapsed_time():
    state = GameState(_flat())
    state.character.jump()
    before = state.character.jump_y
    state.step(0.0, 0.0)
    assert state.gravity_moved is False
    assert state.character.jump_y == before


def test_restart_rewinds_run():
    state = GameState(_map(["." * WIDTH] * 5 + ["X" * WIDTH]))
    for _ in range(3):
        state.step(FRAME_DELAY * 2, 0.0)
    jump_y = state.character.jump_y
    state.restart()
    assert state.score.visible_digits() == (0,)
    assert state.tilemap.offset == 0.0
    assert state.character.column == START_COLUMN
    assert state.character.column_clock == 0
    assert state.character.ground == START_GROUND
    assert state.character.jump_y == jump_y


def test_run_with_missing_map_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(tmp_path / "missing", tmp_path)