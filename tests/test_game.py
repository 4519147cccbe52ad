import math

import pytest

from cubraycast.game import Action, GameState, Player, QuitRequested

BOX = ["11111", "10001", "10001", "10001", "11111"]


def make_state(x=2.5, y=2.5, dir_x=1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66):
    return GameState(list(BOX), Player(x, y, dir_x, dir_y, plane_x, plane_y))


def test_forward_moves_along_direction():
    state = make_state()
    state.press(Action.FORWARD)
    state.update()
    assert state.player.pos_x == pytest.approx(2.5 + state.move_speed)
    assert state.player.pos_y == pytest.approx(2.5)


def test_backward_moves_against_direction():
    state = make_state()
    state.press(Action.BACKWARD)
    state.update()
    assert state.player.pos_x == pytest.approx(2.5 - state.move_speed)


def test_strafe_left_and_right():
    left = make_state()
    left.press(Action.STRAFE_LEFT)
    left.update()
    assert left.player.pos_y == pytest.approx(2.5 - left.move_speed)
    assert left.player.pos_x == pytest.approx(2.5)

    right = make_state()
    right.press(Action.STRAFE_RIGHT)
    right.update()
    assert right.player.pos_y == pytest.approx(2.5 + right.move_speed)


def test_release_stops_movement():
    state = make_state()
    state.press(Action.FORWARD)
    state.release(Action.FORWARD)
    state.update()
    assert (state.player.pos_x, state.player.pos_y) == (2.5, 2.5)


def test_quit_raises():
    state = make_state()
    with pytest.raises(QuitRequested):
        state.press(Action.QUIT)


def test_try_move_into_wall_is_refused():
    state = make_state(x=3.5)
    assert state.try_move(0.5, 0.0) is False
    assert (state.player.pos_x, state.player.pos_y) == (3.5, 2.5)


def test_try_move_into_open_tile():
    state = make_state()
    assert state.try_move(0.0, 0.3) is True
    assert state.player.pos_y == pytest.approx(2.8)


@pytest.mark.parametrize(
    "x, y, expected",
    [(1, 1, True), (0, 0, False), (-1, 2, False), (2, 5, False), (5, 2, False)],
)
def test_is_walkable_box(x, y, expected):
    assert make_state().is_walkable(x, y) is expected


def test_is_walkable_space_and_spawn():
    state = GameState(["1 0N"], Player(2.5, 0.5, 1.0, 0.0))
    assert state.is_walkable(1, 0) is False
    assert state.is_walkable(2, 0) is True
    assert state.is_walkable(3, 0) is True
    assert state.is_walkable(4, 0) is False


def test_rotate_quarter_turn():
    player = Player(0.0, 0.0, 1.0, 0.0, 0.0, 0.66)
    player.rotate(math.pi / 2)
    assert player.dir_x == pytest.approx(0.0, abs=1e-12)
    assert player.dir_y == pytest.approx(1.0)
    assert player.plane_x == pytest.approx(-0.66)
    assert player.plane_y == pytest.approx(0.0, abs=1e-12)
    assert player.dir == pytest.approx(math.pi / 2)


def test_rotate_left_wraps_angle():
    state = make_state()
    state.press(Action.ROTATE_LEFT)
    state.update()
    assert state.player.dir == pytest.approx(math.tau - state.rot_speed)
    assert state.player.dir_y < 0


def test_rotation_preserves_vector_lengths():
    state = make_state()
    state.press(Action.ROTATE_RIGHT)
    for _ in range(37):
        state.update()
    player = state.player
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)
    assert 0 <= player.dir < math.tau


def test_movement_happens_before_rotation():
    state = make_state()
    state.press(Action.FORWARD)
    state.press(Action.ROTATE_RIGHT)
    state.update()
    assert state.player.pos_x == pytest.approx(2.5 + state.move_speed)
    assert state.player.pos_y == pytest.approx(2.5)
    assert state.player.dir == pytest.approx(state.rot_speed)