import pytest

from hatman.controls import Key, MouseButton
from hatman.inputs import Input


def test_key_press_lasts_one_frame_hold_persists():
    state = Input()
    state.key_down(Key.W)
    assert state.key_pressed(Key.W)
    assert state.key_held(Key.W)
    state.begin_new_frame()
    assert not state.key_pressed(Key.W)
    assert state.key_held(Key.W)


def test_key_release():
    state = Input()
    state.key_down(Key.A)
    state.begin_new_frame()
    state.key_up(Key.A)
    assert state.key_released(Key.A)
    assert not state.key_held(Key.A)
    state.begin_new_frame()
    assert not state.key_released(Key.A)


def test_key_up_without_down():
    state = Input()
    state.key_up(Key.E)
    assert state.key_released(Key.E)
    assert not state.key_held(Key.E)


def test_mouse_buttons():
    state = Input()
    state.button_down(MouseButton.LEFT)
    assert state.mouse_pressed(MouseButton.LEFT)
    assert state.mouse_held(MouseButton.LEFT)
    assert not state.mouse_held(MouseButton.RIGHT)
    state.begin_new_frame()
    state.button_up(MouseButton.LEFT)
    assert state.mouse_released(MouseButton.LEFT)
    assert not state.mouse_held(MouseButton.LEFT)
    assert not state.mouse_pressed(MouseButton.LEFT)


def test_mouse_move_divides_by_scaling():
    state = Input()
    state.mouse_move(400, 200, 2)
    assert state.mouse_position == (200, 100)
    assert state.mouse_x == 200
    assert state.mouse_y == 100


def test_mouse_move_zero_scaling_raises():
    with pytest.raises(ZeroDivisionError):
        Input().mouse_move(1, 1, 0)