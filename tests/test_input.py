import pytest

from quadkit.geometry import Vec2
from quadkit.input import InputEvent, InputState, MouseButton, Touch, TouchPhase


class Recorder:
    def __init__(self):
        self.calls = []

    def mouse_motion_event(self, x, y):
        self.calls.append(("motion", x, y))

    def mouse_button_down_event(self, button, x, y):
        self.calls.append(("down", button, x, y))

    def key_down_event(self, keycode, modifiers, repeat):
        self.calls.append(("key_down", keycode, repeat))

    def touch_event(self, phase, touch_id, x, y):
        self.calls.append(("touch", phase, touch_id))


def test_key_pressed_only_for_current_frame():
    state = InputState()
    state.key_down_event("A", None, False)
    assert state.is_key_pressed("A")
    assert state.is_key_down("A")
    state.end_frame()
    assert not state.is_key_pressed("A")
    assert state.is_key_down("A")


def test_repeated_key_is_not_a_press():
    state = InputState()
    state.key_down_event("B", None, True)
    assert state.is_key_down("B")
    assert not state.is_key_pressed("B")
    assert state.get_last_key_pressed() is None


def test_key_release():
    state = InputState()
    state.key_down_event("C", None, False)
    state.key_up_event("C", None)
    assert not state.is_key_down("C")
    assert state.is_key_released("C")
    state.end_frame()
    assert not state.is_key_released("C")


def test_last_key_pressed():
    state = InputState()
    state.key_down_event("Q", None, False)
    assert state.get_last_key_pressed() == "Q"


def test_char_queue_pops_latest_first():
    state = InputState()
    state.char_event("x", None, False)
    state.char_event("y", None, False)
    assert state.get_char_pressed() == "y"
    assert state.get_char_pressed() == "x"
    assert state.get_char_pressed() is None


def test_mouse_buttons_and_position():
    state = InputState()
    state.mouse_button_down_event(MouseButton.LEFT, 10.0, 20.0)
    assert state.is_mouse_button_down(MouseButton.LEFT)
    assert state.is_mouse_button_pressed(MouseButton.LEFT)
    assert state.mouse_position() == (10.0, 20.0)
    state.mouse_button_up_event(MouseButton.LEFT, 11.0, 21.0)
    assert not state.is_mouse_button_down(MouseButton.LEFT)
    assert state.is_mouse_button_released(MouseButton.LEFT)
    state.end_frame()
    assert not state.is_mouse_button_pressed(MouseButton.LEFT)
    assert not state.is_mouse_button_released(MouseButton.LEFT)


def test_mouse_position_divided_by_dpi():
    state = InputState(dpi_scale=2.0)
    state.mouse_motion_event(200.0, 100.0)
    assert state.mouse_position() == (100.0, 50.0)


def test_mouse_position_local_corners_and_centre():
    state = InputState(screen_width=800.0, screen_height=600.0)
    state.mouse_motion_event(0.0, 0.0)
    assert state.mouse_position_local() == Vec2(-1.0, -1.0)
    state.mouse_motion_event(400.0, 300.0)
    assert state.mouse_position_local() == Vec2(0.0, 0.0)
    state.mouse_motion_event(800.0, 600.0)
    assert state.mouse_position_local() == Vec2(1.0, 1.0)


def test_resize_changes_local_mapping():
    state = InputState(screen_width=800.0, screen_height=600.0)
    state.resize_event(200.0, 100.0)
    state.mouse_motion_event(100.0, 50.0)
    assert state.mouse_position_local() == Vec2(0.0, 0.0)


def test_mouse_wheel_reset_each_frame():
    state = InputState()
    state.mouse_wheel_event(0.0, 3.0)
    assert state.mouse_wheel() == (0.0, 3.0)
    state.end_frame()
    assert state.mouse_wheel() == (0.0, 0.0)


def test_grabbed_cursor_ignores_absolute_motion_and_uses_raw():
    state = InputState()
    state.mouse_motion_event(5.0, 5.0)
    state.set_cursor_grab(True)
    state.mouse_motion_event(50.0, 50.0)
    assert state.mouse_position() == (5.0, 5.0)
    state.raw_mouse_motion(2.0, -1.0)
    assert state.mouse_position() == (7.0, 4.0)


def test_raw_motion_ignored_without_grab():
    state = InputState()
    state.mouse_motion_event(5.0, 5.0)
    state.raw_mouse_motion(2.0, 2.0)
    assert state.mouse_position() == (5.0, 5.0)


def test_touch_lifecycle():
    state = InputState()
    state.touch_event(TouchPhase.STARTED, 1, 10.0, 10.0)
    assert state.touches() == [Touch(1, TouchPhase.STARTED, Vec2(10.0, 10.0))]
    state.end_frame()
    assert [t.phase for t in state.touches()] == [TouchPhase.STATIONARY]
    state.touch_event(TouchPhase.ENDED, 1, 10.0, 10.0)
    state.end_frame()
    assert state.touches() == []


def test_cancelled_touch_removed():
    state = InputState()
    state.touch_event(TouchPhase.CANCELLED, 4, 1.0, 1.0)
    state.end_frame()
    assert state.touches() == []


def test_touch_simulates_mouse():
    state = InputState()
    state.touch_event(TouchPhase.STARTED, 1, 30.0, 40.0)
    assert state.is_mouse_button_pressed(MouseButton.LEFT)
    assert state.mouse_position() == (30.0, 40.0)
    state.touch_event(TouchPhase.MOVED, 1, 35.0, 45.0)
    assert state.mouse_position() == (35.0, 45.0)
    state.touch_event(TouchPhase.ENDED, 1, 35.0, 45.0)
    assert state.is_mouse_button_released(MouseButton.LEFT)


def test_touch_without_mouse_simulation():
    state = InputState(simulate_mouse_with_touch=False)
    state.touch_event(TouchPhase.STARTED, 1, 30.0, 40.0)
    assert not state.is_mouse_button_down(MouseButton.LEFT)
    assert state.mouse_position() == (0.0, 0.0)


def test_touches_local():
    state = InputState(screen_width=100.0, screen_height=100.0)
    state.touch_event(TouchPhase.STARTED, 2, 50.0, 0.0)
    (touch,) = state.touches_local()
    assert touch.id == 2
    assert touch.position == Vec2(0.0, -1.0)
    assert state.touches()[0].position == Vec2(50.0, 0.0)


def test_quit_prevention():
    state = InputState()
    assert state.quit_requested_event() is False
    assert not state.is_quit_requested()
    state.prevent_quit()
    assert state.quit_requested_event() is True
    assert state.is_quit_requested()
    state.end_frame()
    assert not state.is_quit_requested()


def test_subscriber_replay_and_clear():
    state = InputState()
    first = state.register_input_subscriber()
    second = state.register_input_subscriber()
    assert (first, second) == (0, 1)

    state.mouse_motion_event(1.0, 2.0)
    state.key_down_event("K", None, False)
    state.mouse_wheel_event(0.0, 1.0)

    recorder = Recorder()
    state.repeat_all_input(recorder, first)
    assert recorder.calls == [("motion", 1.0, 2.0), ("key_down", "K", False)]

    again = Recorder()
    state.repeat_all_input(again, first)
    assert again.calls == []

    other = Recorder()
    state.repeat_all_input(other, second)
    assert len(other.calls) == 2


def test_touch_events_broadcast_with_simulated_mouse():
    state = InputState()
    sub = state.register_input_subscriber()
    state.touch_event(TouchPhase.STARTED, 7, 3.0, 4.0)
    recorder = Recorder()
    state.repeat_all_input(recorder, sub)
    assert recorder.calls == [
        ("down", MouseButton.LEFT, 3.0, 4.0),
        ("touch", TouchPhase.STARTED, 7),
    ]


def test_grabbed_raw_motion_event_carries_absolute_position():
    state = InputState()
    sub = state.register_input_subscriber()
    state.set_cursor_grab(True)
    state.raw_mouse_motion(3.0, 4.0)
    state.raw_mouse_motion(1.0, 1.0)
    recorder = Recorder()
    state.repeat_all_input(recorder, sub)
    assert recorder.calls == [("motion", 3.0, 4.0), ("motion", 4.0, 5.0)]


def test_input_event_repeat_dispatch():
    recorder = Recorder()
    InputEvent("mouse_motion", (1.0, 2.0)).repeat(recorder)
    InputEvent("char", ("z", None, False)).repeat(recorder)
    assert recorder.calls == [("motion", 1.0, 2.0)]


def test_unknown_subscriber_raises():
    state = InputState()
    with pytest.raises(IndexError):
        state.repeat_all_input(Recorder(), 3)