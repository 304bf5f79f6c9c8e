"""Keyboard, mouse and touch input state, fed by window events.

An :class:`InputState` receives raw window events through its ``*_event``
methods and answers per-frame queries. Call :meth:`InputState.end_frame`
once per frame to clear the "pressed" and "released" sets.
"""

from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass, field, replace
from typing import Any

from quadkit.geometry import Vec2

__all__ = [
    "MouseButton",
    "TouchPhase",
    "Touch",
    "InputEvent",
    "InputState",
]


class MouseButton(enum.Enum):
    """Mouse buttons."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


class TouchPhase(enum.Enum):
    """Life-cycle phase of a touch."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Touch:
    """One touch point and its phase in the current frame."""

    id: int
    phase: TouchPhase
    position: Vec2


@dataclass(frozen=True)
class InputEvent:
    """A recorded input event that can be replayed to a handler.

    ``kind`` names the handler method without its ``_event`` suffix, for
    example ``"mouse_motion"``; ``args`` are the arguments it receives.
    """

    kind: str
    args: tuple[Any, ...] = ()

    def repeat(self, handler: Any) -> None:
        """Call the matching ``<kind>_event`` method of ``handler``, if it has one."""
        callback = getattr(handler, f"{self.kind}_event", None)
        if callable(callback):
            callback(*self.args)


@dataclass
class InputState:
    """Current input state of one window."""

    screen_width: float = 800.0
    screen_height: float = 600.0
    dpi_scale: float = 1.0
    simulate_mouse_with_touch: bool = True
    cursor_grabbed: bool = False
    prevent_quit_event: bool = False
    quit_requested: bool = False
    _keys_down: set[Hashable] = field(default_factory=set, repr=False)
    _keys_pressed: set[Hashable] = field(default_factory=set, repr=False)
    _keys_released: set[Hashable] = field(default_factory=set, repr=False)
    _mouse_down: set[MouseButton] = field(default_factory=set, repr=False)
    _mouse_pressed: set[MouseButton] = field(default_factory=set, repr=False)
    _mouse_released: set[MouseButton] = field(default_factory=set, repr=False)
    _touches: dict[int, Touch] = field(default_factory=dict, repr=False)
    _chars_pressed: list[str] = field(default_factory=list, repr=False)
    _mouse_position: Vec2 = field(default=Vec2(0.0, 0.0), repr=False)
    _mouse_wheel: Vec2 = field(default=Vec2(0.0, 0.0), repr=False)
    _subscribers: list[list[InputEvent]] = field(default_factory=list, repr=False)

    # -- event intake -------------------------------------------------------

    def _broadcast(self, event: InputEvent) -> None:
        for queue in self._subscribers:
            queue.append(event)

    def resize_event(self, width: float, height: float) -> None:
        """Record a new window size."""
        self.screen_width = width
        self.screen_height = height

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative mouse motion; moves the cursor only while it is grabbed."""
        if self.cursor_grabbed:
            self._mouse_position = self._mouse_position + Vec2(x, y)
            position = self._mouse_position
            self._broadcast(InputEvent("mouse_motion", (position.x, position.y)))

    def mouse_motion_event(self, x: float, y: float) -> None:
        """Absolute mouse motion; ignored while the cursor is grabbed."""
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast(InputEvent("mouse_motion", (x, y)))

    def mouse_wheel_event(self, x: float, y: float) -> None:
        """Record wheel movement for this frame."""
        self._mouse_wheel = Vec2(x, y)
        self._broadcast(InputEvent("mouse_wheel", (x, y)))

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button went down at (x, y)."""
        self._mouse_down.add(button)
        self._mouse_pressed.add(button)
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast(InputEvent("mouse_button_down", (button, x, y)))

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        """A mouse button went up at (x, y)."""
        self._mouse_down.discard(button)
        self._mouse_released.add(button)
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast(InputEvent("mouse_button_up", (button, x, y)))

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        """A touch changed; optionally mirrored as left-button mouse events."""
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y))

        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)

        self._broadcast(InputEvent("touch", (phase, touch_id, x, y)))

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> None:
        """A character was typed."""
        self._chars_pressed.append(character)
        self._broadcast(InputEvent("char", (character, modifiers, repeat)))

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> None:
        """A key went down; auto-repeats do not count as presses."""
        self._keys_down.add(keycode)
        if not repeat:
            self._keys_pressed.add(keycode)
        self._broadcast(InputEvent("key_down", (keycode, modifiers, repeat)))

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> None:
        """A key went up."""
        self._keys_down.discard(keycode)
        self._keys_released.add(keycode)
        self._broadcast(InputEvent("key_up", (keycode, modifiers)))

    def quit_requested_event(self) -> bool:
        """The window was asked to close.

        Returns True if the quit is cancelled because quitting is prevented;
        the request is then reported by :meth:`is_quit_requested`.
        """
        if self.prevent_quit_event:
            self.quit_requested = True
            return True
        return False

    def end_frame(self) -> None:
        """Clear per-frame state and advance touch phases."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self.quit_requested = False

        self._touches = {
            touch_id: (
                replace(touch, phase=TouchPhase.STATIONARY)
                if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED)
                else touch
            )
            for touch_id, touch in self._touches.items()
            if touch.phase not in (TouchPhase.ENDED, TouchPhase.CANCELLED)
        }

    # -- queries ------------------------------------------------------------

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window, or release it."""
        self.cursor_grabbed = grab

    def _to_local(self, pixels: Vec2) -> Vec2:
        size = Vec2(self.screen_width, self.screen_height)
        return (pixels / size) * 2.0 - Vec2(1.0, 1.0)

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in logical pixels."""
        position = self._mouse_position
        return (position.x / self.dpi_scale, position.y / self.dpi_scale)

    def mouse_position_local(self) -> Vec2:
        """Mouse position mapped to the range [-1, 1] on both axes."""
        return self._to_local(Vec2(*self.mouse_position()))

    def touches(self) -> list[Touch]:
        """Active touches with positions in pixels."""
        return list(self._touches.values())

    def touches_local(self) -> list[Touch]:
        """Active touches with positions mapped to [-1, 1]."""
        return [
            replace(touch, position=self._to_local(touch.position))
            for touch in self._touches.values()
        ]

    def mouse_wheel(self) -> tuple[float, float]:
        """Wheel movement during this frame."""
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """Whether the key went down this frame."""
        return keycode in self._keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        """Whether the key is held."""
        return keycode in self._keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        """Whether the key went up this frame."""
        return keycode in self._keys_released

    def get_char_pressed(self) -> str | None:
        """Take the most recently typed character from the queue, or None."""
        return self._chars_pressed.pop() if self._chars_pressed else None

    def get_last_key_pressed(self) -> Hashable | None:
        """One of the keys pressed this frame, or None."""
        return next(iter(self._keys_pressed), None)

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        """Whether the button is held."""
        return button in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether the button went down this frame."""
        return button in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        """Whether the button went up this frame."""
        return button in self._mouse_released

    def prevent_quit(self) -> None:
        """Cancel window close requests from now on."""
        self.prevent_quit_event = True

    def is_quit_requested(self) -> bool:
        """Whether a prevented close was requested this frame."""
        return self.quit_requested

    # -- subscribers --------------------------------------------------------

    def register_input_subscriber(self) -> int:
        """Register a subscriber and return its id for :meth:`repeat_all_input`."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def repeat_all_input(self, handler: Any, subscriber: int) -> None:
        """Replay to ``handler`` every event since the subscriber's last call."""
        queue = self._subscribers[subscriber]
        events, queue[:] = list(queue), []
        for event in events:
            event.repeat(handler)