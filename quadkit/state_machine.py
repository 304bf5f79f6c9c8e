"""Numbered states with per-state update, entry coroutine and exit callbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from quadkit.coroutines import Coroutine

__all__ = ["MAX_STATE", "State", "StateMachine"]

T = TypeVar("T")

MAX_STATE = 32


@dataclass(frozen=True)
class State(Generic[T]):
    """Callbacks of one state; every callback is optional.

    ``update(owner, dt)`` runs each frame while the state is active,
    ``coroutine(owner)`` runs on entry and returns the coroutine to drive,
    ``on_end(owner)`` runs when the state is left.
    """

    update: Callable[[T, float], Any] | None = None
    coroutine: Callable[[T], Coroutine] | None = None
    on_end: Callable[[T], Any] | None = None

    def with_update(self, update: Callable[[T, float], Any]) -> State[T]:
        """A copy of this state with ``update`` as its per-frame callback."""
        return replace(self, update=update)

    def with_coroutine(self, coroutine: Callable[[T], Coroutine]) -> State[T]:
        """A copy of this state that starts ``coroutine`` on entry."""
        return replace(self, coroutine=coroutine)

    def with_on_end(self, on_end: Callable[[T], Any]) -> State[T]:
        """A copy of this state that calls ``on_end`` when it is left."""
        return replace(self, on_end=on_end)


def _check_id(state_id: int) -> None:
    if not 0 <= state_id < MAX_STATE:
        raise ValueError(f"state id {state_id} out of range 0..{MAX_STATE - 1}")


class StateMachine(Generic[T]):
    """Up to :data:`MAX_STATE` states; starts in state 0.

    A requested state change takes effect at the next :meth:`update`.
    """

    def __init__(self) -> None:
        self._states: list[State[T]] = [State() for _ in range(MAX_STATE)]
        self._active_coroutine: Coroutine | None = None
        self._next_state: int | None = None
        self._current_state = 0

    @property
    def active_coroutine(self) -> Coroutine | None:
        """The coroutine started by the most recently entered state, if any."""
        return self._active_coroutine

    def add_state(self, state_id: int, state: State[T]) -> None:
        """Install ``state`` under ``state_id``, replacing the previous one."""
        _check_id(state_id)
        self._states[state_id] = state

    def set_state(self, state: int) -> None:
        """Request a switch to ``state`` at the next update."""
        _check_id(state)
        self._next_state = state

    def state(self) -> int:
        """The id of the active state."""
        return self._current_state

    def update(self, owner: T, dt: float) -> None:
        """Apply a pending state change, run the state's update callback and
        step its coroutine by ``dt``."""
        pending, self._next_state = self._next_state, None
        if pending is not None:
            if pending != self._current_state:
                leaving = self._states[self._current_state]
                if leaving.on_end is not None:
                    leaving.on_end(owner)
                entering = self._states[pending]
                if entering.coroutine is not None:
                    coroutine = entering.coroutine(owner)
                    coroutine.set_manual_poll()
                    self._active_coroutine = coroutine
            self._current_state = pending

        current = self._states[self._current_state]
        if current.update is not None:
            current.update(owner, dt)

        if self._active_coroutine is not None:
            self._active_coroutine.poll(dt)