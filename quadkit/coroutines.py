"""Cooperative coroutines stepped once per frame.

Coroutines are ordinary ``async def`` coroutine objects. They are driven by
hand, one step per frame: ``await next_frame()`` suspends until the next
frame and ``await wait_seconds(t)`` suspends until ``t`` seconds of frame
time have passed.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Coroutine as CoroutineObject, Generator, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "FrameFuture",
    "TimerDelayFuture",
    "Coroutine",
    "CoroutinesContext",
    "next_frame",
    "wait_seconds",
    "resume",
]

_active_delta: ContextVar[float] = ContextVar("quadkit_active_delta", default=0.0)


@contextmanager
def _delta_scope(delta: float) -> Iterator[None]:
    """Make ``delta`` the time step seen by timers while the block runs."""
    token = _active_delta.set(delta)
    try:
        yield
    finally:
        _active_delta.reset(token)


class FrameFuture:
    """Awaitable that suspends exactly once, until the next frame."""

    def __init__(self) -> None:
        self.done = False

    def __await__(self) -> Generator[None, None, None]:
        if not self.done:
            self.done = True
            yield


class TimerDelayFuture:
    """Awaitable that completes once the given time has elapsed."""

    def __init__(self, remaining_time: float) -> None:
        self.remaining_time = remaining_time

    def __await__(self) -> Generator[None, None, None]:
        while True:
            self.remaining_time -= _active_delta.get()
            if self.remaining_time <= 0.0:
                return
            yield


def next_frame() -> FrameFuture:
    """Return an awaitable that resumes on the next frame."""
    return FrameFuture()


def wait_seconds(time: float) -> TimerDelayFuture:
    """Return an awaitable that resumes after ``time`` seconds of frame time."""
    return TimerDelayFuture(time)


def resume(future: Any) -> bool:
    """Step ``future`` once; return True if it has finished."""
    try:
        future.send(None)
    except StopIteration:
        return True
    return False


def _discard(future: Any) -> None:
    """Close a coroutine that is being dropped, unless it is running right now."""
    if getattr(future, "cr_running", False) or getattr(future, "gi_running", False):
        return
    close = getattr(future, "close", None)
    if close is not None:
        close()


@dataclass
class _Slot:
    future: Any
    manual_poll: bool = False
    manual_time: float | None = None


@dataclass(frozen=True)
class Coroutine:
    """Handle to a coroutine started in a :class:`CoroutinesContext`."""

    _context: CoroutinesContext = field(repr=False, compare=True)
    id: int

    def is_done(self) -> bool:
        """Whether the coroutine has finished or been stopped."""
        return self._context._slots[self.id] is None

    def set_manual_poll(self) -> None:
        """Stop automatic polling; the coroutine then advances only via :meth:`poll`."""
        slot = self._context._slots[self.id]
        if slot is not None:
            slot.manual_time = 0.0
            slot.manual_poll = True

    def poll(self, delta_time: float) -> None:
        """Step the coroutine once, advancing its own timeline by ``delta_time``.

        Raises RuntimeError if the coroutine is not in manual poll mode.
        """
        slots = self._context._slots
        slot = slots[self.id]
        if slot is None:
            return
        if slot.manual_time is None:
            raise RuntimeError("coroutine is not in manual poll mode")
        slot.manual_time += delta_time
        with _delta_scope(delta_time):
            done = resume(slot.future)
        if done and slots[self.id] is slot:
            slots[self.id] = None


class CoroutinesContext:
    """Owns running coroutines and steps them once per frame."""

    def __init__(self) -> None:
        self._slots: list[_Slot | None] = []

    def start_coroutine(self, future: CoroutineObject | Awaitable[Any]) -> Coroutine:
        """Register ``future``; it is first stepped on the next :meth:`update`."""
        if not hasattr(future, "send"):
            if not inspect.isawaitable(future):
                raise TypeError(f"cannot start {future!r}: not awaitable")
            awaitable = future

            async def _wrapper() -> None:
                await awaitable

            future = _wrapper()
        self._slots.append(_Slot(future))
        return Coroutine(self, len(self._slots) - 1)

    def update(self, frame_time: float) -> None:
        """Step every automatically polled coroutine once."""
        with _delta_scope(frame_time):
            for index, slot in list(enumerate(self._slots)):
                if slot is None or slot.manual_poll:
                    continue
                if self._slots[index] is not slot:
                    continue
                if resume(slot.future) and self._slots[index] is slot:
                    self._slots[index] = None

    def stop_all_coroutines(self) -> None:
        """Stop every coroutine; existing handles report themselves done."""
        for index, slot in enumerate(self._slots):
            if slot is not None:
                self._slots[index] = None
                _discard(slot.future)

    def stop_coroutine(self, coroutine: Coroutine) -> None:
        """Stop one coroutine."""
        slot = self._slots[coroutine.id]
        self._slots[coroutine.id] = None
        if slot is not None:
            _discard(slot.future)