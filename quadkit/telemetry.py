"""Per-frame profiling zones and logged strings."""

from __future__ import annotations

import copy
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

__all__ = ["Zone", "Frame", "Profiler"]


@dataclass
class Zone:
    """A timed, named span of a frame; zones nest."""

    name: str
    start_time: float
    duration: float = 0.0
    children: list[Zone] = field(default_factory=list)


@dataclass
class Frame:
    """The zones recorded during one frame and the frame's full time."""

    full_frame_time: float = 0.0
    zones: list[Zone] = field(default_factory=list)
    _open: list[Zone] = field(default_factory=list, init=False, repr=False, compare=False)

    def try_clone(self) -> Frame | None:
        """An independent copy, or None while a zone is still open."""
        if self._open:
            return None
        return Frame(self.full_frame_time, copy.deepcopy(self.zones))


class Profiler:
    """Records nested zones per frame while enabled and collects log strings."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._frame = Frame()
        self._prev_frame = Frame()
        self._enabled = False
        self._enable_request: bool | None = None
        self._strings: list[str] = []

    @property
    def enabled(self) -> bool:
        """Whether zones are being recorded."""
        return self._enabled

    def enable(self) -> None:
        """Start recording zones from the next frame."""
        self._enable_request = True

    def disable(self) -> None:
        """Stop recording zones from the next frame."""
        self._enable_request = False

    def begin_zone(self, name: str) -> None:
        """Open a zone, nested in the currently open one if any."""
        if not self._enabled:
            return
        frame = self._frame
        siblings = frame._open[-1].children if frame._open else frame.zones
        zone = Zone(name, self._clock())
        siblings.append(zone)
        frame._open.append(zone)

    def end_zone(self) -> None:
        """Close the innermost open zone and record its duration."""
        if not self._enabled:
            return
        frame = self._frame
        if not frame._open:
            raise RuntimeError("end_zone called without begin_zone")
        zone = frame._open.pop()
        zone.duration = self._clock() - zone.start_time

    @contextmanager
    def zone(self, name: str) -> Iterator[None]:
        """Record the enclosed block as a zone."""
        self.begin_zone(name)
        try:
            yield
        finally:
            self.end_zone()

    def reset(self, frame_time: float) -> None:
        """Finish the current frame, which took ``frame_time``, and start a new one."""
        if self._frame._open:
            raise RuntimeError("New frame started with unpaired begin/end zones.")
        self._frame.full_frame_time = frame_time
        self._prev_frame = self._frame
        self._frame = Frame()
        if self._enable_request is not None:
            self._enabled = self._enable_request
            self._enable_request = None

    def frame(self) -> Frame:
        """A copy of the last finished frame."""
        return Frame(self._prev_frame.full_frame_time, copy.deepcopy(self._prev_frame.zones))

    def log_string(self, string: str) -> None:
        """Append ``string`` to the log."""
        self._strings.append(string)

    def strings(self) -> list[str]:
        """All logged strings, oldest first."""
        return list(self._strings)

    @contextmanager
    def log_time(self, name: str) -> Iterator[None]:
        """Log how long the enclosed block took, as ``Time query: name, 0.5s``."""
        start = self._clock()
        try:
            yield
        finally:
            self.log_string(f"Time query: {name}, {self._clock() - start:.1f}s")