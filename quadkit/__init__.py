"""Frame-driven game toolkit: colours, geometry, coroutines, state machines, input and telemetry."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "color",
    "coroutines",
    "files",
    "geometry",
    "input",
    "mouse_camera",
    "shaders",
    "state_machine",
    "storage",
    "telemetry",
]