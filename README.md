# quadkit

A small, frame-driven toolkit for writing games and interactive programs.
It has no window or renderer of its own; it is the logic that sits under one.

- `quadkit.color` – `Color` (with `from_rgba`, `from_bytes`, `to_bytes`, `to_tuple`),
  `color_u8`, `hsl_to_rgb`, `rgb_to_hsl`, and named constants such as `RED`,
  `WHITE`, `BLACK` and `BLANK`.
- `quadkit.geometry` – `Vec2`, `Rect`, `RectOffset`, `Circle`, `polar_to_cartesian`,
  `cartesian_to_polar`, `clamp`.
- `quadkit.shaders` – `preprocess_shader` expands `#include "name"` directives
  from a `PreprocessorConfig`; it raises `IncludeNotFoundError` for an unknown
  include and `ShaderSyntaxError` for a malformed directive.
- `quadkit.storage` – type-keyed storage: a `Storage` class and the shared
  `store`, `get` and `try_get` functions.
- `quadkit.animation` – `Animation`, `AnimationFrame` and `AnimatedSprite` for
  sprite sheets, advanced with `AnimatedSprite.update(frame_time)`.
- `quadkit.mouse_camera` – `MouseCamera`, a pan-and-zoom camera driven by mouse
  motion and the wheel.
- `quadkit.coroutines` – `async def` coroutines stepped once per frame by a
  `CoroutinesContext`, with `next_frame()`, `wait_seconds()` and manual polling
  through `Coroutine.set_manual_poll` / `Coroutine.poll`.
- `quadkit.state_machine` – `State` and `StateMachine`: up to 32 numbered states
  with per-frame update, entry coroutine and exit callbacks.
- `quadkit.telemetry` – a `Profiler` with nested timing zones per frame
  (`begin_zone` / `end_zone` or the `zone` context manager), logged strings and
  a `log_time` context manager.
- `quadkit.files` – `load_file` / `load_string` with an optional assets folder,
  raising `FileError` when a file cannot be read.
- `quadkit.input` – `InputState`, which turns window events into per-frame
  queries (keys, mouse buttons, wheel, touches, typed characters) and can replay
  events to registered subscribers.

## Installing

```
pip install .
```

## Examples

Colours and geometry:

```python
from quadkit.color import Color, rgb_to_hsl
from quadkit.geometry import Rect, Vec2

red = Color.from_rgba(255, 0, 0, 255)
print(rgb_to_hsl(red))          # (0.0, 1.0, 0.5)

area = Rect(0, 0, 100, 50)
print(area.contains(Vec2(10, 10)))                  # True
print(area.intersect(Rect(50, 25, 100, 100)))       # Rect(x=50, y=25, w=50, h=25)
```

Shader includes:

```python
from quadkit.shaders import PreprocessorConfig, preprocess_shader

config = PreprocessorConfig(includes=[("common.glsl", "float k = 1.0;")])
print(preprocess_shader('#include "common.glsl"\nvoid main() {}', config))
```

Coroutines, stepped once per frame:

```python
from quadkit.coroutines import CoroutinesContext, next_frame

context = CoroutinesContext()

async def blink():
    print("on")
    await next_frame()
    print("off")

handle = context.start_coroutine(blink())
context.update(1 / 60)      # prints "on"
context.update(1 / 60)      # prints "off"
print(handle.is_done())     # True
```

Input state:

```python
from quadkit.input import InputState

state = InputState()
state.key_down_event("space", None, False)
print(state.is_key_pressed("space"))   # True
state.end_frame()
print(state.is_key_pressed("space"))   # False
print(state.is_key_down("space"))      # True
```

## What it does not do

quadkit opens no window, draws nothing and plays no sound. There is no
built-in frame loop and no scene graph: your program feeds window events to an
`InputState`, calls `CoroutinesContext.update`, `InputState.end_frame` and
`Profiler.reset` once per frame itself, and does its own rendering.

## Running the tests

```
pip install .[test]
pytest
```