# e2d

These are the platform-independent pieces of a small 2D game framework. The package only uses the Python standard library.

| Module | Contents |
| --- | --- |
| `e2d.geometry` | `Point` (the alias `Vector2` is the same class), `Size`, `Rect` and the 3×2 affine `Matrix32`. |
| `e2d.style` | `Color`, `FontWeight` and `Font`. |
| `e2d.events` | `EventType`, `MouseCode`, the event dataclasses (`MouseMoveEvent`, `MouseDownEvent`, `MouseUpEvent`, `MouseWheelEvent`, `KeyDownEvent`, `KeyUpEvent`) and `Listener`. |
| `e2d.text` | `format_string`, `wide_to_narrow` and `narrow_to_wide`. |
| `e2d.logger` | `Logger`, which writes prefixed lines to a stream. |
| `e2d.timing` | `Clock`, a frame clock with a fixed 15 ms step, and `default_clock()`. |
| `e2d.scenes` | `SceneManager`, which switches scenes, runs transitions and keeps a back stack. |
| `e2d.input` | `KeyCode` and `Input`, which holds keyboard and mouse state and detects presses and releases per frame. |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Geometry

`Point` and `Size` are frozen dataclasses and support `+`, `-`, `*`, `/` and unary `-`. To convert between them, use `Point.to_size()` and `Size.to_point()`. `Point.distance(p1, p2)` returns the Euclidean distance between two points.

`Rect` has an `origin` and a `size`, and has these methods:

- `Rect.from_values(x, y, w, h)`
- `set_rect(...)`
- the corner accessors `left_top`, `right_top`, `left_bottom` and `right_bottom`
- `contains_point(...)`, which counts points on the edge as inside
- `intersects(...)`, which counts rectangles that touch as overlapping

`Matrix32` uses the row-vector convention, and its angles are in degrees. It provides:

- the constructors `translation`, `scaling`, `rotation`, `skewing` and `invert`
- `transform_point`, and `transform_rect`, which returns the bounding box of the transformed rectangle
- `translate`, `determinant`, `is_identity`, `is_invertible` and `identity()`
- indexing from `m[0]` to `m[5]`

`invert` raises `ZeroDivisionError` when the matrix is singular.

```python
from e2d.geometry import Point, Rect, Matrix32

r = Rect.from_values(0, 0, 10, 5)
assert r.contains_point(Point(3, 4))

m = Matrix32.rotation(90, Point(0, 0))
print(m.transform_point(Point(1, 0)))   # about Point(0, 1)
```

## Colours and fonts

`Color.from_rgb(0xRRGGBB, alpha=1.0)` splits the integer into components in the range 0..1. By default a `Font` has an empty family, size 22, weight `FontWeight.Normal` and is not italic.

## Events and listeners

Each event dataclass sets its own `type`. The `target` field is keyword-only and defaults to `None`.

A `Listener(callback, name, paused)` calls its callback only while it is running:

- `stop()` and `start()` switch the listener off and on.
- `done()` marks it as finished, and `is_done()` reports that.

## Logging

```python
import io
from e2d.logger import Logger

out = io.StringIO()
log = Logger(out)
log.warning("%d lives left", 3)
assert out.getvalue() == "Warning: 3 lives left\n"
```

`message` prefixes its line with a single space and `error` prefixes it with `"Error: "`. Calling `disable()` silences the logger. If no stream is given, it writes to `sys.stdout`.

## Frame clock

A `Clock` reads seconds from a callable, which defaults to `time.monotonic`, so tests can drive it by hand:

```python
from e2d.timing import Clock

t = [0.0]
clock = Clock(now=lambda: t[0])
clock.start()

t[0] = 0.016
clock.update_now()
assert clock.is_ready()              # more than 15 ms since the last fixed step
assert clock.total_time_ms() == 16
clock.update_last()                  # advance the fixed step, start a new frame
```

- `delta_time()` and `total_time()` return seconds.
- `sleep_duration()` returns how long a loop should wait before the next frame, and `sleep()` waits for that long.
- `default_clock()` returns one clock shared by the whole process.

## Scenes

`SceneManager` accepts any object that has the methods `on_enter`, `on_exit`, `update`, `render` and `dispatch`. A transition needs the methods `init`, `update`, `render`, `is_done` and `stop`.

```python
from e2d.scenes import SceneManager

class Scene:
    def __init__(self, name): self.name = name
    def on_enter(self): print("enter", self.name)
    def on_exit(self): print("exit", self.name)
    def update(self): pass
    def render(self): pass
    def dispatch(self, event): pass

scenes = SceneManager()
menu, level = Scene("menu"), Scene("level")

scenes.enter(menu)
scenes.start()                  # menu becomes current
scenes.enter(level)
scenes.update()                 # switch; menu is saved on the stack
scenes.back()
scenes.update()                 # back to menu; level is not saved
assert scenes.current_scene() is menu
```

`back()` raises `LookupError` when the stack is empty. `shutdown()` forgets every scene and any transition.

## Input

`Input` does not read devices itself. Once per frame, whatever polls the keyboard and mouse passes the keys and buttons that are held down, together with the mouse position and its x/y/wheel movement:

```python
from e2d.input import Input, KeyCode

state = Input()
state.update(keys=[KeyCode.Space])
assert state.is_key_press(KeyCode.Space)
state.update(keys=[KeyCode.Space])
assert state.is_key_down(KeyCode.Space) and not state.is_key_press(KeyCode.Space)
state.update(keys=[])
assert state.is_key_release(KeyCode.Space)
```

The mouse methods do the same job for buttons: `is_mouse_down`, `is_mouse_press` and `is_mouse_release`. The mouse position and movement come from `mouse_x`, `mouse_y`, `mouse_pos`, `mouse_delta_x`, `mouse_delta_y` and `mouse_delta_z`.

## What this package does not do

The package has no window, no renderer, no audio and no device polling.

It also has no timed actions or tweens and no action manager. There is no ready-made game loop either. To build a loop, combine these pieces yourself:

- `Clock` for frame timing
- `Input.update` for the keyboard and mouse state
- `SceneManager.update` and `SceneManager.render` for the scenes