# mapo

Building blocks for a small real-time application or game engine: events,
layers, timing, vector math, interned names, allocation arithmetic, logging
and mesh data.

## Modules

- `mapo.events`: `Event` and its subclasses for window, application, key and
  mouse events (`WindowResizeEvent`, `KeyPressedEvent`, `MouseMovedEvent` and
  others). Each class has an `event_type` (`EventType`), a `name` and
  `category_flags` (`EventCategory`, an `IntFlag`). `Event.in_category()`
  tests a category, and `str(event)` gives a short description such as
  `"WindowResize: 800 x 600"`. `EventDispatcher(event).dispatch(cls, handler)`
  calls `handler` when the event has the type of `cls`. If the handler returns
  true, the event is marked `handled`.
- `mapo.input_codes`: `Key` and `Mouse`, integer enums of keyboard keys and
  mouse buttons (`Key.ESCAPE`, `Mouse.BUTTON_LEFT`, ...).
- `mapo.layers`: `Layer` has the hooks `on_attach`, `on_detach`, `on_update`,
  `on_imgui_render` and `on_event`. The base hooks record `attached`,
  `last_dt`, `frames_rendered` and `last_event`. In a `LayerStack`, normal
  layers (`push_layer` / `pop_layer`) come before overlays (`push_overlay` /
  `pop_overlay`). Pushing the same layer twice raises `AssertionFailure`.
  Popping a layer that is not there logs a warning. Iterate the stack forwards
  to update and use `reversed()` to deliver events. `clear()` detaches every
  layer.
- `mapo.timer`: `Timer`, a monotonic stopwatch with `start()`, `stop()`,
  `elapsed()`, `tick()` and the `is_running` property. Readings can be taken in
  any `Resolution`. `stop()` and `elapsed()` return 0 when the timer is not
  running.
- `mapo.timestep`: `Timestep`, a frame time with the `seconds` and
  `milliseconds` properties. It also converts with `float()`.
- `mapo.mathops`: `bit`, `is_power_of_two`, `radians`, `degrees`, `clamp`,
  `normalize`, `length`, `dot` and `cross`, built on numpy.
  `decompose_transform(matrix)` splits a 4×4 transform into translation, Euler
  rotation (radians) and scale. It raises `ValueError` when the homogeneous
  component is zero.
- `mapo.optional`: `Optional`, a container with the `has_value` and `value`
  properties and the methods `value_or()`, `assign()` and `reset()`. Assigning
  `None` empties it. Reading `value` while it is empty raises
  `AssertionFailure`.
- `mapo.string_name`: `SName`, a string interned in a global table under its
  CRC-32 hash. Names compare and hash by that value. The `text` property gives
  the string back. `crc32()` computes the checksum.
- `mapo.strings`: `format_string(fmt, *args)` applies printf-style `%`
  formatting and requires the result to be shorter than 256 characters.
- `mapo.hashing`: `hash_combine(seed, *values)` folds the hashes of values
  into a 64-bit seed. Lists and arrays are hashed by their items.
- `mapo.allocator`: the alignment arithmetic `align_address`,
  `aligned_shift` and `modulo_shift`, and `LinearAllocator`, a bump allocator
  over a `bytearray`. `allocate()` returns an offset and raises `MemoryError`
  when the buffer is full. `reset()` makes the whole buffer available again.
- `mapo.model`: `Vertex` (position, colour, normal, uv) and `ModelBuilder`.
  `load_model()` reads the triangles of a Wavefront OBJ file, splits polygons
  into triangles and removes duplicate vertices. `add_vertex()` does the same
  deduplication for one vertex. `create_cube_builder()` returns a coloured
  1×1×1 cube with 24 vertices and 36 indices.
- `mapo.log`: `init_logging()` sets up an engine logger
  (`get_engine_logger()`) and an app logger (`get_app_logger()`). Both write to
  standard output as `NAME [level] (file:line) - message` and into a shared ring
  buffer of the last five messages. `get_last_message()` returns the newest of
  them and raises `RuntimeError` before `init_logging()` has been called.
- `mapo.uassert`: `ensure`, `ensure_equal` and `ensure_not_equal` log
  `ASSERT FAILED: ...` and raise `AssertionFailure`, a subclass of
  `AssertionError`.

## What it does not do

There is no window, renderer, input polling or application main loop. Events
must be created and delivered by your own code. `ModelBuilder` holds vertex
and index data but does not upload it anywhere. The package has no command to
run.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from mapo.events import EventDispatcher, KeyPressedEvent
from mapo.input_codes import Key
from mapo.layers import Layer, LayerStack


class GameLayer(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self.on_key)

    def on_key(self, event):
        return event.key_code == Key.ESCAPE


stack = LayerStack()
stack.push_layer(GameLayer("game"))

event = KeyPressedEvent(Key.ESCAPE, 0)
for layer in reversed(stack):
    if event.handled:
        break
    layer.on_event(event)

assert event.handled
```

```python
from mapo.string_name import SName

assert SName("player") == SName("player")
assert SName("player").text == "player"
```

```python
from mapo.model import create_cube_builder

cube = create_cube_builder()
assert (cube.vertex_count, cube.index_count) == (24, 36)
```