# cuddlywidgets

Building blocks for a small widget toolkit. The package computes widget
geometry and the vertex and element arrays for drawing it. It does no drawing
itself, so it runs without a display.

## Installation

```
pip install .
```

To also install the test requirements:

```
pip install ".[test]"
```

## Modules

### `cuddlywidgets.cache`

`BasicCache(type_name, cleanup=None, prune_interval=600.0, lifetime=1200.0)`
maps keys to objects and records when each entry was last used.

- `cache[key] = obj` stores an object. `cache[key]` returns it and refreshes
  its last-used time. A missing key raises `KeyError`.
- `key in cache` and `len(cache)` work as expected.
- `erase(key)` removes an entry if it is there.
- `each(func)` calls `func` on every cached object.
- `prune(now=None)` removes the entries that were last used more than
  `lifetime` seconds before `now`, measured on the `time.monotonic()` clock,
  and returns how many it removed. The entry under key `0` is never pruned.
- A background daemon thread calls `prune()` every `prune_interval` seconds.
- `close()` stops that thread and empties the cache. The cache also works as a
  context manager and calls `close()` on exit.

`cleanup` is called on each object that leaves the cache, whether it was
erased, pruned or removed at close.

### `cuddlywidgets.image`

- `Image(width=0, height=0, per_pixel=0)` is a zero-filled `bytearray` buffer
  held in `data`. It also has `reset()`, `copy()` and equality. `cells()`
  yields the pixels as `Cell`s and raises `ValueError` unless `per_pixel` is 4.
- `Cell(r, g, b, a)` is one immutable pixel with 8-bit channels.
  `Cell.from_color((r, g, b, a))` clamps each float to 0..1, multiplies it by
  255 and truncates. `cell | other` ORs the channels together. `other` can be
  a `Cell` or a four-float colour.

### `cuddlywidgets.vertex_buffer`

`VertexBuffer` holds interleaved vertices `(x, y, r, g, b, a, u, v)` in
`vertex` and triangle indices in `element`. The texture coordinates are always
`NO_TEXTURE` (`-1000.0`).

- `generate_box(ul, lr, color)` adds 4 vertices and 6 indices.
- `generate_ellipse(center, radius, inner_pct, segments, color)` adds a ring.
  `inner_pct` is clamped to `[0, 0.99]` and `segments` to `[15, 720]`.
- `generate_ellipse_divider(center, radius, pct, angle, color)` adds a radial
  divider one degree wide.
- `vertex_bytes()`, `vertex_size()`, `element_bytes()`, `element_size()` and
  `element_count()` return the raw data and its sizes.

### `cuddlywidgets.widget`

`Widget(parent, width=0, height=0)` sits under a `parent` that satisfies the
`Parent` protocol. A parent provides `size`, `pixel_size`, `add_child`,
`remove_child` and `move_child`. A parent of `None` raises `ValueError`.

- `set_position(x=None, y=None)` and `get_position(absolute=False)` place the
  widget. A negative coordinate counts from the parent's far edge.
  `reposition()` recomputes the placement after the parent has been resized.
- `set_border(sides, value)` / `get_border(side)` and `set_margin(sides,
  value)` / `get_margin(side)` take `Side` flags. `set_color(roles, value)` /
  `get_color(role)` take `ColorRole` flags. The getters raise `ValueError`
  when given more than one flag.
- `set_size(width=None, height=None)`, `set_visible(visible)` and `close()`
  change the size, show or hide the widget, or hide it and detach it from its
  parent.
- `generate_points()` builds a `VertexBuffer` with the background box and one
  box for each non-zero border. The widget keeps the current buffer in
  `buffer` and its index count in `element_count`.

## Example

```python
from cuddlywidgets.widget import Side, Widget


class Screen:
    size = (800, 600)
    pixel_size = (2 / 800, 2 / 600)

    def __init__(self):
        self.children = []

    def add_child(self, child):
        self.children.append(child)

    def remove_child(self, child):
        self.children.remove(child)

    def move_child(self, child):
        pass


screen = Screen()
w = Widget(screen, 50, 50)
w.set_border(Side.ALL, 2)
w.set_position(-50, -50)
print(w.get_position(absolute=True))  # (700, 500)
print(w.element_count)                # 30
```

```python
from cuddlywidgets.cache import BasicCache

with BasicCache("fonts", cleanup=print) as cache:
    cache["mono"] = "loaded font"
    print(len(cache))  # 1
```

## What this package does not do

The package has no renderer, window, event loop or input handling. It has no
fonts, text or composite widgets either. It produces vertex and element data
and tracks widget state, and a caller passes that data to whatever graphics
layer it uses.

## Running the tests

```
pytest
```