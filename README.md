# obsidian-kit

Framework-independent building blocks for editor-style user interfaces. The
package holds the state and geometry behind the widgets. You feed in input
events, sizes and elapsed time. It gives back positions, colors, events and
triangle meshes. It has no dependencies outside the standard library.

## Modules

- `obsidian_kit.colors`: the `Srgba` color type, which supports `with_alpha`,
  `mix`, `to_linear` and `to_vec4`. The module also holds the standard palette
  (`U1` to `U5`, `BACKGROUND`, `FOREGROUND`, `ACCENT`, `PRIMARY`,
  `DESTRUCTIVE`, `FOCUS`, `TEXT_SELECT`, and others).
- `obsidian_kit.shapes`: `ShapeBuilder` builds flat triangle-list meshes. It
  offers `stroke_rect`, `fill_rect`, `stroke_circle`, `fill_circle`,
  `fill_triangle`, `fill_quad` and `stroke_polygon`. `stroke_polygon` handles
  closed polygons, dashes and `StrokeMarker.ARROWHEAD` markers through
  `PolygonOptions`. `build()` returns a `Mesh` with `positions`, `indices` and
  an `aabb` bounding box. `Rect` is an axis-aligned rectangle given by
  `min_x, min_y, max_x, max_y`.
- `obsidian_kit.picking`: `update_hits(rays, camera_orders, backdrop)` reports
  a `PointerHits` with a `HitData` on the backdrop for every ray cast from a
  listed camera. The hit uses the maximum depth and is ordered one below the
  camera. It raises `LookupError` when `backdrop` is None.
- `obsidian_kit.scrolling`: `ScrollArea` holds the scroll state. It provides
  `scroll_by`, `scroll_to`, `update_sizes` and `thumb_layout`, where thumb
  offset and size are given as percentages. The module also has
  `wheel_events`, which routes pixel wheel deltas to hovered entities and
  ignores line-based ones. `handle_thumb_drag` and `handle_track_click`, which
  pages up or down, complete it, together with `ScrollDragState` and
  `DragMode`.
- `obsidian_kit.focus`: `FocusTree` holds nodes with tab indices and
  `TabGroup`s. It has ordered and modal groups, and `navigate` moves forwards
  or in reverse. `FocusState` tracks the focused entity and whether the focus
  ring is visible. It handles Tab, auto-focus, and routing to `KeyPressEvent`
  and `KeyCharEvent`, and answers focus, focus-visible and focus-within
  queries.
- `obsidian_kit.transition`: the `BistableTransition` enter/exit state
  machine. Its states are the `BistableTransitionState` values `ENTER_START`,
  `ENTERING`, `ENTERED`, `EXIT_START`, `EXITING` and `EXITED`.
- `obsidian_kit.animation`: `AnimatedTransition` interpolates numbers, tuples
  and `Srgba` colors over time. It uses an eased `CubicSegment` bezier curve,
  which defaults to control points (0.25, 0.1) and (0.25, 1.0). The module also
  provides `lerp`.
- `obsidian_kit.text_layout`: the `Selection` type (cursor and anchor) and
  `Glyph`. `selection_rect` and `caret_position` compute the geometry of a
  selection and of the caret.
- `obsidian_kit.text_input`: `TextEditor` is a controlled single-line editor.
  It provides `insert_char` and `key_press` for the `EditKey` keys: the arrow
  keys (Shift extends the selection), Home, End, Backspace and Delete. Edited
  text is reported through `on_change`. The editor does not store it itself.
- `obsidian_kit.slider`: `Slider` computes positions, formatted values and
  drag values, which are rounded to `precision` and clamped. It also handles
  step buttons and their icon colors.
- `obsidian_kit.splitter`: `Splitter` tracks drags and reports the new split
  value. `bar_color` gives the handle color for hover and drag.
- `obsidian_kit.viewport`: `compute_viewport_inset` finds the margins around a
  UI element. `compute_camera_viewport` turns them into a physical `Viewport`,
  which is always at least 1×1. Both take a `WindowResolution`.

## Installation

```
pip install .
```

## Examples

Building a mesh:

```python
from obsidian_kit.shapes import ShapeBuilder, Rect, PolygonOptions, StrokeMarker

builder = ShapeBuilder().with_stroke_width(2.0)
builder.fill_rect(Rect(0.0, 0.0, 10.0, 5.0))
builder.stroke_polygon(
    [(0.0, 0.0), (20.0, 0.0), (20.0, 20.0)],
    PolygonOptions(end_marker=StrokeMarker.ARROWHEAD),
)
mesh = builder.build()
print(len(mesh.positions), len(mesh.indices))
```

Tab navigation:

```python
from obsidian_kit.focus import FocusState, FocusTree, TabGroup

tree = FocusTree()
tree.add_node("panel", tab_group=TabGroup(order=0))
tree.add_node("name", parent="panel", tab_index=0)
tree.add_node("ok", parent="panel", tab_index=0)

state = FocusState()
state.handle_tab(tree)              # "name"
state.handle_tab(tree)              # "ok"
state.handle_tab(tree, shift=True)  # "name"
```

Opening animation of a dialog:

```python
from obsidian_kit.transition import BistableTransition

machine = BistableTransition(delay=0.3)
machine.set_open(True)
for _ in range(3):
    print(machine.step(1 / 60).as_name())  # enter-start, entering, entering
```

## What it does not do

The package draws nothing. It has no widget tree, no event loop and no window
or input handling of its own. Meshes, colors and layout values are returned
for a renderer of your choice to use. Size presets and shader material
parameters are not part of the package.

## Tests

```
pip install .[test]
pytest
```