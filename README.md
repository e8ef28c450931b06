# quickshapes

quickshapes provides building blocks for custom UI items that do not depend on any toolkit. It covers vertex geometry for shapes, stretch layouts, kinetic (inertia) scrolling, and a state machine for touch and mouse input. The package only computes coordinates, colours, sizes and callbacks. You pass the results to whatever renderer or event loop you use.

## Install

From a checkout of the project:

```
pip install .
```

The package has no runtime dependencies.

## Modules

- `quickshapes.color`
  - `Color` is a frozen 8-bit RGBA colour. You can build one with `Color.from_name` (a few colour names, or `#rgb`, `#rrggbb` or `#aarrggbb`), `Color.from_hsv_f` or `Color.from_rgb_f`.
  - To read it back, use `hue_f()`, `saturation_f()`, `value_f()`, `alpha_f()`, or `rgba()`, which returns a packed `0xAARRGGBB` integer.
  - `hsv_matrix_to_image` and `rgb_matrix_to_image` convert rows of `(h, s, v)` or `(r, g, b)` triples into rows of opaque packed pixels.
- `quickshapes.circles`
  - `IrregularCircleItem` is a filled triangle fan.
  - `IrregularCircleOutline` is a single-coloured line loop.
  - `IrregularCircleOutlineTwoColored` is a line loop whose colour alternates every three vertices.
  - You set `radii` (relative radii, at least 3 of them) and `width`, then call `vertices()`.
  - `interpolated_outline(radii, item_radius)` is the shared helper. It produces four interpolated points per radius, starting at the bottom and going anti-clockwise.
- `quickshapes.curves`
  - `LineItem.vertices()` returns the four corners of a thick straight line.
  - `NodeConnectionLines.geometries(targets)` returns one cubic Bézier triangle strip from the item's right middle to each target point.
  - `SpectrumItem.fill_vertices()` and `outline_vertices()` return the fill and outline of a spectrum graph.
  - The module also exposes the helpers `bezier_point`, `bezier_tangent`, `normal_from_tangent` and `connection_line_vertices`.
- `quickshapes.points`
  - `PointsItem.vertices()` places points at fractions of the item's width and height.
- `quickshapes.colored_points`
  - `ColoredPointsItem.vertices()` does the same as `PointsItem` and also colours each point.
  - Each colour is a gamma-corrected HSV fade between `color1` and `color2`, selected by `color_values`.
  - It raises `ValueError` when there are fewer colour values than points.
- `quickshapes.stretch`
  - `StretchColumn` and `StretchRow` position and resize `LayoutItem` children when you call `layout()`.
  - A child whose implicit size is negative along the layout direction is stretched by that proportion.
  - If `default_size` is set, each stretched child is sized as a multiple of it instead.
- `quickshapes.kinetic`
  - `KineticEffect` (1D) and `KineticEffect2D` simulate inertia and friction after a drag.
  - Call `start`, `update` and `stop` with the drag positions, then call `step()` once per frame. It returns `False` once the movement has come to rest.
  - Both accept an injectable `clock` and the callbacks `on_moving` and `on_velocity_changed`.
- `quickshapes.touch_event`
  - `TouchAreaEvent` holds one touch or mouse event. Build it with `from_touch_point` or `from_mouse`.
  - The input types are `TouchPoint`, `TouchPointState` and `MouseEvent`.
- `quickshapes.touch_area`
  - `TouchArea` tracks up to two touches or the mouse.
  - Its signals include `touch_down`, `touch_move`, `touch_up`, `touch_canceled`, `click`, `short_click`, `long_click`, `right_click`, `double_click` and `scroll_event`. Attach callbacks with `.connect(...)`.

## Examples

Stretch layout:

```python
from quickshapes.stretch import LayoutItem, StretchColumn

column = StretchColumn(width=200, height=1000)
column.add_child(LayoutItem(implicit_height=0, height=400))
column.add_child(LayoutItem(implicit_height=-4))
column.add_child(LayoutItem(implicit_height=-6))
column.layout()
# the children are now 400, 240 and 360 pixels high
```

Mouse click:

```python
from quickshapes.touch_area import TouchArea
from quickshapes.touch_event import MouseEvent

area = TouchArea()
area.click.connect(lambda touch: print("clicked at", touch.item_x, touch.item_y))

event = MouseEvent(global_pos=(10, 10), local_pos=(1, 1), window_pos=(5, 5))
area.mouse_press(event)
area.mouse_release(event)
```

## What it does not do

- Nothing is drawn. Every item only returns vertex lists, sizes or colours.
- There is no event loop and there are no timers.
  - For `KineticEffect` and `KineticEffect2D`, your frame loop calls `step()` for as long as it returns `True`.
  - For `TouchArea`, you must call `long_click_timeout()` yourself once `long_click_duration` milliseconds have passed after a press. Short clicks are detected from the injected clock.
- There is no command-line tool.

## Tests

```
pip install -e ".[test]"
pytest
```