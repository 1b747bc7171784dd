# paintcore

paintcore holds the building blocks of a brush engine for raster painting. It
is pure Python and needs nothing outside the standard library. With it you can
define brush settings and their dynamics, step the brush simulation, prepare
and draw single dabs onto a surface you provide, and composite dab masks onto
15-bit premultiplied RGBA pixel data.

## Installation

```
pip install paintcore
```

To run the test suite:

```
pip install "paintcore[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `paintcore.dab` | `Surface`, the interface a canvas implements (`draw_dab`, `get_color`), and `DabBrush` with `prepare_and_draw_dab` |
| `paintcore.dynamics` | `BrushDynamics` (`update_states_and_setting_values`, `count_dabs_to`), `exp_decay`, `smallest_angular_difference`, `ACTUAL_RADIUS_MIN`, `ACTUAL_RADIUS_MAX` |
| `paintcore.brush_core` | `BrushCore`: base values, mapping curves and internal states |
| `paintcore.settings` | `BrushSetting`, `BrushInput`, `BrushState`, `setting_from_name`, `input_from_name` |
| `paintcore.mapping` | `Mapping`: piecewise-linear input curves added to a base value |
| `paintcore.brushmodes` | Blend modes over run-length-encoded masks (normal, color, normal-and-eraser, lock-alpha) and colour sampling |
| `paintcore.helpers` | `clamp`, `rand_gauss`, and HSV/HSL conversions (`rgb_to_hsv`, `hsv_to_rgb`, `rgb_to_hsl`, `hsl_to_rgb`) |
| `paintcore.rectangle` | `Rectangle` with `expand_to_include_point` and `copy` |
| `paintcore.fifo` | `Fifo`, a small first-in, first-out queue |
| `paintcore.printbuf` | `PrintBuffer`, a growable byte buffer with `%`-style `printf` appending |

## Brush settings and states

`BrushSetting`, `BrushInput` and `BrushState` are integer enums. Each member's
`cname` is its lower-case name. `setting_from_name` and `input_from_name` look
members up by that name and raise `ValueError` for names they do not know.

`BrushCore` keeps one `Mapping` per setting. A new core has every base value
at 0 and no curves. Its random source defaults to `random.Random(1000)`.
Changing a base value with `set_base_value` also recomputes the curves for the
two speed inputs.

```python
from paintcore.brush_core import BrushCore
from paintcore.settings import BrushInput, BrushSetting

core = BrushCore()
core.set_base_value(BrushSetting.RADIUS_LOGARITHMIC, 1.5)
core.set_mapping_n(BrushSetting.OPAQUE_MULTIPLY, BrushInput.PRESSURE, 2)
core.set_mapping_point(BrushSetting.OPAQUE_MULTIPLY, BrushInput.PRESSURE, 0, 0.0, 0.0)
core.set_mapping_point(BrushSetting.OPAQUE_MULTIPLY, BrushInput.PRESSURE, 1, 1.0, 1.0)
print(core.is_constant(BrushSetting.OPAQUE_MULTIPLY))   # False
```

## Mappings

A `Mapping` adds up its `base_value` and one curve per input. Each curve has
between two and eight control points. Its value is found by linear
interpolation, and beyond the end points by extrapolation. Bad input numbers or
point indices raise `IndexError`. A point count of 1 or above 8 raises
`ValueError`, and so does an x value that is lower than the point before it.

```python
from paintcore.mapping import Mapping

m = Mapping(1)
m.base_value = 0.5
m.set_n(0, 2)
m.set_point(0, 0, 0.0, 0.0)
m.set_point(0, 1, 1.0, 1.0)
print(m.calculate_single_input(0.25))   # 0.75
```

## Drawing dabs

A canvas implements the `Surface` protocol:

- `draw_dab` returns true when it changed the surface.
- `get_color` returns the average `(r, g, b, a)` under a round area. A brush
  samples it only when it smudges.

`DabBrush` adds dab drawing to the simulation in `BrushDynamics`:

- `count_dabs_to` tells you how many dabs lie between the brush's state and a
  target position.
- `update_states_and_setting_values` runs one simulation step.
- `prepare_and_draw_dab` works out position, radius, colour, opacity and
  hardness from the current settings, then calls `surface.draw_dab`.

```python
import random

from paintcore.dab import DabBrush, Surface
from paintcore.settings import BrushSetting


class RecordingSurface(Surface):
    def __init__(self):
        self.dabs = []

    def draw_dab(self, x, y, radius, color_r, color_g, color_b, opaque,
                 hardness, alpha_eraser, aspect_ratio, angle, lock_alpha,
                 colorize):
        self.dabs.append((x, y, radius, opaque))
        return True

    def get_color(self, x, y, radius):
        return (1.0, 1.0, 1.0, 0.0)


brush = DabBrush(random.Random(1))
brush.set_base_value(BrushSetting.OPAQUE, 1.0)
brush.set_base_value(BrushSetting.OPAQUE_MULTIPLY, 1.0)
brush.set_base_value(BrushSetting.RADIUS_LOGARITHMIC, 1.5)
brush.set_base_value(BrushSetting.HARDNESS, 0.8)
brush.set_base_value(BrushSetting.DABS_PER_ACTUAL_RADIUS, 2.0)

surface = RecordingSurface()
pending = brush.count_dabs_to(3.0, 0.0, 0.8, 0.01)
brush.update_states_and_setting_values(1.0, 3.0, 0.0, 0.8, 0.0, 0.0, 0.01)
painted = brush.prepare_and_draw_dab(surface)
print(pending, painted, surface.dabs)
```

## Blend modes

The functions in `paintcore.brushmodes` change a flat mutable sequence of
integers in place. There are four integers per pixel (R, G, B, A), the colour
is premultiplied by alpha, and `ONE = 1 << 15` stands for full intensity.

The mask is run-length encoded:

- Each non-zero entry is the dab strength for one pixel.
- A zero is followed by a count of pixel components to skip, that is, four
  per pixel.
- A skip of zero ends the mask.

```python
from paintcore.brushmodes import ONE, draw_dab_pixels_normal, get_color_pixels_accumulate

rgba = [0] * 8
draw_dab_pixels_normal([ONE, ONE, 0, 0], rgba, ONE, 0, 0, ONE)
print(rgba)   # [32768, 0, 0, 32768, 32768, 0, 0, 32768]
print(get_color_pixels_accumulate([ONE, 0, 0], rgba))
```

`get_color_pixels_accumulate` returns `(weight, r, g, b, a)` as floats. Add
them to running totals to average colours across several tiles.

## Smaller utilities

- `Rectangle.expand_to_include_point` grows a rectangle to cover a pixel. A
  rectangle with a width of zero counts as empty.
- `Fifo` raises `IndexError` when you `pop` from an empty queue.
  `peek_first` and `peek_last` return `None` when it is empty.
- `PrintBuffer.memset(-1, ...)` fills from the end of the current data.

## What the package does not do

paintcore draws one dab at a time and leaves the calling loop to you. It
covers these parts of a painting program:

- stepping the brush simulation (`update_states_and_setting_values`);
- counting the dabs still to draw (`count_dabs_to`);
- drawing a single dab (`prepare_and_draw_dab`).

It leaves out these:

- **Whole strokes.** There is no routine that takes a stream of pointer
  events, interpolates between them, draws the dabs in between and decides
  where one stroke ends and the next begins.
- **Brush files.** Brush definitions are not read from or written to files or
  JSON. You configure a brush in code, through `BrushCore`'s setters.
- **Canvases.** There is no surface implementation and no tile storage. You
  provide the object that implements `Surface`.
- **Command line.** The package installs no command.