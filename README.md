# pcbpaths

Building blocks for turning printed-circuit-board artwork into CNC toolpaths.
The package is pure Python and has no runtime dependencies.

## What is inside

- `pcbpaths.units` parses lengths, times, revolutions, velocities, spindle speeds
  and percentages that are written with units, such as `"25.4mm"`, `"10 min"`,
  `"600 cycles / minute"` and `"50%"`. A bare number has no units, and its
  conversions use a factor that the caller supplies. The module also parses
  comma-separated lists (`CommaSeparated`) and the option values `BoardSide`,
  `Software` and `MillFeedDirection`. A bad value raises `InvalidOptionValue`.
  Comparing a quantity that has units with one that has none raises
  `ComparisonError`.
- `pcbpaths.available_drills` describes the drill bits on hand. Each bit can carry
  a tolerance, as in `"1mm:0.1mm"` or `"1mm:+0.1mm:-0.2mm"`.
  `AvailableDrill.difference` returns how far, in inches, a wanted diameter is
  from the drill. It returns `None` when the diameter is outside the tolerance.
- `pcbpaths.iterutil` provides `flatten` for nested lists. Its `UniqueCodes`
  class hands out increasing integer codes.
- `pcbpaths.mill` holds settings records for the tools: `Mill`, `RoutingMill`,
  `Isolator`, `Cutter` and `Driller`.
- `pcbpaths.tile` writes the G-code header and footer that repeat one board in a
  grid, for LinuxCNC, Mach3, Mach4 or a custom controller. `generate_tile_info`
  builds the settings from `"tile-x"`, `"tile-y"` and `"software"` options.
- `pcbpaths.trim_paths` removes backtracked segments from the ends of toolpaths.
  For closed loops it can also remove them from the middle.
- `pcbpaths.parabola` splits a parabolic arc into straight segments. The arc is
  the set of points equidistant from a point and a segment. No segment strays
  from the arc by more than a given distance.

## Installing

```
pip install .
```

To also install the tools for running the test suite:

```
pip install .[test]
```

## Examples

```python
from pcbpaths.units import Length, Rpm

Length.parse("1inch").as_inch(1)           # 1.0
Length.parse("4").as_inch(2)               # 8.0, no units so the factor applies
Rpm.parse("2rotations/s").as_rpm(1)        # 120.0
```

```python
from pcbpaths.available_drills import parse_available_drills, format_available_drills

drills = parse_available_drills("1inch:0.1inches")
format_available_drills(drills)            # "0.0254 m:-0.00254 m:+0.00254 m"
```

```python
from pcbpaths.trim_paths import trim_paths

paths = [([(1, 2), (3, 4), (5, 6), (7, 8)], True)]
backtracks = [([(1, 2), (3, 4)], True)]
trim_paths(paths, backtracks)
# [([(3, 4), (5, 6), (7, 8)], True)]
```

```python
import io
from pcbpaths.tile import Tiling, generate_tile_info
from pcbpaths.units import Software

info = generate_tile_info({"tile-x": 2, "tile-y": 1, "software": Software.LINUXCNC}, 10.0, 20.0)
tiling = Tiling(info, cfactor=1.0, tile_var=1000, gcode_end="M30\n")
out = io.StringIO()
tiling.header(out)
# ... write the board's G-code here ...
tiling.footer(out)
```

## What it does not do

The package provides building blocks and no command-line program. It does not
read Gerber or Excellon files, and it does not compute isolation outlines. It
has no step that orders paths to shorten rapid moves, and it does not render
previews. It writes no complete G-code programs, only the tiling wrapper
described above.