# glyphgrid

Building blocks for the front end of a grid-based text editor. The package holds
the logic of such a front end. It has no drawing code and no editor connection.

## Modules

- `glyphgrid.animation`: `lerp`, `ease`, `ease_point`, the easing curves
  (`ease_linear`, `ease_in_quad`, `ease_out_quad`, `ease_in_out_quad`,
  `ease_in_cubic`, `ease_out_cubic`, `ease_in_out_cubic`, `ease_in_expo`,
  `ease_out_expo`) and an immutable `Point` vector that offers `length()`,
  `normalized()`, `dot()`, `is_zero()` and arithmetic.
- `glyphgrid.from_value`: `parse_float`, `parse_u64`, `parse_u32`, `parse_i32`,
  `parse_str` and `parse_bool`. Each one takes an incoming setting value and the
  current value, and returns the new value. A value of the wrong kind is logged
  as an error and the current value is returned unchanged.
- `glyphgrid.settings`: `Settings` stores one settings object per type, with
  `set(value)` and `get(type)`, and both of these work on copies. It also keeps an
  update handler and a reader for each named property
  (`set_setting_handlers`). It applies change notifications
  (`handle_changed_notification`) and builds the editor commands that watch each
  variable (`listener_commands`). The coroutine `read_initial_values(nvim)`
  takes any object with async `get_var` and `set_var`. For each property it
  applies the editor variable `<prefix>_<name>` if that variable exists, and
  otherwise publishes the reader's value. The prefix defaults to `glyphgrid`.
  A shared instance is available as `SETTINGS`.
- `glyphgrid.font_options`: `FontOptions.parse` reads a `guifont` string: a
  comma-separated font list, then `hN` for the size in points, `b`, `i`,
  `#h-<hinting>` and `#e-<edging>`. The module also provides `FontHinting`,
  `FontEdging`, `parse_font_name` and `points_to_pixels`.
- `glyphgrid.window_geometry`: `parse_window_geometry("<width>x<height>")`, the
  `GridSize` and `Position` types, and the window states `MaximizedWindow` and
  `WindowedWindow`. It loads and saves the last window state as JSON with
  `load_last_window_settings`, `last_window_geometry` and
  `save_window_geometry`. The default file location is given by `settings_path()`.
- `glyphgrid.blink`: `BlinkStatus.update_status(cursor)` runs the
  waiting/on/off blink cycle from the cursor's `blinkwait`, `blinkon` and
  `blinkoff` values, in milliseconds. The clock can be injected, and so can a
  callback that is told when the next transition is due.
- `glyphgrid.cursor_settings`: `CursorSettings` with its defaults, and
  `VfxMode`. Use `parse_vfx_mode` and `vfx_mode_to_value` to convert a mode from
  and to its setting value.
- `glyphgrid.cursor_vfx`: cursor effects. `PointHighlight` covers sonicboom,
  ripple and wireframe. `ParticleTrail` covers railgun, torpedo and pixiedust.
  Use `new_cursor_vfx(mode)` to create the effect for a mode. `rotate_vec`
  rotates a vector. `PcgRng` is a deterministic PCG random generator.
- `glyphgrid.cursor`: `CursorAnimation` moves the four `Corner`s of the cursor
  towards its cell. Each `CursorShape` (block, vertical bar, horizontal bar)
  gives the corners a different layout.
- `glyphgrid.running_tracker`: `RunningTracker` records whether the program is
  still running and the exit code it should finish with. A shared instance is
  available as `RUNNING_TRACKER`.

## Installation

```
pip install glyphgrid
```

Only the standard library is needed, on Python 3.10 or later.

## Examples

```python
from glyphgrid.animation import Point, ease, ease_out_expo, ease_point
from glyphgrid.font_options import FontHinting, FontOptions
from glyphgrid.window_geometry import parse_window_geometry

ease(ease_out_expo, 0.0, 10.0, 1.0)              # 10.0
ease_point(ease_out_expo, Point(0, 0), Point(1, 1), 1.0)

options = FontOptions.parse("Fira_Code_Mono:h15:b:#h-slight")
options.primary_font()                           # "Fira Code Mono"
options.bold                                     # True
options.hinting is FontHinting.SLIGHT            # True

parse_window_geometry("120x40")                  # GridSize(width=120, height=40)
parse_window_geometry("0x40")                    # raises ValueError
```

Settings and setting values:

```python
from glyphgrid.cursor_settings import CursorSettings, VfxMode, parse_vfx_mode
from glyphgrid.from_value import parse_bool, parse_u64
from glyphgrid.settings import Settings

settings = Settings()
settings.set(CursorSettings())
settings.get(CursorSettings).animation_length    # 0.06

parse_bool(1, False)                             # True
parse_u64(-1, 5)                                 # 5 (wrong kind, value kept)
parse_vfx_mode("railgun", VfxMode.DISABLED)      # VfxMode.RAILGUN
```

Saving and restoring the window state:

```python
from glyphgrid.window_geometry import GridSize, Position, last_window_geometry, save_window_geometry

save_window_geometry("state.json", False, GridSize(120, 40), Position(10, 20), True, True)
last_window_geometry("state.json")               # GridSize(width=120, height=40)
```

Cursor corners:

```python
from glyphgrid.animation import Point
from glyphgrid.cursor import CursorAnimation
from glyphgrid.cursor_settings import CursorSettings

animation = CursorAnimation()
animation.update(CursorSettings(), Point(80, 40), Point(10, 20), 0.016, True)
animation.positions   # corners at (80, 40), (90, 40), (90, 60), (80, 60)
```

Tracking the run state:

```python
from glyphgrid.running_tracker import RunningTracker

tracker = RunningTracker()
tracker.quit_with_code(2, "lost connection")
tracker.is_running, tracker.exit_code            # (False, 2)
```

## What the package does not do

The package has no window, no renderer, no font loading or text shaping, and no
connection to a running editor. It computes cursor corner positions, effect
particles, blink state and font options, but it does not draw any of them. The
settings registry works with any object that supplies `get_var` and `set_var`,
and it does not create such a connection itself. The package installs no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```