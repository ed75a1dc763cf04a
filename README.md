# falsrue

Small pure-Python helpers for a game: a reader for `[section]` /
`key = value` configuration files, a generator of typewriter-style dialog
frames, and nearest-neighbour scaling of flat pixel buffers. The package
has no third-party dependencies.

## Installing

```
pip install .
```

## Modules

### `falsrue.config`

`Config` holds settings grouped by section.

- `Config.read(filename)` loads a file, replacing all current settings.
  It raises `OSError` when the file cannot be opened.
- `Config.read_string(section, item, default)` returns the raw value, or
  `default` when the section or item is missing.
- `Config.read_int(section, item, default)` returns the leading integer of
  the value (`0` if it has none), or `default` when missing.
- `Config.read_float(section, item, default)` returns the leading number of
  the value (`0.0` if it has none), or `default` when missing.

Lines starting with `#` are ignored, and text after a `#` is cut from a
value. Keys and values are trimmed of spaces and tabs. A key line only
counts once its section has been opened by a `[section]` header; keys
before any header are not kept.

`parse_line(line)` parses a single line and returns a `ParsedLine` (with
either `section` set, or `key` and `value`), or `None` for a line that
carries nothing.

```python
from falsrue.config import Config

config = Config()
config.read("game.ini")
started = config.read_int("GameInit", "HaveStarted", 0)
```

### `falsrue.dialog`

`DIALOGS` is a tuple of the game's dialog texts.

`dialog_frames(text)` yields a `DialogFrame` for every character shown: its
`text` is what is on screen so far. A newline clears the line; the frame
for the character after it has `after_pause` set, marking where a key
press is awaited.

```python
from falsrue.dialog import dialog_frames

[(f.text, f.after_pause) for f in dialog_frames("ab\ncd")]
# [('a', False), ('ab', False), ('c', True), ('cd', False)]
```

`read_line(filename, line)` returns line number `line` (counted from one)
without its newline, or `""` when the file is shorter. It raises
`ValueError` for a line number below one and `OSError` when the file
cannot be opened.

### `falsrue.image`

`nearest_neighbor_scale(pixels, src_width, src_height, width, height)`
scales a flat, row-major pixel sequence to the new size and returns a
list. It raises `ValueError` for non-positive dimensions or when the pixel
count does not match the source size.

```python
from falsrue.image import nearest_neighbor_scale

nearest_neighbor_scale([1, 2, 3, 4], 2, 2, 4, 4)
# [1, 1, 2, 2, 1, 1, 2, 2, 3, 3, 4, 4, 3, 3, 4, 4]
```

## What this package does not do

It has no renderer and no window: there is no vector or mesh code, no
drawing of the spinning sphere, and no command to run. The helpers above
work on plain files, strings and lists only.

## Running the tests

```
pip install .[test]
pytest
```