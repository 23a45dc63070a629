# fdfview

Reading, checking and holding the view state of `.fdf` height maps: a grid
of altitudes, each point optionally carrying its own colour. Alongside the
map code the package has small helpers for characters, strings, byte
buffers, a linked list, a printf-style formatter and a buffered line reader.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Map format

Each line is a row of space-separated integers, the altitude of each point.
A point may carry a colour as a hexadecimal suffix:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

Only digits, spaces, `-` and `,` followed by a colour are accepted on a
line, and a sign must follow a space. Every row must hold the same number of
values. Points without a colour are white (`0xFFFFFF`). Altitudes must fit in
a 32-bit signed integer.

## Loading a map

```python
from fdfview.parsing import load_map, MapError

try:
    view = load_map("maps/42.fdf")
except MapError as err:
    print(err)          # e.g. "Wrong amount of numbers"
else:
    print(view.x_nbrs, view.y_nbrs, view.tile_size)
    print(view.coord[1][2].z, hex(view.coord[1][2].color))
```

`load_map` returns a `fdfview.model.MapView`. Every problem is raised as
`MapError` with one of these messages: `Map's empty 😔`,
`Hexadecimal color not correctly defined`, `Number is not correctly defined`,
`Wrong amount of numbers`, or the text of an out-of-range number or bad hex
digit.

The steps are also available on their own in `fdfview.parsing`:
`count_numbers(line)`, `check_spaces(line)`, `check_hex_color(text)`,
`measure(lines)` (returns numbers per row and row count) and
`read_points(lines, x_nbrs, y_nbrs)` (returns the grid of `Point`s).
`fdfview.model.init_view(grid)` places a grid in the central half of a
1000×1000 area, centring a grid that is not square.

## View state

`MapView` keeps the placement of the map and reacts to key and button codes
(`fdfview.model.Key`, `fdfview.model.MouseButton`):

| Method                      | Effect                                           |
|-----------------------------|--------------------------------------------------|
| `move(keysym)`              | Arrow keys / W A S D shift the map by 10; in the isometric projection along its diagonals |
| `change_height(keysym)`     | `PLUS` / `MINUS` change the height multiplier by 1.5, truncated to an integer |
| `zoom_step(button)`         | Wheel up / down change `zoom` by one             |
| `change_projection(keysym)` | `I` isometric (the default), `P` parallel        |
| `color_map(keysym)`         | `R`, `G`, `B` paint every point red, green or blue |

`move_iso`, `move_parallel` and `change_color(color)` are there to be called
directly as well.

## Helpers

- `fdfview.chars`: ASCII classification, `atoi` (raises `IntRangeError`
  outside 32 bits), `atoi_base` for hex (raises `HexValueError`), `itoa`.
- `fdfview.strings`: `strchr`, `strrchr`, `strnstr`, `substr`, `split`,
  `get_string`, `strncmp`, `strlcpy`, `strlcat`, `strmapi`, `striteri` and
  others with C-like results.
- `fdfview.memory`: `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`,
  `bzero`, `calloc` over byte sequences.
- `fdfview.linkedlist`: `LinkedList` and `Node`.
- `fdfview.printf`: `render_format` and `printf` for `%c %s %p %d %i %u %x %X %%`.
- `fdfview.linereader`: `LineReader`, which yields lines from a text or
  binary stream read in fixed-size chunks.
- `fdfview.output`: `put_char_fd`, `put_str_fd`, `put_endl_fd`, `put_nbr_fd`.

## What it does not do

The package does not draw anything and opens no window: there is no
rendering of the wireframe, no projection of points to the screen and no
command to run. It stops at a loaded, checked map and the state a viewer
would draw from.