# cubscene

`cubscene` holds the building blocks for small grid-based raycasting
games. It decodes XPM pixmaps into 32-bit pixel images, resolves X11
colour names, models the state of a scene (window, player, ray, textures
and map), and prints that state as a plain-text report.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cubscene.colors`

`text_to_rgb(name, end=None)` returns the `0xRRGGBB` value of a colour
specification as it appears in an XPM colour table:

- `#rrggbb` is read as a hexadecimal number;
- otherwise `name` (joined with `end` by a space when `end` is given) is
  looked up case-insensitively among the X11 colour names;
- `none` gives `-1`, and an unknown name gives `0`.

```python
from cubscene.colors import text_to_rgb

text_to_rgb("#FF8000")       # 0xFF8000
text_to_rgb("Navy")          # 0x80
text_to_rgb("light", "grey") # 0xD3D3D3
```

### `cubscene.image`

`Image(width, height, endian)` is a zero-filled image of 32-bit pixels
stored row by row in little-endian (`LITTLE_ENDIAN`, the default) or
big-endian (`BIG_ENDIAN`) byte order. `new_image(width, height, endian)`
creates one and raises `ValueError` for a non-positive size.

- `put_pixel(x, y, color)` stores the low 32 bits of `color`;
- `get_pixel(x, y)` returns a pixel as an unsigned 32-bit value;
- `pixels()` returns every pixel, row by row from the top-left corner;
- `size_line` and `bytes_per_pixel` give the layout of `data`.

Coordinates outside the image raise `IndexError`.

`rgb_shifts(red_mask, green_mask, blue_mask)` turns a visual's colour
masks into six (offset, bits) values, and `good_color(color, depth,
shifts)` converts a `0xRRGGBB` colour into a pixel value for a visual of
that depth; at 24 bits and above the colour is returned unchanged.

### `cubscene.xpm`

- `read_xpm_file(path, endian)` reads an XPM file, blanking C comments
  outside strings and taking the contents of the quoted strings as lines.
- `xpm_from_data(lines, endian)` and `parse_xpm(lines, endian)` build an
  image from the lines of an XPM array: the header, the colour table and
  the pixel rows.
- Colours named `None` become the pixel value `0xFF000000`; pixel keys
  missing from the colour table become `0`.
- Unreadable files and malformed data raise `XpmError`, a subclass of
  `ValueError`.

The helpers `split_words(text)`, `strip_comments(text)` and
`quoted_lines(text)` are available on their own.

```python
from cubscene.xpm import xpm_from_data

image = xpm_from_data(["2 1 2 1", "a c #FF0000", "b c blue", "ab"])
image.get_pixel(0, 0)  # 0xFF0000
image.get_pixel(1, 0)  # 0xFF
```

### `cubscene.scene`

Dataclasses describing a loaded scene: `Player`, `Ray`, `TexInfo`,
`MapInfo` and `GameData`, which holds one of each together with the
window size (`WIN_WIDTH` 640 by `WIN_HEIGHT` 480), the map rows and the
decoded textures. `TexInfo.size` defaults to `TEX_SIZE` (64).

### `cubscene.report`

`format_data(data)` returns a text report of a `GameData`: window size,
map information and rows, player, ray and texture state. `format_map(grid)`
returns just the map rows, one per line.

```python
from cubscene.scene import GameData
from cubscene.report import format_data

data = GameData(map=["1111", "1N01", "1111"])
print(format_data(data))
```

## What it does not do

The package has no command-line tool, and it does not read, check or
parse `.cub` scene files: there is no validation of file names or
arguments, no parsing of texture (`NO`, `SO`, `WE`, `EA`) or colour
(`F`, `C`) lines, and no building of the map grid from a file. A
`GameData` has to be filled in by the caller. Nothing is drawn on screen
either; images exist only in memory.