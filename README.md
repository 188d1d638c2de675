# img2uniscr

Show an image in your terminal. Every character cell holds the Unicode
upper half block (`▀`). The cell's foreground colour is the upper pixel and
its background colour is the lower pixel, so each cell shows two pixels.

Each pixel is mapped to the closest of the eight basic terminal colours.
These are black, red, green, yellow, blue, purple, cyan and white. "Closest"
means the smallest sum of the red, green and blue differences. A pixel whose
difference from every palette colour is 255 or more is drawn black.

## Installation

```
pip install .
```

Drawing uses the standard `curses` module, so it needs a POSIX terminal that
supports colours. If the terminal has no colour support, the viewer stops
with an error.

## Usage

```
img2uniscr path/to/image.png
```

Any format Pillow can read works. An image wider or taller than 96 pixels,
or with an odd width or height, is shrunk by 10% on both sides at a time
until it fits and both sides are even. Bicubic resampling is used.

The picture stays on screen until you press a key. The command then prints
`Destroyed cursed display.` and exits with status 0.

It exits with status 1 in these cases:

- it is not given exactly one argument;
- the file cannot be opened or decoded;
- the image cannot be scaled to a usable size;
- the terminal has no colours.

## Library use

The building blocks can be used on their own.

### `img2uniscr.colors`

- `CDColor` is an `IntEnum` of the eight colours, numbered 0–7 in curses
  order.
- `RGB24` is a frozen dataclass. Its channels must lie in 0..255.
  `hex()` gives six lower-case hex digits, and `str()` gives `[r,g,b]`.
- `closest_color(pixel)` returns the nearest `CDColor`.
- `color_name(value)` returns the colour's name, or `[INVALID_CDCOLOR]` for
  a number out of range.

### `img2uniscr.image`

- `open_image(path)` loads an image and scales it as described above. It
  returns an `RGB24Image`. Unreadable files raise `ImageError`.
- `read_ppm(stream)` reads binary PPM (P6) data from a byte stream. For
  16-bit samples it keeps the most significant byte. A bad header or
  truncated data raises `ImageError`.
- `scaled_size(width, height, max_width, max_height)` gives the size that
  `open_image` scales to.
- `calc_gcd(a, b)` and `calc_aspect_ratio(width, height)` compute the
  greatest common divisor and an `AspectRatio` in lowest terms.
- `RGB24Image` holds a flat row-major tuple of pixels. `pixel(y, x)` returns
  one pixel.

### `img2uniscr.screen`

`UnicodeScreen` is a frame buffer of palette colours that draws itself with
curses. Use it as a context manager:

```python
from img2uniscr.colors import CDColor
from img2uniscr.screen import ScreenSettings, UnicodeScreen

with UnicodeScreen(ScreenSettings(px_height=4, px_width=8)) as screen:
    screen.set_pixel(0, 0, CDColor.RED)
    screen.refresh(0)
    screen.wait_for_input()
```

`ScreenSettings` raises `ValueError` unless the pixel height is a positive
even number and the width is positive. Other parts of the screen API:

- `get_pixel` and `set_pixel` raise `IndexError` outside the buffer.
- `cells()` yields `(row, column, colour pair)` for each character cell.
- `format_framebuffer()` renders the buffer as text.
- `write_debug(line, message)` writes to a three-line debug area below the
  picture.
- `refresh(min_refresh_time)` waits until at least that many seconds have
  passed since the previous draw.
- `pair_id(fg, bg)` gives the curses colour-pair number used for a cell.
- `DebugLog` keeps a bounded list of debug lines. The command prints these
  lines after the screen is closed.

`open_image`, `read_ppm`, `scaled_size`, `calc_aspect_ratio`, `closest_color`
and `push_image_to_display` (in `img2uniscr.cli`) do not need a terminal.

## What it does not do

- The display size does not follow the terminal. Images are always limited
  to 96×96 pixels, whatever the window size.
- There is no animation, no scrolling and no zooming.
- Only the eight basic colours are used. There is no 256-colour or
  true-colour output.

## Running the tests

```
pip install .[test]
pytest
```