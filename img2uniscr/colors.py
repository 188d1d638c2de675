"""The eight terminal colours and nearest-colour matching."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

RGB24_MAX = 255


class CDColor(IntEnum):
    """The basic terminal colours, numbered as curses numbers them."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True)
class RGB24:
    """A 24-bit colour with one byte per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= RGB24_MAX:
                raise ValueError(f"channel value {channel} outside 0..{RGB24_MAX}")

    def hex(self) -> str:
        """Return the colour as six lower-case hex digits."""
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return f"[{self.r},{self.g},{self.b}]"


CDCOLOR_RGB: dict[CDColor, RGB24] = {
    CDColor.BLACK: RGB24(0, 0, 0),
    CDColor.RED: RGB24(153, 0, 0),
    CDColor.GREEN: RGB24(0, 166, 0),
    CDColor.YELLOW: RGB24(153, 153, 0),
    CDColor.BLUE: RGB24(0, 0, 178),
    CDColor.PURPLE: RGB24(178, 0, 178),
    CDColor.CYAN: RGB24(0, 166, 178),
    CDColor.WHITE: RGB24(191, 191, 191),
}

INVALID_COLOR_NAME = "[INVALID_CDCOLOR]"


def closest_color(pixel: RGB24) -> CDColor:
    """Return the terminal colour with the smallest summed channel difference.

    Only differences below the channel maximum count; a pixel that is no
    closer than that to any colour maps to black.
    """
    best = CDColor.BLACK
    best_diff = RGB24_MAX
    for color, rgb in CDCOLOR_RGB.items():
        diff = abs(pixel.r - rgb.r) + abs(pixel.g - rgb.g) + abs(pixel.b - rgb.b)
        if diff < best_diff:
            best_diff = diff
            best = color
    return best


def color_name(value: int) -> str:
    """Return the name of a colour number, or a marker if it is out of range."""
    try:
        return CDColor(value).name
    except ValueError:
        return INVALID_COLOR_NAME