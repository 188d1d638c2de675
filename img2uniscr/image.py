"""Loading images into a small row-major RGB pixel grid."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from .colors import RGB24

log = logging.getLogger(__name__)

MAX_IMAGE_WIDTH = 96
MAX_IMAGE_HEIGHT = 96
_SCALE_FACTOR = 0.9


class ImageError(Exception):
    """Raised when an image cannot be read or decoded."""


@dataclass(frozen=True)
class AspectRatio:
    """A width-to-height ratio in lowest terms."""

    x: int
    y: int


@dataclass(frozen=True)
class RGB24Image:
    """An image as a flat row-major tuple of pixels."""

    pixels: tuple[RGB24, ...]
    height: int
    width: int
    aspect_ratio: AspectRatio

    def __post_init__(self) -> None:
        if len(self.pixels) != self.height * self.width:
            raise ValueError(
                f"{len(self.pixels)} pixels do not fill {self.width}x{self.height}"
            )

    def pixel(self, y: int, x: int) -> RGB24:
        """Return the pixel at row y, column x."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"pixel ({y}, {x}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def calc_gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def calc_aspect_ratio(width: int, height: int) -> AspectRatio:
    """Reduce width:height to lowest terms."""
    gcd = calc_gcd(width, height)
    return AspectRatio(width // gcd, height // gcd)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_SCALE32 = _to_float32(_SCALE_FACTOR)


def _shrink(value: int) -> int:
    return int(_to_float32(_to_float32(float(value)) * _SCALE32))


def scaled_size(
    width: int, height: int, max_width: int, max_height: int
) -> tuple[int, int]:
    """Shrink both sides by 10% steps until within bounds and both even."""
    while width > max_width or height > max_height or width % 2 or height % 2:
        log.debug("scaling down from: %d %d", width, height)
        width = _shrink(width)
        height = _shrink(height)
        log.debug("to: %d %d", width, height)
    return width, height


def open_image(path: str | PathLike[str]) -> RGB24Image:
    """Load an image file, shrinking it to fit the display limits."""
    try:
        with Image.open(path) as source:
            channels = len(source.getbands())
            rgb = source.convert("RGB")
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        raise ImageError(f"cannot open image {path}: {exc}") from exc

    in_width, in_height = rgb.size
    log.info(
        "%s loaded, w=%dpx, h=%dpx, num_channels=%d", path, in_width, in_height, channels
    )
    aspect = calc_aspect_ratio(in_width, in_height)

    new_width, new_height = scaled_size(
        in_width, in_height, MAX_IMAGE_WIDTH, MAX_IMAGE_HEIGHT
    )
    if new_width <= 0 or new_height <= 0:
        raise ImageError(f"image {path} cannot be scaled to a usable size")
    log.info("%s resizing to, w=%dpx, h=%dpx", path, new_width, new_height)

    if (new_width, new_height) != (in_width, in_height):
        rgb = rgb.resize((new_width, new_height), Image.Resampling.BICUBIC)

    pixels = tuple(RGB24(r, g, b) for r, g, b in rgb.getdata())
    return RGB24Image(pixels, new_height, new_width, aspect)


def _read_token(stream: BinaryIO) -> bytes:
    byte = stream.read(1)
    while byte and byte.isspace():
        byte = stream.read(1)
    token = bytearray()
    while byte and not byte.isspace():
        token += byte
        byte = stream.read(1)
    if not token:
        raise ImageError("PPM header is truncated")
    return bytes(token)


def _read_int(stream: BinaryIO) -> int:
    token = _read_token(stream)
    try:
        return int(token)
    except ValueError as exc:
        raise ImageError(f"bad number in PPM header: {token!r}") from exc


def read_ppm(stream: BinaryIO) -> RGB24Image:
    """Read a binary (P6) PPM image from a byte stream.

    Samples wider than a byte keep their most significant byte.
    """
    if stream.read(2) != b"P6":
        raise ImageError("file header is corrupted or image is not PPM format")
    width = _read_int(stream)
    height = _read_int(stream)
    max_value = _read_int(stream)
    if width <= 0 or height <= 0 or max_value <= 0:
        raise ImageError("PPM header holds a non-positive value")

    sample_size = 1 if max_value < 256 else 2
    pixel_size = 3 * sample_size
    data = stream.read(width * height * pixel_size)
    if len(data) < width * height * pixel_size:
        raise ImageError("PPM pixel data is truncated")

    pixels = tuple(
        RGB24(data[i], data[i + sample_size], data[i + 2 * sample_size])
        for i in range(0, len(data), pixel_size)
    )
    return RGB24Image(pixels, height, width, calc_aspect_ratio(width, height))