"""Command line: show an image file in the terminal."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .colors import closest_color
from .image import ImageError, RGB24Image, open_image
from .screen import ScreenSettings, UnicodeScreen

PROG = "img2uniscr"
USAGE = "<path/to/image>"


def push_image_to_display(image: RGB24Image, display: UnicodeScreen) -> None:
    """Fill the display with the nearest terminal colour of each image pixel."""
    for y in range(display.height):
        for x in range(display.width):
            display.set_pixel(y, x, closest_color(image.pixel(y, x)))


def main(argv: Sequence[str] | None = None) -> int:
    """Show the image named on the command line until a key is pressed."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Incorrect usage. Try: {PROG} {USAGE}", file=sys.stderr)
        return 1
    image_path = args[0]

    try:
        image = open_image(image_path)
    except ImageError:
        print(f"Failed to open file <{image_path}>.", file=sys.stderr)
        return 1

    try:
        settings = ScreenSettings(image.height, image.width)
    except ValueError as exc:
        print(f"Error creating display: {exc}. Exiting.", file=sys.stderr)
        return 1

    display = UnicodeScreen(settings)
    try:
        with display:
            push_image_to_display(image, display)
            display.refresh(0)
            display.wait_for_input()
    except RuntimeError as exc:
        print(f"ERROR: {exc} Terminating.", file=sys.stderr)
        return 1

    display.debug_log.dump(sys.stdout)
    print("Destroyed cursed display.")
    return 0


if __name__ == "__main__":
    sys.exit(main())