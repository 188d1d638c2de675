"""A pixel display drawn in the terminal with half-block characters.

Each character cell shows two vertically stacked pixels: the upper one as
the foreground of an upper-half block, the lower one as the background.
"""

from __future__ import annotations

import curses
import locale
import time
from dataclasses import dataclass
from typing import Iterator, TextIO

from .colors import CDColor

DEBUG_WIN_ROWS = 3
DEBUG_MESSAGE_MAX = 127
DEBUG_MAX_LINES = 256
DEBUG_MAX_LENGTH = 256
DEBUG_LINE_ERROR = "DEBUGLINE_ERR"
TOP_HALF_BLOCK = "\u2580"
N_COLORS = len(CDColor)


def pair_id(fg: int, bg: int) -> int:
    """Return the curses colour-pair number for a foreground/background pair.

    Either colour may be -1, the terminal's default colour.
    """
    return (fg + 1) * (N_COLORS + 1) + (bg + 1)


@dataclass(frozen=True)
class ScreenSettings:
    """Display size in pixels; the height must be positive and even."""

    px_height: int
    px_width: int

    def __post_init__(self) -> None:
        if self.px_height <= 0 or self.px_height % 2 != 0 or self.px_width <= 0:
            raise ValueError(
                f"bad display settings: height={self.px_height}, width={self.px_width}"
            )


class DebugLog:
    """A bounded list of debug lines, printed after the display is closed."""

    def __init__(
        self, max_lines: int = DEBUG_MAX_LINES, max_length: int = DEBUG_MAX_LENGTH
    ) -> None:
        self.max_lines = max_lines
        self.max_length = max_length
        self.lines: list[str] = []
        self.overflowed = False

    def log(self, message: str) -> None:
        """Record a line; lines past the limit are dropped."""
        if len(self.lines) >= self.max_lines:
            self.overflowed = True
            return
        self.lines.append(message[: self.max_length - 1])

    def log_color_pairs(self, color_pairs: int) -> None:
        """Record the colour-pair table the display sets up."""
        self.log(f"COLOR_PAIRS = {color_pairs}")
        self.log("id\tfg\tbg")
        for fg in range(-1, N_COLORS):
            for bg in range(-1, N_COLORS):
                self.log(f"{pair_id(fg, bg):03d}\t{fg:03d}\t{bg:03d}")

    def dump(self, stream: TextIO) -> None:
        """Write every recorded line to a text stream."""
        for line in self.lines:
            stream.write(line + "\n")


class UnicodeScreen:
    """A frame buffer of terminal colours shown through curses."""

    def __init__(self, settings: ScreenSettings) -> None:
        self.settings = settings
        self.char_rows = settings.px_height // 2
        self.char_cols = settings.px_width
        self._framebuffer = [
            [CDColor.BLACK] * settings.px_width for _ in range(settings.px_height)
        ]
        self._display_window = None
        self._debug_window = None
        self._last_refresh: float | None = None
        self.debug_log = DebugLog()

    @property
    def height(self) -> int:
        return self.settings.px_height

    @property
    def width(self) -> int:
        return self.settings.px_width

    @property
    def is_open(self) -> bool:
        return self._display_window is not None

    def _check_bounds(self, py: int, px: int) -> None:
        if not (0 <= py < self.height and 0 <= px < self.width):
            raise IndexError(f"pixel ({py}, {px}) outside {self.width}x{self.height}")

    def _require_open(self) -> None:
        if not self.is_open:
            raise RuntimeError("display is not open")

    def get_pixel(self, py: int, px: int) -> CDColor:
        """Return the colour of the pixel at row py, column px."""
        self._check_bounds(py, px)
        return self._framebuffer[py][px]

    def set_pixel(self, py: int, px: int, color: int) -> None:
        """Set the colour of the pixel at row py, column px."""
        self._check_bounds(py, px)
        self._framebuffer[py][px] = CDColor(color)

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (row, column, colour pair) for every character cell."""
        for row in range(self.char_rows):
            top = self._framebuffer[2 * row]
            bottom = self._framebuffer[2 * row + 1]
            for col, (upper, lower) in enumerate(zip(top, bottom)):
                yield row, col, pair_id(upper, lower)

    def format_framebuffer(self) -> str:
        """Return the frame buffer as rows of colour numbers under a ruler."""
        lines = ["- " * self.width]
        lines.extend(
            "".join(f"{int(color)} " for color in row) for row in self._framebuffer
        )
        return "\n".join(lines) + "\n"

    def _init_color_pairs(self) -> None:
        for fg in range(-1, N_COLORS):
            for bg in range(-1, N_COLORS):
                pid = pair_id(fg, bg)
                if pid == 0 or pid >= curses.COLOR_PAIRS:
                    continue
                try:
                    curses.init_pair(pid, fg, bg)
                except curses.error:
                    pass

    def open(self) -> None:
        """Enter curses mode and create the display and debug windows."""
        if self.is_open:
            return
        locale.setlocale(locale.LC_ALL, "")
        curses.initscr()
        try:
            curses.noecho()
            if not curses.has_colors():
                raise RuntimeError("Your terminal does not support colors.")
            curses.start_color()
            curses.use_default_colors()
            self._init_color_pairs()
            display = curses.newwin(self.char_rows, self.char_cols, 0, 0)
            debug = curses.newwin(DEBUG_WIN_ROWS, self.char_cols, self.char_rows, 0)
        except BaseException:
            curses.endwin()
            raise
        self._display_window = display
        self._debug_window = debug

    def close(self) -> None:
        """Leave curses mode and drop the windows."""
        if not self.is_open:
            return
        curses.endwin()
        self._display_window = None
        self._debug_window = None

    def refresh(self, min_refresh_time: float) -> None:
        """Draw the frame buffer, no sooner than min_refresh_time after the last draw."""
        self._require_open()
        if self._last_refresh is not None and min_refresh_time > 0:
            remaining = min_refresh_time - (time.monotonic() - self._last_refresh)
            if remaining > 0:
                time.sleep(remaining)
        for row, col, pid in self.cells():
            try:
                self._display_window.addstr(
                    row, col, TOP_HALF_BLOCK, curses.color_pair(pid)
                )
            except curses.error:
                # Writing the bottom-right cell moves the cursor off the window.
                pass
        self._display_window.refresh()
        self._debug_window.refresh()
        self._last_refresh = time.monotonic()

    def wait_for_input(self) -> int:
        """Block until a key is pressed and return it."""
        self._require_open()
        return self._display_window.getch()

    def write_debug(self, line: int, message: str) -> None:
        """Write a message on one line of the debug window."""
        self._require_open()
        try:
            if line >= DEBUG_WIN_ROWS:
                self._debug_window.addstr(0, 0, DEBUG_LINE_ERROR)
            else:
                self._debug_window.addstr(line, 0, message[:DEBUG_MESSAGE_MAX])
        except curses.error:
            pass

    def __enter__(self) -> UnicodeScreen:
        self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()