import io

import pytest

from img2uniscr.colors import CDColor
from img2uniscr.screen import (
    DebugLog,
    N_COLORS,
    ScreenSettings,
    UnicodeScreen,
    pair_id,
)


def make_screen(height=4, width=3):
    return UnicodeScreen(ScreenSettings(height, width))


@pytest.mark.parametrize(
    "height,width", [(0, 4), (-2, 4), (3, 4), (4, 0), (4, -1)]
)
def test_settings_reject_bad_sizes(height, width):
    with pytest.raises(ValueError):
        ScreenSettings(height, width)


def test_pair_id_default_pair_is_zero():
    assert pair_id(-1, -1) == 0


def test_pair_ids_are_unique_and_increasing():
    ids = [pair_id(fg, bg) for fg in range(-1, N_COLORS) for bg in range(-1, N_COLORS)]
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_screen_dimensions():
    screen = make_screen(6, 5)
    assert screen.height == 6
    assert screen.width == 5
    assert screen.char_rows == 3
    assert screen.char_cols == 5


def test_set_and_get_pixel_round_trip():
    screen = make_screen()
    screen.set_pixel(3, 2, CDColor.CYAN)
    assert screen.get_pixel(3, 2) is CDColor.CYAN
    screen.set_pixel(0, 0, 1)
    assert screen.get_pixel(0, 0) is CDColor.RED


def test_new_screen_is_black():
    screen = make_screen()
    assert all(
        screen.get_pixel(y, x) is CDColor.BLACK
        for y in range(screen.height)
        for x in range(screen.width)
    )


@pytest.mark.parametrize("py,px", [(-1, 0), (4, 0), (0, 3), (0, -1)])
def test_pixel_out_of_range(py, px):
    screen = make_screen()
    with pytest.raises(IndexError):
        screen.get_pixel(py, px)
    with pytest.raises(IndexError):
        screen.set_pixel(py, px, CDColor.RED)


def test_set_pixel_rejects_unknown_color():
    screen = make_screen()
    with pytest.raises(ValueError):
        screen.set_pixel(0, 0, 8)


def test_cells_pair_top_and_bottom_pixels():
    screen = make_screen()
    screen.set_pixel(0, 0, CDColor.RED)
    screen.set_pixel(1, 0, CDColor.BLUE)
    screen.set_pixel(2, 2, CDColor.WHITE)
    cells = list(screen.cells())
    assert len(cells) == screen.char_rows * screen.char_cols
    assert cells[0] == (0, 0, pair_id(CDColor.RED, CDColor.BLUE))
    assert cells[-1] == (1, 2, pair_id(CDColor.WHITE, CDColor.BLACK))


def test_format_framebuffer():
    screen = make_screen(2, 2)
    screen.set_pixel(0, 1, CDColor.RED)
    screen.set_pixel(1, 0, CDColor.GREEN)
    screen.set_pixel(1, 1, CDColor.YELLOW)
    assert screen.format_framebuffer() == "- - \n0 1 \n2 3 \n"


def test_debug_calls_need_open_display():
    screen = make_screen()
    with pytest.raises(RuntimeError):
        screen.write_debug(0, "hello")
    with pytest.raises(RuntimeError):
        screen.refresh(0)
    with pytest.raises(RuntimeError):
        screen.wait_for_input()


def test_close_without_open_keeps_closed():
    screen = make_screen()
    screen.close()
    assert screen.is_open is False


def test_debug_log_records_and_dumps():
    log = DebugLog()
    log.log("first")
    log.log("second")
    out = io.StringIO()
    log.dump(out)
    assert out.getvalue() == "first\nsecond\n"


def test_debug_log_drops_lines_past_limit():
    log = DebugLog(max_lines=2)
    for message in ("a", "b", "c"):
        log.log(message)
    assert log.lines == ["a", "b"]
    assert log.overflowed is True


def test_debug_log_truncates_long_lines():
    log = DebugLog(max_length=5)
    log.log("abcdefgh")
    assert log.lines == ["abcd"]


def test_debug_log_color_pairs():
    log = DebugLog()
    log.log_color_pairs(64)
    assert log.lines[0] == "COLOR_PAIRS = 64"
    assert log.lines[1] == "id\tfg\tbg"
    assert len(log.lines) == 2 + (N_COLORS + 1) ** 2
    assert log.lines[2] == "000\t-01\t-01"