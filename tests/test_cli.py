import pytest
from PIL import Image

from img2uniscr.cli import main, push_image_to_display
from img2uniscr.colors import CDCOLOR_RGB, CDColor
from img2uniscr.image import RGB24Image, calc_aspect_ratio
from img2uniscr.screen import ScreenSettings, UnicodeScreen


def make_image(colors, height, width):
    pixels = tuple(CDCOLOR_RGB[c] for c in colors)
    return RGB24Image(pixels, height, width, calc_aspect_ratio(width, height))


def test_push_image_maps_exact_palette_colors():
    colors = [CDColor.RED, CDColor.GREEN, CDColor.BLUE, CDColor.CYAN, CDColor.YELLOW, CDColor.PURPLE]
    image = make_image(colors, 2, 3)
    screen = UnicodeScreen(ScreenSettings(2, 3))
    push_image_to_display(image, screen)
    got = [screen.get_pixel(y, x) for y in range(2) for x in range(3)]
    assert got == colors


def test_push_image_too_small_for_display():
    image = make_image([CDColor.RED] * 4, 2, 2)
    screen = UnicodeScreen(ScreenSettings(4, 2))
    with pytest.raises(IndexError):
        push_image_to_display(image, screen)


@pytest.mark.parametrize("argv", [[], ["a.png", "b.png"]])
def test_main_usage_error(argv, capsys):
    assert main(argv) == 1
    assert "Incorrect usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "missing.png"
    assert main([str(path)]) == 1
    assert f"Failed to open file <{path}>." in capsys.readouterr().err


def test_main_image_scaled_to_nothing(tmp_path, capsys):
    path = tmp_path / "dot.png"
    Image.new("RGB", (1, 1), (255, 0, 0)).save(path)
    assert main([str(path)]) == 1
    assert "Failed to open file" in capsys.readouterr().err