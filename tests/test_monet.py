from unittest import mock

import pytest
from PIL import Image

from qtwtheme.color import Color
from qtwtheme.errors import ErrorCode, QtwError
from qtwtheme.monet import Monet, extract_dominant_vibrant_color, generate_palette_from_seed

VIBRANT = (200, 30, 30)


def _image_with(pixels, mode="RGB"):
    image = Image.new(mode, (len(pixels), 1))
    image.putdata(pixels)
    return image


def test_extract_picks_vibrant_pixel():
    image = _image_with([(120, 120, 120), VIBRANT, (10, 10, 10)])
    assert extract_dominant_vibrant_color(image) == Color(*VIBRANT)


def test_extract_excludes_overbright_pixels():
    image = _image_with([(255, 0, 0), VIBRANT])
    assert extract_dominant_vibrant_color(image) == Color(*VIBRANT)


def test_extract_first_wins_on_tie():
    image = _image_with([VIBRANT, VIBRANT])
    assert extract_dominant_vibrant_color(image) == Color(*VIBRANT)


def test_extract_skips_transparent_pixels():
    image = _image_with([(30, 200, 30, 100), (30, 30, 200, 255)], mode="RGBA")
    assert extract_dominant_vibrant_color(image) == Color(30, 30, 200)


def test_extract_no_vibrant_pixel():
    image = _image_with([(100, 100, 100), (20, 20, 20)])
    with pytest.raises(QtwError) as info:
        extract_dominant_vibrant_color(image)
    assert info.value.code is ErrorCode.MONET_EXTRACT_DOMINANT_VIBRANT_COLOR_NOTFOUND


@pytest.mark.parametrize("image", [None, Image.new("RGB", (0, 0))])
def test_extract_null_image(image):
    with pytest.raises(QtwError) as info:
        extract_dominant_vibrant_color(image)
    assert info.value.code is ErrorCode.MONET_GET_WALLPAPER_NULLIMAGE


def test_palette_shape_and_order():
    palette = generate_palette_from_seed(Color(*VIBRANT))
    assert len(palette) == 5
    for light, dark in palette:
        assert light.hsl()[2] > dark.hsl()[2]


def test_palette_hues():
    seed = Color(*VIBRANT)
    seed_hue = seed.hsl()[0]
    palette = generate_palette_from_seed(seed)
    assert palette[0][0].hsl()[0] == pytest.approx(seed_hue, abs=0.01)
    assert palette[3][0].hsl()[0] == pytest.approx((seed_hue + 0.5) % 1.0, abs=0.01)


def test_palette_primary_lightness_bounds():
    light, dark = generate_palette_from_seed(Color(*VIBRANT))[0]
    assert 0.55 - 0.01 <= light.hsl()[2] <= 0.75 + 0.01
    assert 0.1 - 0.01 <= dark.hsl()[2] <= 0.25 + 0.01


def test_palette_from_grey_seed():
    palette = generate_palette_from_seed(Color(128, 128, 128))
    assert len(palette) == 5
    assert palette[0][0].hsl()[1] >= 0.49


def test_palette_invalid_seed():
    with pytest.raises(QtwError) as info:
        generate_palette_from_seed(None)
    assert info.value.code is ErrorCode.MONET_GENERATE_PALETTE_FROM_SEED_INVALIDCOLOR


def test_generate_without_wallpaper():
    with pytest.raises(QtwError) as info:
        Monet().generate()
    assert info.value.code is ErrorCode.MONET_GENERATE_NULLIMAGE


def test_generate_from_wallpaper():
    monet = Monet()
    assert monet.palette() == []
    monet.set_wallpaper(_image_with([(90, 90, 90), VIBRANT]))
    assert monet.wallpaper.mode == "RGBA"
    monet.generate()
    assert monet.seed == Color(*VIBRANT)
    assert monet.palette() == generate_palette_from_seed(Color(*VIBRANT))


def test_grab_wallpaper_without_screen():
    with mock.patch("PIL.ImageGrab.grab", side_effect=OSError("no display")):
        with pytest.raises(QtwError) as info:
            Monet().grab_wallpaper()
    assert info.value.code is ErrorCode.MONET_GET_WALLPAPER_NULLPTR


def test_grab_wallpaper_null_capture():
    with mock.patch("PIL.ImageGrab.grab", return_value=None):
        with pytest.raises(QtwError) as info:
            Monet().grab_wallpaper()
    assert info.value.code is ErrorCode.MONET_GET_WALLPAPER_NULLPIXMAP


def test_grab_wallpaper_success():
    capture = _image_with([VIBRANT])
    monet = Monet()
    with mock.patch("PIL.ImageGrab.grab", return_value=capture):
        monet.grab_wallpaper()
    monet.generate()
    assert monet.seed == Color(*VIBRANT)