import attr
import pytest

from colorhelper import (
    HSV,
    RGB,
    ColorError,
    InvalidChannelError,
    MalformedColorError,
    color_distance,
    color_match,
    hex_to_rgb,
    hsv_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
)


def test_rgb_to_hsv():
    assert rgb_to_hsv(RGB(0, 0, 0)) == HSV(-1, 0, 0)
    assert rgb_to_hsv(RGB(255, 0, 0)) == HSV(0, 1, 255)
    assert RGB(0, 0, 255).hsv == HSV(240, 1, 255)


def test_hsv_to_rgb():
    assert hsv_to_rgb(HSV(120, 1, 255)) == RGB(0, 255, 0)
    assert HSV(-1, 0, 0).rgb == RGB(0, 0, 0)


def test_hsv_to_rgb_does_not_modify_argument():
    hsv = HSV(300, 0.5, 200)
    hsv_to_rgb(hsv)
    assert hsv == HSV(300, 0.5, 200)


def test_records_are_frozen():
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        RGB(1, 2, 3).red = 4
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        HSV(1, 0.5, 3).hue = 4


def test_records_iterate_and_compare():
    assert tuple(RGB(1, 2, 3)) == (1, 2, 3)
    assert tuple(HSV(10, 0.5, 3)) == (10, 0.5, 3)
    assert RGB(1, 2, 3) != HSV(1, 2, 3)
    assert len({RGB(1, 2, 3), RGB(1, 2, 3)}) == 1


def test_is_achromatic():
    assert RGB(128, 128, 128).hsv.is_achromatic
    assert not RGB(128, 0, 128).hsv.is_achromatic


def test_rgb_to_hex():
    assert rgb_to_hex(RGB(255, 0, 0)) == "#ff0000"
    assert rgb_to_hex(RGB(255, 0, 0), upper=True) == "#FF0000"
    assert RGB(0, 51, 255).hex == "#0033ff"
    assert HSV(0, 1, 255).hex == "#ff0000"


def test_rgb_to_hex_out_of_range():
    with pytest.raises(InvalidChannelError):
        rgb_to_hex(RGB(0, 0, 1000))
    assert rgb_to_hex(RGB(0, 0, 1000), clamp=True) == "#0000ff"


def test_hex_to_rgb():
    assert hex_to_rgb("#ff0000") == RGB(255, 0, 0)
    assert hex_to_rgb("03F") == RGB(0, 51, 255)
    assert RGB.from_hex("#0033FF") == RGB(0, 51, 255)


def test_hex_to_rgb_malformed():
    with pytest.raises(MalformedColorError):
        hex_to_rgb("not-a-color")


def test_errors_are_value_errors():
    assert issubclass(MalformedColorError, ColorError)
    assert issubclass(InvalidChannelError, ColorError)
    with pytest.raises(ValueError):
        hex_to_rgb("#zzz")


def test_rgb_roundtrip_within_one_unit():
    for rgb in [RGB(12, 200, 45), RGB(250, 250, 1), RGB(7, 7, 8), RGB(0, 128, 255)]:
        back = rgb.hsv.rgb
        assert back.red == pytest.approx(rgb.red, abs=1)
        assert back.green == pytest.approx(rgb.green, abs=1)
        assert back.blue == pytest.approx(rgb.blue, abs=1)
        assert back.hex == rgb.hex


def test_color_match():
    black = RGB(0, 0, 0)
    white = RGB(255, 255, 255)
    assert color_match(black, black, 1)
    assert not color_match(black, white, 1)
    assert color_match(black, RGB(1, 1, 1), 2)
    assert black.matches(RGB(3, 4, 0), 6)
    assert not black.matches(RGB(3, 4, 0), 5)


def test_color_distance():
    assert color_distance(RGB(0, 0, 0), RGB(3, 4, 0)) == 5
    assert RGB(0, 0, 0).distance(HSV(-1, 0, 0)) == 0
