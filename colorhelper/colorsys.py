"""Simple color conversions between RGB, HSV and hexadecimal.

This module follows the style of the
[standard `colorsys` module](https://docs.python.org/3/library/colorsys.html):
every function takes and returns plain numbers and tuples. Unlike the standard module,
RGB channels and HSV values are on the `[0, 255]` scale and hue is expressed in degrees.

Examples
--------
>>> from colorhelper import colorsys

RGB from and to HSV:

>>> colorsys.rgb_to_hsv(51, 102, 102)
(180.0, 0.5, 102)
>>> colorsys.hsv_to_rgb(180.0, 0.5, 102)
(51.0, 102.0, 102)

RGB from and to hexadecimal, including the three digit shorthand:

>>> colorsys.rgb_to_hex(51, 102, 102)
'#336666'
>>> colorsys.hex_to_rgb("#366")
(51, 102, 102)

Black has no hue, which is reported as `-1`:

>>> colorsys.rgb_to_hsv(0, 0, 0)
(-1, 0.0, 0)
"""


from __future__ import annotations

import logging
import math
import re
from typing import Any, Text

from .errors import InvalidChannelError, MalformedColorError

__all__ = [
    "color_distance",
    "color_match",
    "hex_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsv",
]

log = logging.getLogger(__name__)

CHANNEL_MAX = 255
HUE_DEGREES = 360
UNDEFINED_HUE = -1

CHANNEL_NAMES = ("red", "green", "blue")

SHORTHAND_PATTERN = re.compile(r"#?([0-9a-f])([0-9a-f])([0-9a-f])", re.IGNORECASE)
HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the color from RGB coordinates to HSV coordinates.

    The value keeps the scale of the RGB channels. Hue is in degrees, in `[0, 360)`,
    except for black where it is undefined and reported as `UNDEFINED_HUE`.
    """
    min_c = min(r, g, b)
    max_c = max(r, g, b)
    delta = max_c - min_c

    if max_c == 0:
        return UNDEFINED_HUE, 0.0, max_c

    s = delta / max_c
    if delta == 0:
        # gray
        return 0.0, s, max_c

    if r == max_c:
        # between yellow and magenta
        h = (g - b) / delta
    elif g == max_c:
        # between cyan and yellow
        h = 2 + (b - r) / delta
    else:
        # between magenta and cyan
        h = 4 + (r - g) / delta

    h *= 60
    if h < 0:
        h += HUE_DEGREES
        # rounding
        if h >= HUE_DEGREES:
            h = 0.0
    return h, s, max_c


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert the color from HSV coordinates to RGB coordinates.

    Hue is taken modulo 360, so `360` and `0` are both red. A hue that is not finite
    is undefined, and the color is treated as achromatic.
    """
    if s == 0 or not math.isfinite(h):
        return v, v, v

    h = (h % HUE_DEGREES) / 60
    # rounding, e.g. -1e-14 % 360 == 360.0
    if h >= 6:
        h = 0.0
    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def rgb_to_hex(
    r: float, g: float, b: float, *, clamp: bool = False, upper: bool = False
) -> Text:
    """Convert the color from RGB coordinates to a `#rrggbb` string.

    Channels are rounded to the nearest integer. A channel outside `[0, 255]` raises
    `InvalidChannelError`, unless `clamp` is set, in which case it is clamped.
    """
    r, g, b = (
        _to_byte(name, value, clamp) for name, value in zip(CHANNEL_NAMES, (r, g, b))
    )
    hc = r << 16 | g << 8 | b
    if upper:
        return f"#{hc:06X}"
    return f"#{hc:06x}"


def hex_to_rgb(hc: Text) -> tuple[int, int, int]:
    """Convert the color from a hexadecimal string to RGB coordinates.

    Accepts `#rgb`, `rgb`, `#rrggbb` and `rrggbb`, in any case.
    """
    if not isinstance(hc, str):
        raise MalformedColorError(hc)

    # Expand shorthand form (e.g. "03F") to full form (e.g. "0033FF")
    match = SHORTHAND_PATTERN.fullmatch(hc)
    expanded = "".join(d * 2 for d in match.groups()) if match else hc

    match = HEX_PATTERN.fullmatch(expanded)
    if match is None:
        raise MalformedColorError(hc)
    r, g, b = (int(byte, 16) for byte in match.groups())
    return r, g, b


def color_distance(
    color: tuple[float, float, float], target: tuple[float, float, float]
) -> float:
    """Return the Euclidean distance between two colors in RGB space."""
    return math.hypot(*(max(c, t) - min(c, t) for c, t in zip(color, target)))


def color_match(
    color: tuple[float, float, float],
    target: tuple[float, float, float],
    tolerance: float,
) -> bool:
    """Return True if the colors are closer than `tolerance` in RGB space."""
    return color_distance(color, target) < tolerance


def clip(value: float, min_value: float, max_value: float) -> float:
    """Clip a value to the given range."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def _to_byte(channel: Text, value: Any, clamp: bool) -> int:
    """Round a channel to an integer and check that it fits in a byte."""
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidChannelError(channel, value)
    byte = round(value)
    if 0 <= byte <= CHANNEL_MAX:
        return byte
    if not clamp:
        raise InvalidChannelError(channel, value)
    log.debug("Clamping %s channel %r to [0, %d]", channel, value, CHANNEL_MAX)
    return int(clip(byte, 0, CHANNEL_MAX))
