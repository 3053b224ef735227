"""Conversions between RGB, HSV and hexadecimal colors."""


__version__ = "0.1.0"


__all__ = [
    "HSV",
    "RGB",
    "Color",
    "ColorError",
    "InvalidChannelError",
    "MalformedColorError",
    "color_distance",
    "color_match",
    "hex_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsv",
]


from .errors import ColorError, InvalidChannelError, MalformedColorError
from .spaces import (
    HSV,
    RGB,
    Color,
    color_distance,
    color_match,
    hex_to_rgb,
    hsv_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
)
