"""Objects representing colors in the RGB and HSV color spaces."""


from abc import ABC, abstractmethod
from typing import Iterator, Text

import attr
from attr import dataclass

from . import colorsys


class Color(ABC):
    """Abstract base class for color spaces."""

    @property
    @abstractmethod
    def rgb(self) -> "RGB":
        """Return the color as an RGB object."""
        raise NotImplementedError()

    @property
    @abstractmethod
    def hsv(self) -> "HSV":
        """Return the color as an HSV object."""
        raise NotImplementedError()

    @property
    def hex(self) -> Text:
        """Return the color as a `#rrggbb` string."""
        return rgb_to_hex(self.rgb)

    def __iter__(self) -> Iterator[float]:
        """Return an iterator over the color's components."""
        return iter(attr.astuple(self))

    def distance(self, other: "Color") -> float:
        """Return the distance between colors in RGB space."""
        return color_distance(self.rgb, other.rgb)

    def matches(self, other: "Color", tolerance: float) -> bool:
        """Return True if the colors are closer than `tolerance` in RGB space."""
        return color_match(self.rgb, other.rgb, tolerance)


@dataclass(frozen=True)
class RGB(Color):
    """
    An RGB color.

    Channels are in the range `[0, 255]` by convention, but they are not clamped.
    """

    red: float
    green: float
    blue: float

    @classmethod
    def from_hex(cls, hc: Text) -> "RGB":
        """Create an RGB object from a hexadecimal string."""
        return cls(*colorsys.hex_to_rgb(hc))

    @property
    def rgb(self) -> "RGB":
        """Return the color as an RGB object."""
        return self

    @property
    def hsv(self) -> "HSV":
        """Return the color as an HSV object."""
        return rgb_to_hsv(self)


@dataclass(frozen=True)
class HSV(Color):
    """
    An HSV color.

    Hue is in degrees, saturation in `[0, 1]` and value on the same scale as the RGB
    channels. A hue of `-1` means the hue is undefined.
    """

    hue: float
    saturation: float
    value: float

    @property
    def rgb(self) -> RGB:
        """Return the color as an RGB object."""
        return hsv_to_rgb(self)

    @property
    def hsv(self) -> "HSV":
        """Return the color as an HSV object."""
        return self

    @property
    def is_achromatic(self) -> bool:
        return self.saturation == 0


def rgb_to_hsv(rgb: RGB) -> HSV:
    """Convert an RGB color to HSV."""
    return HSV(*colorsys.rgb_to_hsv(*rgb))


def hsv_to_rgb(hsv: HSV) -> RGB:
    """Convert an HSV color to RGB. The argument is left untouched."""
    return RGB(*colorsys.hsv_to_rgb(*hsv))


def rgb_to_hex(rgb: RGB, *, clamp: bool = False, upper: bool = False) -> Text:
    """Convert an RGB color to a `#rrggbb` string.

    Raises `InvalidChannelError` for channels outside `[0, 255]` unless `clamp` is set.
    """
    return colorsys.rgb_to_hex(*rgb, clamp=clamp, upper=upper)


def hex_to_rgb(hc: Text) -> RGB:
    """Parse a `#rgb` or `#rrggbb` string, raising `MalformedColorError` if invalid."""
    return RGB(*colorsys.hex_to_rgb(hc))


def color_distance(color: RGB, target_color: RGB) -> float:
    """Return the Euclidean distance between two RGB colors."""
    return colorsys.color_distance(tuple(color), tuple(target_color))


def color_match(color: RGB, target_color: RGB, tolerance: float) -> bool:
    """Return True if the Euclidean distance between the colors is below `tolerance`."""
    return colorsys.color_match(tuple(color), tuple(target_color), tolerance)
