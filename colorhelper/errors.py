"""Exceptions raised when a color cannot be parsed or encoded."""


from typing import Any, Text


class ColorError(ValueError):
    """Base class for color conversion errors."""


class MalformedColorError(ColorError):
    """The value is not a 3- or 6-digit hexadecimal color."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"{value!r} is not a valid hexadecimal color")
        self.value = value


class InvalidChannelError(ColorError):
    """An RGB channel is outside the range `[0, 255]`."""

    def __init__(self, channel: Text, value: float) -> None:
        super().__init__(f"{channel} channel {value!r} is outside the range [0, 255]")
        self.channel = channel
        self.value = value
