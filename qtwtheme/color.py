"""An RGBA colour with HSV/HSL conversions."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass


def _to_channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")


def _check_hue(hue: float) -> None:
    if hue != -1.0 and not 0.0 <= hue <= 1.0:
        raise ValueError(f"hue must be -1 or within [0, 1], got {hue}")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer in [0, 255], got {value!r}")

    @property
    def name(self) -> str:
        """The colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def _unit_rgb(self) -> tuple[float, float, float]:
        return self.red / 255, self.green / 255, self.blue / 255

    def hsv(self) -> tuple[float, float, float]:
        """Return (hue, saturation, value); hue is -1 for achromatic colours."""
        hue, saturation, value = colorsys.rgb_to_hsv(*self._unit_rgb())
        if self.red == self.green == self.blue:
            hue = -1.0
        return hue, saturation, value

    def hsl(self) -> tuple[float, float, float]:
        """Return (hue, saturation, lightness); hue is -1 for achromatic colours."""
        hue, lightness, saturation = colorsys.rgb_to_hls(*self._unit_rgb())
        if self.red == self.green == self.blue:
            hue = -1.0
        return hue, saturation, lightness

    def darker(self, factor: int = 200) -> Color:
        """Return a darker colour: value divided by ``factor / 100``."""
        if factor <= 0:
            return self
        if factor < 100:
            return self._lighter(10000 / factor)
        hue, saturation, value = self.hsv()
        return color_from_hsv(hue, saturation, value * 100 / factor, self.alpha / 255)

    def _lighter(self, factor: float) -> Color:
        hue, saturation, value = self.hsv()
        value = value * factor / 100
        if value > 1.0:
            saturation = max(0.0, saturation - (value - 1.0))
            value = 1.0
        return color_from_hsv(hue, saturation, value, self.alpha / 255)


def color_from_hsl(hue: float, saturation: float, lightness: float,
                   alpha: float = 1.0) -> Color:
    """Build a colour from HSL components in [0, 1]; hue -1 means achromatic."""
    _check_hue(hue)
    _check_unit("saturation", saturation)
    _check_unit("lightness", lightness)
    _check_unit("alpha", alpha)
    r, g, b = colorsys.hls_to_rgb(max(hue, 0.0) % 1.0, lightness, saturation)
    return Color(_to_channel(r), _to_channel(g), _to_channel(b), _to_channel(alpha))


def color_from_hsv(hue: float, saturation: float, value: float,
                   alpha: float = 1.0) -> Color:
    """Build a colour from HSV components in [0, 1]; hue -1 means achromatic."""
    _check_hue(hue)
    _check_unit("saturation", saturation)
    _check_unit("value", value)
    _check_unit("alpha", alpha)
    r, g, b = colorsys.hsv_to_rgb(max(hue, 0.0) % 1.0, saturation, value)
    return Color(_to_channel(r), _to_channel(g), _to_channel(b), _to_channel(alpha))


def color_from_argb(value: int) -> Color:
    """Build a colour from a packed 0xAARRGGBB integer."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"ARGB value out of range: {value:#x}")
    return Color(
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )