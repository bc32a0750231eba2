"""Wallpaper-driven colour palette generation."""

from __future__ import annotations

import math
from functools import lru_cache

from PIL import Image, ImageGrab

from .color import Color, color_from_hsl
from .errors import ErrorCode, QtwError

SATURATION_THRESHOLD_VIBRANT = 0.35
VALUE_THRESHOLD_VIBRANT = 0.30
MAX_VALUE_THRESHOLD_VIBRANT = 0.96
MIN_ALPHA = 200

Palette = list[tuple[Color, Color]]


def _is_null(image: Image.Image | None) -> bool:
    return image is None or image.width == 0 or image.height == 0


@lru_cache(maxsize=65536)
def _vibrant_score(red: int, green: int, blue: int) -> float | None:
    _, saturation, value = Color(red, green, blue).hsv()
    if (saturation >= SATURATION_THRESHOLD_VIBRANT
            and VALUE_THRESHOLD_VIBRANT <= value <= MAX_VALUE_THRESHOLD_VIBRANT):
        return saturation * 0.7 + value * 0.3
    return None


def extract_dominant_vibrant_color(image: Image.Image | None) -> Color:
    """Return the most vibrant opaque pixel; the first one wins on ties."""
    if _is_null(image):
        raise QtwError(ErrorCode.MONET_GET_WALLPAPER_NULLIMAGE)

    data = image.convert("RGBA").tobytes()
    best_score = -1.0
    best: Color | None = None
    for red, green, blue, alpha in zip(*[iter(data)] * 4):
        if alpha < MIN_ALPHA:
            continue
        score = _vibrant_score(red, green, blue)
        if score is not None and score > best_score:
            best_score = score
            best = Color(red, green, blue, alpha)

    if best is None:
        raise QtwError(ErrorCode.MONET_EXTRACT_DOMINANT_VIBRANT_COLOR_NOTFOUND)
    return best


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def generate_palette_from_seed(seed: Color | None) -> Palette:
    """Derive five (light, dark) colour pairs from a seed colour."""
    if not isinstance(seed, Color):
        raise QtwError(ErrorCode.MONET_GENERATE_PALETTE_FROM_SEED_INVALIDCOLOR)

    hue, sat, light = seed.hsl()
    hue = max(hue, 0.0)
    sat = max(sat, 0.5)
    light = _clamp(light, 0.4, 0.75)

    def shifted(degrees: float) -> float:
        return math.fmod(hue + degrees / 360.0 + 1.0, 1.0)

    def pair(h, light_s, light_l, dark_s, dark_l):
        return (
            color_from_hsl(h, _clamp(sat * light_s[0], *light_s[1:]),
                           _clamp(light * light_l[0], *light_l[1:])),
            color_from_hsl(h, _clamp(sat * dark_s[0], *dark_s[1:]),
                           _clamp(light * dark_l[0], *dark_l[1:])),
        )

    return [
        pair(hue, (1.0, 0.5, 0.9), (1.0, 0.55, 0.75), (0.7, 0.3, 0.7), (0.3, 0.1, 0.25)),
        pair(shifted(30), (0.9, 0.55, 0.9), (1.05, 0.6, 0.8),
             (0.6, 0.3, 0.65), (0.35, 0.12, 0.28)),
        pair(shifted(60), (0.95, 0.6, 0.95), (1.1, 0.65, 0.85),
             (0.5, 0.25, 0.6), (0.4, 0.15, 0.3)),
        pair(shifted(180), (0.8, 0.45, 0.85), (0.9, 0.5, 0.7),
             (0.65, 0.25, 0.6), (0.25, 0.08, 0.22)),
        pair(hue, (0.2, 0.05, 0.3), (1.2, 0.75, 0.9), (0.15, 0.02, 0.25), (0.15, 0.05, 0.15)),
    ]


class Monet:
    """Holds a wallpaper image and the palette generated from it."""

    def __init__(self) -> None:
        self._wallpaper: Image.Image | None = None
        self.seed: Color | None = None
        self._palette: Palette = []

    @property
    def wallpaper(self) -> Image.Image | None:
        return self._wallpaper

    def set_wallpaper(self, image: Image.Image) -> None:
        """Use ``image`` as the wallpaper, converting it to RGBA."""
        self._wallpaper = image if image.mode == "RGBA" else image.convert("RGBA")

    def grab_wallpaper(self) -> None:
        """Capture the screen and use the capture as the wallpaper."""
        try:
            captured = ImageGrab.grab()
        except OSError as exc:
            raise QtwError(ErrorCode.MONET_GET_WALLPAPER_NULLPTR) from exc
        if captured is None:
            raise QtwError(ErrorCode.MONET_GET_WALLPAPER_NULLPIXMAP)
        if _is_null(captured):
            raise QtwError(ErrorCode.MONET_GET_WALLPAPER_NULLIMAGE)
        self.set_wallpaper(captured)

    def generate(self) -> None:
        """Extract the seed colour from the wallpaper and build the palette."""
        if _is_null(self._wallpaper):
            raise QtwError(ErrorCode.MONET_GENERATE_NULLIMAGE)
        self.seed = extract_dominant_vibrant_color(self._wallpaper)
        self._palette = generate_palette_from_seed(self.seed)

    def palette(self) -> Palette:
        """Return a copy of the generated palette (empty before generation)."""
        return list(self._palette)