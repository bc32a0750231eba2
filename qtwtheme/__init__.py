"""Wallpaper-driven palettes, colour helpers and an animated button state model."""

__version__ = "0.0.1"
__all__ = ["errors", "color", "monet", "button"]