"""Hover/press animation state for a rounded push button."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable

from .color import Color

PRESSED_OPACITY = 0.9
HOVER_DARKER_FACTOR = 120
ANIMATION_DURATION_COLOR_MS = 20
ANIMATION_DURATION_OPACITY_MS = 20
CORNER_RADIUS = 6


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


def _fuzzy_equal(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def _in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def _interpolate(start: Any, end: Any, progress: float) -> Any:
    if isinstance(start, Color) and isinstance(end, Color):
        def mix(a: int, b: int) -> int:
            return round(a + (b - a) * progress)
        return Color(
            mix(start.red, end.red),
            mix(start.green, end.green),
            mix(start.blue, end.blue),
            mix(start.alpha, end.alpha),
        )
    return start + (end - start) * progress


class PropertyAnimation:
    """Drives a setter from a start to an end value with in-out quadratic easing."""

    def __init__(self, setter: Callable[[Any], None], duration_ms: int) -> None:
        if duration_ms < 0:
            raise ValueError("duration must not be negative")
        self._setter = setter
        self.duration_ms = duration_ms
        self.start_value: Any = None
        self.end_value: Any = None
        self.elapsed_ms = 0.0
        self.running = False

    def start(self, start_value: Any, end_value: Any) -> None:
        self.start_value = start_value
        self.end_value = end_value
        self.elapsed_ms = 0.0
        self.running = True
        self._setter(start_value)
        if self.duration_ms == 0:
            self.advance(0)

    def stop(self) -> None:
        self.running = False

    def advance(self, elapsed_ms: float) -> None:
        """Move the animation forward by ``elapsed_ms`` and apply the new value."""
        if not self.running:
            return
        self.elapsed_ms = min(self.elapsed_ms + elapsed_ms, self.duration_ms)
        progress = 1.0 if self.duration_ms == 0 else self.elapsed_ms / self.duration_ms
        self._setter(_interpolate(self.start_value, self.end_value, _in_out_quad(progress)))
        if progress >= 1.0:
            self.running = False


class AnimatedButton:
    """Button state that darkens on hover and fades while pressed."""

    def __init__(self, base_color: Color, text: str = "") -> None:
        self.text = text
        self.base_bg_color = base_color
        self.hover_bg_color = base_color.darker(HOVER_DARKER_FACTOR)
        self.bg_color = base_color
        self.opacity = 1.0
        self.hovered = False
        self.down = False
        self.corner_radius = CORNER_RADIUS
        self.bg_color_listeners: list[Callable[[Color], None]] = []
        self.opacity_listeners: list[Callable[[float], None]] = []
        self.bg_color_animation = PropertyAnimation(
            self.set_animated_bg_color, ANIMATION_DURATION_COLOR_MS)
        self.opacity_animation = PropertyAnimation(
            self.set_animated_opacity, ANIMATION_DURATION_OPACITY_MS)

    def set_animated_bg_color(self, color: Color) -> None:
        if color != self.bg_color:
            self.bg_color = color
            for listener in self.bg_color_listeners:
                listener(color)

    def set_animated_opacity(self, opacity: float) -> None:
        if not _fuzzy_equal(self.opacity, opacity):
            self.opacity = opacity
            for listener in self.opacity_listeners:
                listener(opacity)

    def _restore_opacity(self) -> None:
        self.opacity_animation.stop()
        self.opacity_animation.start(self.opacity, 1.0)

    def enter(self) -> None:
        self.hovered = True
        self.bg_color_animation.stop()
        self.opacity_animation.stop()
        self.bg_color_animation.start(self.bg_color, self.hover_bg_color)
        if not _fuzzy_equal(self.opacity, 1.0):
            self._restore_opacity()

    def leave(self) -> None:
        self.hovered = False
        self.bg_color_animation.stop()
        self.bg_color_animation.start(self.bg_color, self.base_bg_color)
        if not self.down and not _fuzzy_equal(self.opacity, 1.0):
            self._restore_opacity()

    def press(self, button: MouseButton) -> None:
        if button is MouseButton.LEFT:
            self.down = True
            self.opacity_animation.stop()
            self.opacity_animation.start(self.opacity, PRESSED_OPACITY)

    def release(self, button: MouseButton) -> None:
        if button is MouseButton.LEFT:
            self.down = False
            self._restore_opacity()

    def advance(self, elapsed_ms: float) -> None:
        """Advance both animations by ``elapsed_ms``."""
        self.bg_color_animation.advance(elapsed_ms)
        self.opacity_animation.advance(elapsed_ms)