"""Error codes and the exception raised throughout the package."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes identifying where an error was raised."""

    DWM_ENABLE_MICA_NULLPTR = 0x01
    DWM_DISABLE_MICA_NULLPTR = 0x02
    DWM_ENABLE_BLUR_NULLPTR = 0x03
    DWM_DISABLE_BLUR_NULLPTR = 0x04
    BUTTON_PAINT_EVENT_NULLPTR = 0x05
    MONET_GET_WALLPAPER_NULLPTR = 0x06
    MONET_GET_WALLPAPER_NULLPIXMAP = 0x07
    MONET_GET_WALLPAPER_NULLIMAGE = 0x08
    MONET_EXTRACT_DOMINANT_VIBRANT_COLOR_NOTFOUND = 0x09
    MONET_GENERATE_NULLIMAGE = 0x0A
    MONET_GENERATE_PALETTE_FROM_SEED_INVALIDCOLOR = 0x0B


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DWM_ENABLE_MICA_NULLPTR:
        "qtwDWM.cpp/enableMica(QWidget *widget)->widget == nullptr",
    ErrorCode.DWM_DISABLE_MICA_NULLPTR:
        "qtwDWM.cpp/disableMica(QWidget *widget)->widget == nullptr",
    ErrorCode.DWM_ENABLE_BLUR_NULLPTR:
        "qtwDWM.cpp/enableBlue(QWidget *widget)->widget == nullptr",
    ErrorCode.DWM_DISABLE_BLUR_NULLPTR:
        "qtwDWM.cpp/disableBlur(QWidget *widget)->widget == nullptr",
    ErrorCode.BUTTON_PAINT_EVENT_NULLPTR:
        "qtwButton.cpp/paintEvent(QPaintEvent *event)->style() == nullptr",
    ErrorCode.MONET_GET_WALLPAPER_NULLPTR:
        "qtwMonet.cpp/getWallpaper()->screen == nullptr",
    ErrorCode.MONET_GET_WALLPAPER_NULLPIXMAP:
        "qtwMonet.cpp/getWallpaper()->pixmap == null",
    ErrorCode.MONET_GET_WALLPAPER_NULLIMAGE:
        "qtwMonet.cpp/getWallpaper()|extractDominantVibrantColor"
        "(const Qimage& image)->wallpaperImage == null",
    ErrorCode.MONET_EXTRACT_DOMINANT_VIBRANT_COLOR_NOTFOUND:
        "qtwMonet.cpp/extractDominantVibrantColor(const QImage& image)::Color Not Found",
    ErrorCode.MONET_GENERATE_NULLIMAGE:
        "qtwMonet.cpp/generate()->wallpaperImage == null",
    ErrorCode.MONET_GENERATE_PALETTE_FROM_SEED_INVALIDCOLOR:
        "qtwMonet.cpp/generatePaletteFromSeed(const QColor& seed)->seed == invalid",
}


def error_message(code: int) -> str:
    """Return the message for an error code, or a generic one for unknown codes."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return f"Undefined Exception: {int(code)}"


class QtwError(Exception):
    """Raised with an error code whose message describes the failure."""

    def __init__(self, code: int) -> None:
        try:
            self.code: int = ErrorCode(code)
        except ValueError:
            self.code = int(code)
        super().__init__(error_message(self.code))

    @property
    def message(self) -> str:
        return error_message(self.code)