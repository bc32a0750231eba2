import pytest

from qtwtheme.errors import ErrorCode, QtwError, error_message


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0x01, ErrorCode.DWM_ENABLE_MICA_NULLPTR),
        (0x0A, ErrorCode.MONET_GENERATE_NULLIMAGE),
        (0x0B, ErrorCode.MONET_GENERATE_PALETTE_FROM_SEED_INVALIDCOLOR),
    ],
)
def test_codes_have_source_values(value, expected):
    assert ErrorCode(value) is expected
    assert error_message(value) == error_message(expected)


def test_known_message():
    assert error_message(ErrorCode.MONET_GENERATE_NULLIMAGE) == (
        "qtwMonet.cpp/generate()->wallpaperImage == null"
    )


def test_message_from_plain_int():
    assert error_message(6) == "qtwMonet.cpp/getWallpaper()->screen == nullptr"


def test_unknown_code_message():
    assert error_message(99) == "Undefined Exception: 99"


@pytest.mark.parametrize("code", list(ErrorCode))
def test_every_code_has_specific_message(code):
    assert not error_message(code).startswith("Undefined Exception")


def test_exception_carries_code_and_message():
    err = QtwError(ErrorCode.MONET_GET_WALLPAPER_NULLPIXMAP)
    assert err.code is ErrorCode.MONET_GET_WALLPAPER_NULLPIXMAP
    assert str(err) == "qtwMonet.cpp/getWallpaper()->pixmap == null"
    assert err.message == "qtwMonet.cpp/getWallpaper()->pixmap == null"


def test_exception_with_unknown_code():
    err = QtwError(42)
    assert err.code == 42
    assert str(err) == "Undefined Exception: 42"