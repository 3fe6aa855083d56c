"""Tests for extension -> format dispatch and the codec helpers."""

from io import BytesIO

import pytest
from PIL import Image

from site_image_tools.common.codec import decode_image, encode_image
from site_image_tools.common.errors import DecodeError, ImageStepError, UnsupportedFormatError
from site_image_tools.common.image_format import (
    EXTENSION_FORMATS,
    ImageFormat,
    format_from_extension,
    lookup_format,
    supported_extensions,
)

# ============================================================================
# FORMAT DISPATCH
# ============================================================================


@pytest.mark.parametrize(
    ("extension", "expected"),
    [
        (".jpeg", ImageFormat.JPEG),
        (".jpg", ImageFormat.JPEG),
        (".png", ImageFormat.PNG),
        (".bmp", ImageFormat.BITMAP),
        (".tif", ImageFormat.TIFF),
        (".tiff", ImageFormat.TIFF),
    ],
)
def test_format_from_extension(extension: str, expected: ImageFormat):
    assert format_from_extension(extension) is expected
    assert lookup_format(extension) is expected


@pytest.mark.parametrize("extension", [".JPG", ".Jpg", ".PNG", ".TIFF", ".BMP"])
def test_extension_matching_is_case_sensitive(extension: str):
    assert lookup_format(extension) is None
    with pytest.raises(UnsupportedFormatError):
        _ = format_from_extension(extension)


@pytest.mark.parametrize("extension", [".gif", ".webp", ".svg", "jpg", "", " .jpg"])
def test_unsupported_extension(extension: str):
    assert lookup_format(extension) is None

    with pytest.raises(UnsupportedFormatError) as exc_info:
        _ = format_from_extension(extension)

    assert exc_info.value.extension == extension
    assert exc_info.value.kind == "unsupported_format"
    assert isinstance(exc_info.value, ImageStepError)


def test_image_format_values_are_pillow_names():
    assert [fmt.value for fmt in ImageFormat] == ["JPEG", "PNG", "BMP", "TIFF"]


def test_extension_table_is_read_only():
    with pytest.raises(TypeError):
        EXTENSION_FORMATS[".gif"] = ImageFormat.PNG  # type: ignore[index]


def test_supported_extensions():
    assert supported_extensions() == [".bmp", ".jpeg", ".jpg", ".png", ".tif", ".tiff"]


# ============================================================================
# CODEC
# ============================================================================


def test_decode_image(jpeg_bytes: bytes):
    with decode_image(jpeg_bytes) as img:
        assert img.format == "JPEG"
        assert img.size == (320, 240)


def test_decode_image_restricted_formats(png_bytes: bytes):
    with pytest.raises(DecodeError):
        _ = decode_image(png_bytes, formats=["JPEG"])


def test_decode_image_chains_cause(corrupt_bytes: bytes):
    with pytest.raises(DecodeError) as exc_info:
        _ = decode_image(corrupt_bytes)

    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_encode_image_rgba(fmt: ImageFormat):
    img = Image.new("RGBA", (10, 6), (10, 20, 30, 128))

    encoded = encode_image(img, fmt)

    with Image.open(BytesIO(encoded)) as decoded:
        assert decoded.format == fmt.value
        assert decoded.size == (10, 6)


def test_encode_image_jpeg_quality_affects_size():
    img = Image.effect_noise((128, 128), 64).convert("RGB")

    low = encode_image(img, ImageFormat.JPEG, quality=10)
    high = encode_image(img, ImageFormat.JPEG, quality=100)

    assert len(low) < len(high)


def test_encode_image_jpeg_does_not_mutate_input():
    img = Image.new("RGBA", (4, 4))

    _ = encode_image(img, ImageFormat.JPEG, quality=100)

    assert img.mode == "RGBA"
