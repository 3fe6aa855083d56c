"""Pure image resize computation logic.

Both operations convert the image to RGBA first, so some information
(e.g. 16-bit depth, palette) may be lost in the process.
"""

from fractions import Fraction

from PIL import Image

from ....common.codec import decode_image, encode_image
from ....common.errors import InvalidParameterError
from ....common.image_format import ImageFormat, format_from_extension

Width = int
Height = int

# JPEG output of the resize path is always written at full quality.
RESIZE_JPEG_QUALITY = 100


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise InvalidParameterError(name, value, "must be a positive integer")


def resize(width: Width, height: Height, image: Image.Image) -> Image.Image:
    """
    Resize an image to exactly `width` x `height` with bilinear interpolation.

    The aspect ratio is not preserved. `image` is left untouched.

    Raises:
        InvalidParameterError: If width or height is not positive
    """
    _require_positive("width", width)
    _require_positive("height", height)

    normalized = image.convert("RGBA")
    return normalized.resize((width, height), Image.Resampling.BILINEAR)


def scale_dimensions(
    max_width: Width,
    max_height: Height,
    width: Width,
    height: Height,
) -> tuple[Width, Height]:
    """
    Largest size with the aspect ratio of `width` x `height` fitting the box.

    The scale factor is an exact fraction; results are rounded half to
    even and never drop below one pixel.

    >>> scale_dimensions(400, 400, 800, 600)
    (400, 300)
    """
    _require_positive("max_width", max_width)
    _require_positive("max_height", max_height)
    _require_positive("image width", width)
    _require_positive("image height", height)

    factor = min(Fraction(max_width, width), Fraction(max_height, height))
    return max(1, round(factor * width)), max(1, round(factor * height))


def scale(max_width: Width, max_height: Height, image: Image.Image) -> Image.Image:
    """
    Scale an image to fit within `max_width` x `max_height`, preserving
    aspect ratio.

    Raises:
        InvalidParameterError: If the box is not positive
    """
    width, height = scale_dimensions(max_width, max_height, image.width, image.height)
    return resize(width, height, image)


def _encode_for(fmt: ImageFormat, image: Image.Image) -> bytes:
    quality = RESIZE_JPEG_QUALITY if fmt is ImageFormat.JPEG else None
    return encode_image(image, fmt, quality=quality)


def resize_image(width: Width, height: Height, data: bytes, extension: str) -> bytes:
    """
    Decode `data`, resize it to `width` x `height` and encode it in the
    format named by `extension`.

    Args:
        width: Target width in pixels
        height: Target height in pixels
        data: Raw encoded source image
        extension: Target file extension, e.g. ".png" (case-sensitive)

    Returns:
        Encoded bytes of the resized image

    Raises:
        InvalidParameterError: If width or height is not positive
        UnsupportedFormatError: If the extension is not supported
        DecodeError: If `data` cannot be decoded
    """
    _require_positive("width", width)
    _require_positive("height", height)
    fmt = format_from_extension(extension)

    with decode_image(data) as image:
        resized = resize(width, height, image)
    return _encode_for(fmt, resized)


def scale_image(max_width: Width, max_height: Height, data: bytes, extension: str) -> bytes:
    """
    Decode `data`, scale it to fit within `max_width` x `max_height` and
    encode it in the format named by `extension`.

    Raises:
        InvalidParameterError: If the box is not positive
        UnsupportedFormatError: If the extension is not supported
        DecodeError: If `data` cannot be decoded
    """
    _require_positive("max_width", max_width)
    _require_positive("max_height", max_height)
    fmt = format_from_extension(extension)

    with decode_image(data) as image:
        scaled = scale(max_width, max_height, image)
    return _encode_for(fmt, scaled)
