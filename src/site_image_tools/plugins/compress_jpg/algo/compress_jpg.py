"""Pure JPEG recompression logic."""

from ....common.codec import decode_image, encode_image
from ....common.errors import InvalidParameterError
from ....common.image_format import ImageFormat

# Jpeg encoding quality, from 0 (lowest quality) to 100 (best quality).
JpgQuality = int

MIN_QUALITY: JpgQuality = 0
MAX_QUALITY: JpgQuality = 100


def compress_jpg(quality: JpgQuality, data: bytes) -> bytes:
    """
    Re-encode JPEG bytes at a given quality.

    Dimensions and colour mode are kept; only the encoding quality changes.
    The quality is checked after decoding, so malformed input is reported
    as a DecodeError even when the quality is also out of range.

    Args:
        quality: JPEG quality, 0 (smallest) to 100 (best)
        data: Raw JPEG bytes

    Returns:
        Re-encoded JPEG bytes

    Raises:
        DecodeError: If `data` is not a valid JPEG
        InvalidParameterError: If quality is outside [0, 100]
    """
    with decode_image(data, formats=[ImageFormat.JPEG.value]) as image:
        if not MIN_QUALITY <= quality <= MAX_QUALITY:
            raise InvalidParameterError(
                "quality",
                quality,
                f"JPEG encoding quality should be between {MIN_QUALITY} and {MAX_QUALITY}",
            )
        return encode_image(image, ImageFormat.JPEG, quality=quality)
