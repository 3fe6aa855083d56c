"""In-memory decode/encode helpers shared by the image plugins."""

from collections.abc import Sequence
from io import BytesIO

from loguru import logger
from PIL import Image

from .errors import DecodeError
from .image_format import ImageFormat

# Modes the JPEG encoder accepts as-is; anything else loses alpha/palette first.
JPEG_MODES = ("L", "RGB", "CMYK")


def decode_image(data: bytes, formats: Sequence[str] | None = None) -> Image.Image:
    """
    Decode `data` into a fully loaded Pillow image.

    Args:
        data: Raw encoded image bytes
        formats: Restrict decoding to these Pillow formats (None = autodetect)

    Returns:
        Decoded image with positive width and height

    Raises:
        DecodeError: If the bytes are malformed, truncated or of an
            unsupported/unexpected format
    """
    try:
        image = Image.open(BytesIO(data), formats=formats)
        image.load()
    except (OSError, ValueError, SyntaxError, EOFError, Image.DecompressionBombError) as exc:
        expected = "/".join(formats) if formats else "image"
        raise DecodeError(f"Loading the {expected} failed: {exc}") from exc

    if image.width <= 0 or image.height <= 0:
        raise DecodeError(f"Decoded image has empty size {image.size}")

    logger.debug(f"Decoded {image.format} image {image.size} mode={image.mode}")
    return image


def encode_image(
    image: Image.Image,
    fmt: ImageFormat,
    *,
    quality: int | None = None,
) -> bytes:
    """Encode `image` as `fmt`. `quality` only applies to JPEG."""
    if fmt is ImageFormat.JPEG and image.mode not in JPEG_MODES:
        image = image.convert("RGB")

    save_kwargs: dict[str, object] = {}
    if fmt is ImageFormat.JPEG and quality is not None:
        save_kwargs["quality"] = quality

    buffer = BytesIO()
    image.save(buffer, format=fmt.value, **save_kwargs)
    encoded = buffer.getvalue()

    logger.debug(f"Encoded {fmt.value} image {image.size} ({len(encoded)} bytes)")
    return encoded
