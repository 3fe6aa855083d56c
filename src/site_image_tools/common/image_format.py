"""Translation between file extensions and encodable image formats.

Build pipelines hand over raw bytes plus a filename, so the target format
has to be recovered from the declared extension. Matching is exact and
case-sensitive: ``.jpg`` is known, ``.JPG`` is not.
"""

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from .errors import UnsupportedFormatError


class ImageFormat(StrEnum):
    """Supported (i.e. encodable) image formats, valued by Pillow format name."""

    JPEG = "JPEG"
    PNG = "PNG"
    BITMAP = "BMP"
    TIFF = "TIFF"


EXTENSION_FORMATS: Final[Mapping[str, ImageFormat]] = MappingProxyType(
    {
        ".jpeg": ImageFormat.JPEG,
        ".jpg": ImageFormat.JPEG,
        ".png": ImageFormat.PNG,
        ".bmp": ImageFormat.BITMAP,
        ".tif": ImageFormat.TIFF,
        ".tiff": ImageFormat.TIFF,
    }
)


def lookup_format(extension: str) -> ImageFormat | None:
    """Return the format for `extension`, or None when it is not supported."""
    return EXTENSION_FORMATS.get(extension)


def format_from_extension(extension: str) -> ImageFormat:
    """
    Resolve `extension` (leading dot included) to an ImageFormat.

    Raises:
        UnsupportedFormatError: If the extension is not in EXTENSION_FORMATS
    """
    fmt = lookup_format(extension)
    if fmt is None:
        raise UnsupportedFormatError(extension)
    return fmt


def supported_extensions() -> list[str]:
    return sorted(EXTENSION_FORMATS)
