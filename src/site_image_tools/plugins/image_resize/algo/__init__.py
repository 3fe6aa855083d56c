"""Image resize and scale-to-fit algorithms."""

from .image_resize import (
    Height,
    Width,
    resize,
    resize_image,
    scale,
    scale_dimensions,
    scale_image,
)

__all__ = [
    "Width",
    "Height",
    "resize",
    "resize_image",
    "scale",
    "scale_dimensions",
    "scale_image",
]
