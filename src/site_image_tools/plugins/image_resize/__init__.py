"""Image resize plugin."""

from .schema import ImageResizeParams, ImageScaleParams
from .task import ImageResizeStep, ImageScaleStep

__all__ = ["ImageResizeStep", "ImageScaleStep", "ImageResizeParams", "ImageScaleParams"]
