"""JPEG compression plugin."""

from .schema import CompressJpgParams
from .task import CompressJpgStep

__all__ = ["CompressJpgStep", "CompressJpgParams"]
