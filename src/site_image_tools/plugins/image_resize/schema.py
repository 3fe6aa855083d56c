"""Image resize / scale parameter schemas."""

from pydantic import Field

from ...common.schema_step import BaseStepParams


class ImageResizeParams(BaseStepParams):
    """Parameters for the fixed-size resize step.

    Attributes:
        width: Output width in pixels
        height: Output height in pixels
    """

    width: int = Field(description="Output width in pixels")
    height: int = Field(description="Output height in pixels")


class ImageScaleParams(BaseStepParams):
    """Parameters for the scale-to-fit step.

    Attributes:
        max_width: Width of the bounding box in pixels
        max_height: Height of the bounding box in pixels
    """

    max_width: int = Field(description="Bounding box width in pixels")
    max_height: int = Field(description="Bounding box height in pixels")
