"""JPEG compression parameter schema."""

from pydantic import Field

from ...common.schema_step import BaseStepParams


class CompressJpgParams(BaseStepParams):
    """Parameters for the JPEG recompression step.

    Attributes:
        quality: JPEG quality, 0 (lowest) to 100 (best). Checked by the
                 compressor after the source has been decoded.
    """

    quality: int = Field(description="JPEG quality (0-100)")
