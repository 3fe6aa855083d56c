"""JPEG compression step implementation."""

from typing_extensions import override

from ...common.build_step import BuildStep
from ...common.item import SourceItem
from .algo.compress_jpg import compress_jpg
from .schema import CompressJpgParams


class CompressJpgStep(BuildStep[CompressJpgParams]):
    """Re-encode JPEG items at a lower quality. Source items are not modified."""

    schema: type[CompressJpgParams] = CompressJpgParams

    @property
    @override
    def step_type(self) -> str:
        return "compress_jpg"

    @override
    def transform(self, params: CompressJpgParams, item: SourceItem) -> bytes:
        return compress_jpg(params.quality, item.body)
