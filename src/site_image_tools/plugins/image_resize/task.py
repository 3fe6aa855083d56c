"""Image resize / scale step implementations."""

from typing_extensions import override

from ...common.build_step import BuildStep
from ...common.item import SourceItem
from .algo.image_resize import resize_image, scale_image
from .schema import ImageResizeParams, ImageScaleParams


class ImageResizeStep(BuildStep[ImageResizeParams]):
    """Resize items to fixed dimensions; aspect ratio may change."""

    schema: type[ImageResizeParams] = ImageResizeParams

    @property
    @override
    def step_type(self) -> str:
        return "image_resize"

    @override
    def transform(self, params: ImageResizeParams, item: SourceItem) -> bytes:
        return resize_image(params.width, params.height, item.body, item.extension)


class ImageScaleStep(BuildStep[ImageScaleParams]):
    """Scale items to fit within a box, preserving aspect ratio."""

    schema: type[ImageScaleParams] = ImageScaleParams

    @property
    @override
    def step_type(self) -> str:
        return "image_scale"

    @override
    def transform(self, params: ImageScaleParams, item: SourceItem) -> bytes:
        return scale_image(params.max_width, params.max_height, item.body, item.extension)
