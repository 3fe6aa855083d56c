"""site_image_tools - image resize and JPEG compression steps for site builds."""

from .common.build_step import BuildStep
from .common.errors import (
    DecodeError,
    ImageStepError,
    InvalidParameterError,
    UnsupportedFormatError,
)
from .common.image_format import ImageFormat, format_from_extension, lookup_format
from .common.item import (
    InvalidIdentifierError,
    ItemSink,
    ItemSource,
    ItemStoreError,
    OutputItem,
    SavedItem,
    SourceItem,
)
from .common.item_store_impl import LocalItemStore, OutputDirectoryCreationError
from .common.schema_step import BaseStepParams, StepResult, StepStatus
from .pipeline import Pipeline, StepFailedError, UnknownStepError, get_step_registry
from .plugins.compress_jpg.algo.compress_jpg import JpgQuality, compress_jpg
from .plugins.image_resize.algo.image_resize import (
    Height,
    Width,
    resize,
    resize_image,
    scale,
    scale_dimensions,
    scale_image,
)

__version__ = "0.1.0"

__all__ = [
    "BaseStepParams",
    "BuildStep",
    "DecodeError",
    "Height",
    "ImageFormat",
    "ImageStepError",
    "InvalidIdentifierError",
    "InvalidParameterError",
    "ItemSink",
    "ItemSource",
    "ItemStoreError",
    "JpgQuality",
    "LocalItemStore",
    "OutputDirectoryCreationError",
    "OutputItem",
    "Pipeline",
    "SavedItem",
    "SourceItem",
    "StepFailedError",
    "StepResult",
    "StepStatus",
    "UnknownStepError",
    "UnsupportedFormatError",
    "Width",
    "__version__",
    "compress_jpg",
    "format_from_extension",
    "get_step_registry",
    "lookup_format",
    "resize",
    "resize_image",
    "scale",
    "scale_dimensions",
    "scale_image",
]
