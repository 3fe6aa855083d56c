"""Common module - protocols, schemas, errors and base classes."""

from .build_step import BuildStep
from .errors import DecodeError, ImageStepError, InvalidParameterError, UnsupportedFormatError
from .image_format import ImageFormat, format_from_extension, lookup_format
from .item import (
    InvalidIdentifierError,
    ItemSink,
    ItemSource,
    ItemStoreError,
    OutputItem,
    SavedItem,
    SourceItem,
)
from .item_store_impl import LocalItemStore, OutputDirectoryCreationError
from .schema_step import BaseStepParams, StepResult, StepStatus

__all__ = [
    "BuildStep",
    "BaseStepParams",
    "StepResult",
    "StepStatus",
    "ImageStepError",
    "DecodeError",
    "UnsupportedFormatError",
    "InvalidParameterError",
    "ImageFormat",
    "lookup_format",
    "format_from_extension",
    "ItemSource",
    "ItemSink",
    "ItemStoreError",
    "InvalidIdentifierError",
    "OutputDirectoryCreationError",
    "LocalItemStore",
    "SourceItem",
    "OutputItem",
    "SavedItem",
]
