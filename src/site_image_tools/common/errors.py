"""Error taxonomy for image build steps."""

from typing import ClassVar


class ImageStepError(Exception):
    """Base class for transformation errors.

    `kind` is a stable identifier callers can switch on without
    inspecting the exception type.
    """

    kind: ClassVar[str] = "image_step_error"


class DecodeError(ImageStepError):
    """Input bytes are not a valid or supported image."""

    kind: ClassVar[str] = "decode_error"


class UnsupportedFormatError(ImageStepError):
    kind: ClassVar[str] = "unsupported_format"

    def __init__(self, extension: str):
        self.extension: str = extension
        super().__init__(f"Unsupported format: {extension!r}")


class InvalidParameterError(ImageStepError):
    kind: ClassVar[str] = "invalid_parameter"

    def __init__(self, name: str, value: object, reason: str):
        self.name: str = name
        self.value: object = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")
