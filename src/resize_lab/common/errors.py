from enum import StrEnum
from typing import override


class ErrorKind(StrEnum):
    IMAGE_TOO_SMALL = "image_too_small"
    INVALID_PARAMETER = "invalid_parameter"
    CODEC_ERROR = "codec_error"


class ResizeError(Exception):
    """Base class for failures raised by the resize pipeline."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(self.message)


class ImageTooSmallError(ResizeError):
    """
    Raised when a source image is below the configured minimum size.

    Carries the name of the violating dimension ("Width" or "Height")
    and its actual value so callers can report or skip the image.
    """

    kind: ErrorKind = ErrorKind.IMAGE_TOO_SMALL

    def __init__(self, dimension: str, value: int):
        self.dimension: str = dimension
        self.value: int = value
        super().__init__("Your image is smaller than the standard size.")

    @override
    def __str__(self):
        return f"{self.message} ({self.dimension}: {self.value})"


class InvalidParameterError(ResizeError, ValueError):
    kind: ErrorKind = ErrorKind.INVALID_PARAMETER


class CodecError(ResizeError):
    """Decode or encode failure reported by an image backend library."""

    kind: ErrorKind = ErrorKind.CODEC_ERROR
