"""Common module - sizing, blur, schemas and errors."""

from .blur import box_blur
from .errors import CodecError, ErrorKind, ImageTooSmallError, InvalidParameterError, ResizeError
from .schemas import ResizeConfig, ResizeOutcome
from .sizing import ResizePlan, plan

__all__ = [
    "box_blur",
    "plan",
    "ResizePlan",
    "ResizeConfig",
    "ResizeOutcome",
    "ErrorKind",
    "ResizeError",
    "ImageTooSmallError",
    "InvalidParameterError",
    "CodecError",
]
