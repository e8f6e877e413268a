"""resize_lab - Letterbox image resizing across several image libraries."""

from .backends import ImageBackend, available_backends, get_backend
from .batch import resize_directory
from .common.errors import CodecError, ErrorKind, ImageTooSmallError, InvalidParameterError, ResizeError
from .common.schemas import ResizeConfig, ResizeOutcome
from .common.sizing import ResizePlan
from .letterbox import letterbox_resize

__version__ = "0.1.0"

__all__ = [
    "ImageBackend",
    "ResizeConfig",
    "ResizeOutcome",
    "ResizePlan",
    "ErrorKind",
    "ResizeError",
    "ImageTooSmallError",
    "InvalidParameterError",
    "CodecError",
    "__version__",
    "available_backends",
    "get_backend",
    "letterbox_resize",
    "resize_directory",
]
