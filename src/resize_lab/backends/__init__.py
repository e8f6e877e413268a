"""Image backends - one interchangeable strategy per image library."""

from importlib.metadata import entry_points
from typing import Any, cast

from ..common.errors import InvalidParameterError
from .base import ImageBackend
from .opencv_backend import OpenCVBackend
from .pillow_backend import PillowBackend
from .pillow_draft_backend import PillowDraftBackend

BUILTIN_BACKENDS: dict[str, type[ImageBackend[Any]]] = {
    "pillow": PillowBackend,
    "opencv": OpenCVBackend,
    "pillow_draft": PillowDraftBackend,
}


def get_backend_registry() -> dict[str, type[ImageBackend[Any]]]:
    """Built-in backends plus those registered by other distributions.

    Discovers backends from the "resize_lab.backends" entry-point group.
    Entry points may not shadow a built-in name.

    Raises:
        RuntimeError: If a plugin fails to load (missing dependency, etc.)
    """
    registry = dict(BUILTIN_BACKENDS)

    for ep in entry_points(group="resize_lab.backends"):
        if ep.name in BUILTIN_BACKENDS:
            continue
        try:
            registry[ep.name] = cast(type[ImageBackend[Any]], ep.load())
        except Exception as e:
            raise RuntimeError(f"Failed to load backend '{ep.name}': {e}") from e

    return registry


def available_backends() -> list[str]:
    return sorted(get_backend_registry())


def get_backend(name: str) -> ImageBackend[Any]:
    registry = get_backend_registry()
    try:
        backend_class = registry[name]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown backend '{name}'. Available: {', '.join(sorted(registry))}"
        ) from None
    return backend_class()


__all__ = [
    "BUILTIN_BACKENDS",
    "ImageBackend",
    "OpenCVBackend",
    "PillowBackend",
    "PillowDraftBackend",
    "available_backends",
    "get_backend",
    "get_backend_registry",
]
