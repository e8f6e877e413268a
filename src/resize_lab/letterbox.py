"""Letterbox resize pipeline: decode, plan, resize, composite, encode."""

from typing import Any, TypeVar

from loguru import logger

from .backends.base import ImageBackend
from .common.blur import box_blur
from .common.errors import CodecError, InvalidParameterError
from .common.schemas import BackgroundMode
from .common.sizing import ResizePlan, plan
from .utils.profiling import timed

B = TypeVar("B")


def blurred_background(
    backend: ImageBackend[B],
    bitmap: B,
    width: int,
    height: int,
    block_size: int,
) -> B:
    """Stretch the source over the whole box and block-blur it."""
    stretched = backend.resize(bitmap, width, height)
    pixels = box_blur(backend.to_pixels(stretched), block_size)
    return backend.from_pixels(pixels)


def compose(
    backend: ImageBackend[B],
    source: B,
    resized: B,
    resize_plan: ResizePlan,
    target_width: int,
    target_height: int,
    background: BackgroundMode = "transparent",
    blur_block_size: int = 10,
) -> B:
    """Place the resized bitmap centered on a target-sized background."""
    if background == "blur":
        canvas = blurred_background(backend, source, target_width, target_height, blur_block_size)
    elif background == "transparent":
        canvas = backend.canvas(target_width, target_height)
    else:
        raise InvalidParameterError(f"Unknown background mode: {background}")

    return backend.composite(canvas, resized, resize_plan.offset_x, resize_plan.offset_y)


@timed
def letterbox_resize(
    data: bytes,
    *,
    backend: ImageBackend[Any],
    target_width: int,
    target_height: int,
    resize_ratio: float = 1.0,
    min_width: int = 0,
    min_height: int = 0,
    background: BackgroundMode = "transparent",
    blur_block_size: int = 10,
) -> bytes:
    """
    Resize encoded image bytes into a letterboxed PNG of the target size.

    Framework-agnostic, single-image operation.

    Args:
        data: Encoded source image (JPEG, PNG, ...)
        backend: Image library strategy doing the pixel work
        target_width: Output width
        target_height: Output height
        resize_ratio: Extra scale factor in (0, 1]
        min_width: Smallest accepted source width
        min_height: Smallest accepted source height
        background: Letterbox fill, "transparent" or "blur"
        blur_block_size: Block size of the background blur

    Returns:
        PNG bytes of exactly target_width x target_height (or the resized
        image alone when it already fills the box)

    Raises:
        ImageTooSmallError: If the source is below the minimum size
        InvalidParameterError: If sizes, ratio or blur settings are invalid
        CodecError: If the backend cannot decode, resize or encode the image
    """
    if background == "blur" and blur_block_size <= 0:
        raise InvalidParameterError(f"Block size must be positive, got {blur_block_size}")

    try:
        source = backend.decode(data)
        source_width, source_height = backend.size(source)
    except Exception as exc:
        raise CodecError(f"{backend.name} could not decode image: {exc}") from exc

    resize_plan = plan(
        source_width,
        source_height,
        target_width,
        target_height,
        ratio=resize_ratio,
        min_width=min_width,
        min_height=min_height,
    )
    logger.debug(
        f"{backend.name}: {source_width}x{source_height} -> "
        + f"{resize_plan.final_width}x{resize_plan.final_height} "
        + f"at ({resize_plan.offset_x}, {resize_plan.offset_y})"
    )

    # Lazy backends decode pixels here, so truncated data can still fail
    try:
        resized = backend.resize(source, resize_plan.final_width, resize_plan.final_height)
    except Exception as exc:
        raise CodecError(f"{backend.name} could not resize image: {exc}") from exc

    if resize_plan.fills_target(target_width, target_height):
        final = resized
    else:
        final = compose(
            backend,
            source,
            resized,
            resize_plan,
            target_width,
            target_height,
            background=background,
            blur_block_size=blur_block_size,
        )

    try:
        return backend.encode(final, "png")
    except Exception as exc:
        raise CodecError(f"{backend.name} could not encode PNG: {exc}") from exc
