"""Letterbox sizing computation (pure, no image library involved)."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .errors import ImageTooSmallError, InvalidParameterError


class ResizePlan(BaseModel):
    """Final scaled size of an image and where to place it in the target box."""

    final_width: int = Field(ge=1)
    final_height: int = Field(ge=1)
    offset_x: int = Field(ge=0)
    offset_y: int = Field(ge=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def fills_target(self, target_width: int, target_height: int) -> bool:
        """True when the resized image covers the whole box and needs no canvas."""
        return self.final_width == target_width and self.final_height == target_height


def plan(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
    ratio: float = 1.0,
    min_width: int = 0,
    min_height: int = 0,
) -> ResizePlan:
    """
    Compute the letterbox plan for fitting a source image into a target box.

    The scale is the largest uniform factor that keeps the image inside the
    box, multiplied by ``ratio`` (an extra zoom-out factor). Final sizes are
    truncated toward zero and the image is centered.

    Args:
        source_width: Decoded image width
        source_height: Decoded image height
        target_width: Bounding box width
        target_height: Bounding box height
        ratio: Extra zoom-out factor in (0, 1]. Values above 1 are refused
            because the scaled image would overflow the target box
        min_width: Smallest accepted source width
        min_height: Smallest accepted source height

    Returns:
        ResizePlan with final size and centering offsets

    Raises:
        InvalidParameterError: If dimensions or ratio are out of range
        ImageTooSmallError: If the source is below the minimum size
    """
    if target_width <= 0 or target_height <= 0:
        raise InvalidParameterError(
            f"Target dimensions must be positive, got {target_width}x{target_height}"
        )
    if source_width <= 0 or source_height <= 0:
        raise InvalidParameterError(
            f"Source dimensions must be positive, got {source_width}x{source_height}"
        )
    if not 0 < ratio <= 1:
        raise InvalidParameterError(
            f"Resize ratio must be in (0, 1], got {ratio}; "
            + "a ratio above 1 would overflow the target box"
        )

    if source_width < min_width:
        raise ImageTooSmallError("Width", source_width)
    if source_height < min_height:
        raise ImageTooSmallError("Height", source_height)

    nominal_ratio = min(target_width / source_width, target_height / source_height)
    adjust_ratio = nominal_ratio * ratio

    final_width = int(source_width * adjust_ratio)
    final_height = int(source_height * adjust_ratio)

    if final_width == 0 or final_height == 0:
        raise InvalidParameterError(
            f"Scaled size {final_width}x{final_height} is empty "
            + f"(source {source_width}x{source_height}, ratio {adjust_ratio:.6f})"
        )

    return ResizePlan(
        final_width=final_width,
        final_height=final_height,
        offset_x=(target_width - final_width) // 2,
        offset_y=(target_height - final_height) // 2,
    )
