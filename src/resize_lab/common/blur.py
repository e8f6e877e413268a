"""Naive block-averaging blur used for letterbox background fill."""

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidParameterError


def box_blur(buffer: NDArray[np.uint8], block_size: int) -> NDArray[np.uint8]:
    """
    Blur an RGB(A) pixel buffer in place by block averaging.

    For every pixel (x, y) the R, G, B channels of the block
    [x, x + block_size) x [y, y + block_size), clipped to the buffer, are
    averaged and the mean is written back to every pixel of that block.
    Blocks are visited column by column, so later blocks read values that
    earlier blocks already overwrote. Alpha is left untouched.

    Args:
        buffer: Array of shape (H, W, 3) or (H, W, 4), dtype uint8
        block_size: Side of the averaging block in pixels

    Returns:
        The same buffer, blurred

    Raises:
        InvalidParameterError: If block_size is not positive or the buffer
            has the wrong shape
    """
    if block_size <= 0:
        raise InvalidParameterError(f"Block size must be positive, got {block_size}")
    if buffer.ndim != 3 or buffer.shape[2] not in (3, 4):
        raise InvalidParameterError(
            f"Expected an (H, W, 3) or (H, W, 4) pixel buffer, got shape {buffer.shape}"
        )

    height, width = buffer.shape[:2]

    for x in range(width):
        for y in range(height):
            # Slicing clips the block at the right and bottom edges
            block = buffer[y : y + block_size, x : x + block_size, :3]
            count = block.shape[0] * block.shape[1]

            totals = block.reshape(-1, 3).sum(axis=0, dtype=np.uint64)
            block[...] = (totals // count).astype(np.uint8)

    return buffer
