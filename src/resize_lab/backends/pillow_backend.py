"""Pillow backend: general-purpose image manipulation."""

from io import BytesIO
from typing import override

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .base import ImageBackend


class PillowBackend(ImageBackend[Image.Image]):
    """Resizes with Lanczos resampling and composites with alpha blending."""

    resample: Image.Resampling = Image.Resampling.LANCZOS

    @property
    @override
    def name(self) -> str:
        return "pillow"

    @override
    def decode(self, data: bytes) -> Image.Image:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return img.convert("RGBA")

    @override
    def size(self, bitmap: Image.Image) -> tuple[int, int]:
        return bitmap.size

    @override
    def resize(self, bitmap: Image.Image, width: int, height: int) -> Image.Image:
        return bitmap.resize((width, height), self.resample)

    @override
    def canvas(self, width: int, height: int) -> Image.Image:
        return Image.new("RGBA", (width, height), (0, 0, 0, 0))

    @override
    def composite(
        self, background: Image.Image, foreground: Image.Image, x: int, y: int
    ) -> Image.Image:
        result = background.copy()
        result.alpha_composite(foreground.convert("RGBA"), dest=(x, y))
        return result

    @override
    def encode(self, bitmap: Image.Image, format: str = "png") -> bytes:
        buffer = BytesIO()
        bitmap.save(buffer, format=format.upper())
        return buffer.getvalue()

    @override
    def to_pixels(self, bitmap: Image.Image) -> NDArray[np.uint8]:
        return np.array(bitmap.convert("RGBA"), dtype=np.uint8)

    @override
    def from_pixels(self, pixels: NDArray[np.uint8]) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).convert("RGBA")
