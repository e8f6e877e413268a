"""Pillow draft backend: a decode-time scaling pipeline.

JPEG sources are decoded at a reduced DCT scale (1/2, 1/4 or 1/8) that is
still at least as large as the requested size, then finished with a
reducing-gap Lanczos resize. Other formats fall back to the plain reducing
resize. This trades a little precision for much less decoding work on large
photos.
"""

from io import BytesIO
from typing import override

from PIL import Image

from .pillow_backend import PillowBackend


class PillowDraftBackend(PillowBackend):
    reducing_gap: float = 3.0

    @property
    @override
    def name(self) -> str:
        return "pillow_draft"

    @override
    def decode(self, data: bytes) -> Image.Image:
        # Left unloaded so resize() can still pick a draft scale
        img = Image.open(BytesIO(data))
        img.verify()
        return Image.open(BytesIO(data))

    @override
    def resize(self, bitmap: Image.Image, width: int, height: int) -> Image.Image:
        # draft() only has an effect before the first load and mutates the
        # source in place, the same way Image.thumbnail() does
        if bitmap.format == "JPEG":
            _ = bitmap.draft("RGB", (width, height))
        bitmap.load()

        resized = bitmap.resize(
            (width, height),
            self.resample,
            reducing_gap=self.reducing_gap,
        )
        return resized.convert("RGBA")
