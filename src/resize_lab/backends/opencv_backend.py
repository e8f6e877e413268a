"""OpenCV backend: fast bitmap codec working on BGRA numpy arrays."""

from typing import override

import cv2
import numpy as np
from numpy.typing import NDArray

from .base import ImageBackend

BGRA = NDArray[np.uint8]


class OpenCVBackend(ImageBackend[BGRA]):
    """Bitmaps are (H, W, 4) uint8 arrays in OpenCV's BGRA channel order."""

    @property
    @override
    def name(self) -> str:
        return "opencv"

    @override
    def decode(self, data: bytes) -> BGRA:
        raw = np.frombuffer(data, dtype=np.uint8)
        img = cv2.imdecode(raw, cv2.IMREAD_UNCHANGED)
        if img is None:
            raise ValueError("OpenCV could not decode image data")

        # 16-bit PNG/TIFF
        if img.dtype == np.uint16:
            img = (img >> 8).astype(np.uint8)

        if img.ndim == 2:
            return cv2.cvtColor(img, cv2.COLOR_GRAY2BGRA)
        if img.shape[2] == 3:
            return cv2.cvtColor(img, cv2.COLOR_BGR2BGRA)
        return img

    @override
    def size(self, bitmap: BGRA) -> tuple[int, int]:
        height, width = bitmap.shape[:2]
        return width, height

    @override
    def resize(self, bitmap: BGRA, width: int, height: int) -> BGRA:
        src_width, src_height = self.size(bitmap)
        shrinking = width < src_width and height < src_height
        interpolation = cv2.INTER_AREA if shrinking else cv2.INTER_CUBIC
        return cv2.resize(bitmap, (width, height), interpolation=interpolation)

    @override
    def canvas(self, width: int, height: int) -> BGRA:
        return np.zeros((height, width, 4), dtype=np.uint8)

    @override
    def composite(self, background: BGRA, foreground: BGRA, x: int, y: int) -> BGRA:
        result = background.copy()
        fg_height, fg_width = foreground.shape[:2]
        region = result[y : y + fg_height, x : x + fg_width]
        if region.shape[:2] != (fg_height, fg_width):
            raise ValueError(
                f"Foreground {fg_width}x{fg_height} at ({x}, {y}) does not fit "
                + f"background {result.shape[1]}x{result.shape[0]}"
            )

        src = foreground.astype(np.float32) / 255.0
        dst = region.astype(np.float32) / 255.0
        src_alpha = src[..., 3:4]
        dst_alpha = dst[..., 3:4]

        # Porter-Duff source-over
        out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
        out_color = src[..., :3] * src_alpha + dst[..., :3] * dst_alpha * (1.0 - src_alpha)
        out_color = np.divide(
            out_color,
            out_alpha,
            out=np.zeros_like(out_color),
            where=out_alpha > 0,
        )

        blended = np.concatenate([out_color, out_alpha], axis=2)
        region[...] = np.clip(blended * 255.0 + 0.5, 0, 255).astype(np.uint8)
        return result

    @override
    def encode(self, bitmap: BGRA, format: str = "png") -> bytes:
        ok, buffer = cv2.imencode(f".{format.lower()}", bitmap)
        if not ok:
            raise ValueError(f"OpenCV could not encode image as {format}")
        return buffer.tobytes()

    @override
    def to_pixels(self, bitmap: BGRA) -> NDArray[np.uint8]:
        return cv2.cvtColor(bitmap, cv2.COLOR_BGRA2RGBA)

    @override
    def from_pixels(self, pixels: NDArray[np.uint8]) -> BGRA:
        return cv2.cvtColor(np.ascontiguousarray(pixels, dtype=np.uint8), cv2.COLOR_RGBA2BGRA)
