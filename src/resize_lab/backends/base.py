"""ImageBackend - Abstract base class for image library strategies."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import numpy as np
from numpy.typing import NDArray

B = TypeVar("B")


class ImageBackend(ABC, Generic[B]):
    """
    Narrow capability interface over one image library.

    - B is the library's native bitmap type
    - Sizing and letterbox math stay outside the backend
    - Bitmaps returned by canvas() are RGBA and fully transparent
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def decode(self, data: bytes) -> B:
        """Decode encoded image bytes (JPEG, PNG, ...) into a bitmap."""
        ...

    @abstractmethod
    def size(self, bitmap: B) -> tuple[int, int]:
        """Return (width, height)."""
        ...

    @abstractmethod
    def resize(self, bitmap: B, width: int, height: int) -> B: ...

    @abstractmethod
    def canvas(self, width: int, height: int) -> B: ...

    @abstractmethod
    def composite(self, background: B, foreground: B, x: int, y: int) -> B:
        """Draw foreground over background with its top-left corner at (x, y)."""
        ...

    @abstractmethod
    def encode(self, bitmap: B, format: str = "png") -> bytes: ...

    @abstractmethod
    def to_pixels(self, bitmap: B) -> NDArray[np.uint8]:
        """Copy the bitmap into an (H, W, 4) RGBA array."""
        ...

    @abstractmethod
    def from_pixels(self, pixels: NDArray[np.uint8]) -> B:
        """Build a bitmap from an (H, W, 4) RGBA array."""
        ...
