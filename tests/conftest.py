"""Test configuration and fixtures for resize_lab.

This module provides:
- Synthetic image generators (no external test media needed)
- Encoded image bytes fixtures
- A populated images directory for batch and CLI tests
"""

import sys
from io import BytesIO
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

# ============================================================================
# Helpers
# ============================================================================


def make_image(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Gradient image with a grid and a circle, like a real photo has edges."""
    img = Image.new(mode, (width, height), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width // 4, height // 4, 3 * width // 4, 3 * height // 4],
        fill=(200, 100, 100),
    )
    return img


def encode_image(img: Image.Image, format: str) -> bytes:
    buffer = BytesIO()
    if format == "JPEG":
        img.convert("RGB").save(buffer, format, quality=85)
    else:
        img.save(buffer, format)
    return buffer.getvalue()


def decode_png(data: bytes) -> Image.Image:
    with Image.open(BytesIO(data)) as img:
        assert img.format == "PNG"
        return img.convert("RGBA")


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture(autouse=True)
def restore_logging():
    """Point loguru back at stderr after tests that reconfigure it via the CLI."""
    yield
    logger.remove()
    _ = logger.add(sys.stderr)


@pytest.fixture
def landscape_jpeg() -> bytes:
    """800x600 JPEG."""
    return encode_image(make_image(800, 600), "JPEG")


@pytest.fixture
def square_png() -> bytes:
    """800x800 PNG, fills a square box exactly."""
    return encode_image(make_image(800, 800), "PNG")


@pytest.fixture
def small_png() -> bytes:
    """300x300 PNG, below the 400x400 standard size."""
    return encode_image(make_image(300, 300), "PNG")


@pytest.fixture
def truncated_jpeg(landscape_jpeg: bytes) -> bytes:
    """800x600 JPEG cut off halfway through its scan data.

    The header is intact, so the image opens and reports its size; only
    loading the pixels fails.
    """
    return landscape_jpeg[: len(landscape_jpeg) // 2]


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    """Directory mixing valid, too-small, non-image and already-resized files."""
    directory = tmp_path / "Images"
    directory.mkdir()

    _ = (directory / "landscape.jpg").write_bytes(encode_image(make_image(800, 600), "JPEG"))
    _ = (directory / "portrait.png").write_bytes(encode_image(make_image(600, 900), "PNG"))
    _ = (directory / "small.png").write_bytes(encode_image(make_image(300, 300), "PNG"))
    _ = (directory / "notes.txt").write_text("not an image", encoding="utf-8")
    _ = (directory / "Resize-old.png").write_bytes(encode_image(make_image(400, 400), "PNG"))

    return directory


@pytest.fixture
def clean_images_dir(tmp_path: Path) -> Path:
    """Directory holding only resizable images."""
    directory = tmp_path / "CleanImages"
    directory.mkdir()

    _ = (directory / "a.jpg").write_bytes(encode_image(make_image(800, 600), "JPEG"))
    _ = (directory / "b.png").write_bytes(encode_image(make_image(500, 700), "PNG"))

    return directory


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir
