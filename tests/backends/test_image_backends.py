"""Unit tests for the image backends and their registry.

Every built-in backend must honor the same capability contract, so most
tests run once per backend.
"""

from io import BytesIO
from typing import Any

import numpy as np
import pytest
from PIL import Image

from resize_lab.backends import (
    BUILTIN_BACKENDS,
    ImageBackend,
    OpenCVBackend,
    PillowBackend,
    PillowDraftBackend,
    available_backends,
    get_backend,
)
from resize_lab.common.errors import InvalidParameterError

BACKEND_NAMES = sorted(BUILTIN_BACKENDS)


@pytest.fixture(params=BACKEND_NAMES)
def backend(request: pytest.FixtureRequest) -> ImageBackend[Any]:
    return get_backend(request.param)


# ============================================================================
# REGISTRY TESTS
# ============================================================================


def test_builtin_backends_are_available():
    names = available_backends()

    assert {"pillow", "opencv", "pillow_draft"} <= set(names)
    assert names == sorted(names)


@pytest.mark.parametrize(
    "name, backend_class",
    [
        ("pillow", PillowBackend),
        ("opencv", OpenCVBackend),
        ("pillow_draft", PillowDraftBackend),
    ],
)
def test_get_backend_returns_instance(name: str, backend_class: type):
    backend = get_backend(name)

    assert isinstance(backend, backend_class)
    assert backend.name == name


def test_get_backend_unknown_name():
    with pytest.raises(InvalidParameterError, match="Unknown backend 'gdi'"):
        _ = get_backend("gdi")


def test_get_backend_returns_fresh_instances():
    assert get_backend("pillow") is not get_backend("pillow")


# ============================================================================
# CONTRACT TESTS
# ============================================================================


def test_decode_reports_size(backend: ImageBackend[Any], landscape_jpeg: bytes):
    bitmap = backend.decode(landscape_jpeg)

    assert backend.size(bitmap) == (800, 600)


def test_decode_png_with_alpha(backend: ImageBackend[Any]):
    buffer = BytesIO()
    Image.new("RGBA", (40, 30), (10, 20, 30, 128)).save(buffer, "PNG")

    bitmap = backend.decode(buffer.getvalue())
    pixels = backend.to_pixels(bitmap)

    assert backend.size(bitmap) == (40, 30)
    np.testing.assert_array_equal(pixels[0, 0], [10, 20, 30, 128])


def test_decode_greyscale(backend: ImageBackend[Any]):
    buffer = BytesIO()
    Image.new("L", (20, 10), 99).save(buffer, "PNG")

    pixels = backend.to_pixels(backend.decode(buffer.getvalue()))

    assert pixels.shape == (10, 20, 4)
    np.testing.assert_array_equal(pixels[5, 5], [99, 99, 99, 255])


def test_decode_garbage_raises(backend: ImageBackend[Any]):
    with pytest.raises(Exception):
        _ = backend.decode(b"definitely not an image")


def test_resize_exact_dimensions(backend: ImageBackend[Any], landscape_jpeg: bytes):
    bitmap = backend.decode(landscape_jpeg)

    resized = backend.resize(bitmap, 400, 300)

    assert backend.size(resized) == (400, 300)


def test_resize_can_enlarge(backend: ImageBackend[Any], small_png: bytes):
    bitmap = backend.decode(small_png)

    resized = backend.resize(bitmap, 450, 450)

    assert backend.size(resized) == (450, 450)


def test_canvas_is_transparent(backend: ImageBackend[Any]):
    canvas = backend.canvas(30, 20)

    pixels = backend.to_pixels(canvas)

    assert backend.size(canvas) == (30, 20)
    assert pixels.shape == (20, 30, 4)
    assert int(pixels[..., 3].max()) == 0


def test_composite_places_foreground(backend: ImageBackend[Any]):
    red = np.zeros((2, 3, 4), dtype=np.uint8)
    red[...] = (255, 0, 0, 255)
    foreground = backend.from_pixels(red)

    result = backend.composite(backend.canvas(6, 5), foreground, 2, 1)
    pixels = backend.to_pixels(result)

    np.testing.assert_array_equal(pixels[1:3, 2:5], red)
    np.testing.assert_array_equal(pixels[0, 0], [0, 0, 0, 0])
    np.testing.assert_array_equal(pixels[4, 5], [0, 0, 0, 0])
    np.testing.assert_array_equal(pixels[3, 2], [0, 0, 0, 0])


def test_composite_does_not_modify_background(backend: ImageBackend[Any]):
    background = backend.canvas(4, 4)
    foreground = backend.from_pixels(np.full((2, 2, 4), 255, dtype=np.uint8))

    _ = backend.composite(background, foreground, 0, 0)

    assert int(backend.to_pixels(background)[..., 3].max()) == 0


def test_composite_over_opaque_background(backend: ImageBackend[Any]):
    """A transparent foreground leaves an opaque background untouched."""
    blue = np.zeros((4, 4, 4), dtype=np.uint8)
    blue[...] = (0, 0, 255, 255)
    background = backend.from_pixels(blue)
    foreground = backend.from_pixels(np.zeros((2, 2, 4), dtype=np.uint8))

    result = backend.composite(background, foreground, 1, 1)

    np.testing.assert_array_equal(backend.to_pixels(result), blue)


def test_encode_png(backend: ImageBackend[Any], landscape_jpeg: bytes):
    bitmap = backend.resize(backend.decode(landscape_jpeg), 80, 60)

    data = backend.encode(bitmap, "png")

    with Image.open(BytesIO(data)) as img:
        assert img.format == "PNG"
        assert img.size == (80, 60)


def test_pixels_round_trip(backend: ImageBackend[Any]):
    rng = np.random.default_rng(3)
    pixels = rng.integers(0, 256, size=(7, 9, 4), dtype=np.uint8)

    bitmap = backend.from_pixels(pixels)

    assert backend.size(bitmap) == (9, 7)
    np.testing.assert_array_equal(backend.to_pixels(bitmap), pixels)


# ============================================================================
# BACKEND SPECIFICS
# ============================================================================


def test_opencv_bitmaps_are_bgra(landscape_jpeg: bytes):
    backend = OpenCVBackend()
    rgba = np.zeros((1, 1, 4), dtype=np.uint8)
    rgba[...] = (255, 0, 0, 255)

    bitmap = backend.from_pixels(rgba)

    np.testing.assert_array_equal(bitmap[0, 0], [0, 0, 255, 255])
    assert backend.decode(landscape_jpeg).shape == (600, 800, 4)


def test_opencv_composite_rejects_overflow():
    backend = OpenCVBackend()
    foreground = backend.canvas(5, 5)

    with pytest.raises(ValueError, match="does not fit"):
        _ = backend.composite(backend.canvas(4, 4), foreground, 0, 0)


def test_pillow_draft_decodes_lazily(landscape_jpeg: bytes):
    backend = PillowDraftBackend()

    bitmap = backend.decode(landscape_jpeg)

    # Size is known from the header; pixels are decoded by resize()
    assert bitmap.size == (800, 600)
    assert bitmap.format == "JPEG"

    resized = backend.resize(bitmap, 200, 150)
    assert resized.size == (200, 150)
    assert resized.mode == "RGBA"
