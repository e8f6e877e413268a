"""Public algorithm API for resize_lab.

This module exports the pure sizing and blur routines plus the letterbox
pipeline for direct use without the batch driver.

Example:
    Planning a letterbox::

        from resize_lab.algorithms import plan

        resize_plan = plan(800, 600, 400, 400)
        print(resize_plan.final_width, resize_plan.final_height)  # 400 300
        print(resize_plan.offset_x, resize_plan.offset_y)  # 0 50

    Resizing bytes with a chosen library::

        from resize_lab.algorithms import get_backend, letterbox_resize

        with open("photo.jpg", "rb") as f:
            png = letterbox_resize(
                f.read(),
                backend=get_backend("opencv"),
                target_width=400,
                target_height=400,
                background="blur",
            )

    Blurring a pixel buffer::

        import numpy as np
        from resize_lab.algorithms import box_blur

        pixels = np.zeros((120, 160, 3), dtype=np.uint8)
        box_blur(pixels, block_size=10)
"""

from .backends import available_backends, get_backend
from .common.blur import box_blur
from .common.sizing import ResizePlan, plan
from .letterbox import blurred_background, compose, letterbox_resize

__all__ = [
    "ResizePlan",
    "available_backends",
    "blurred_background",
    "box_blur",
    "compose",
    "get_backend",
    "letterbox_resize",
    "plan",
]
