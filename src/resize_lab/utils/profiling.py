"""Timing helpers used to compare image backends."""

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


class Stopwatch:
    def __init__(self) -> None:
        self.start: float = time.perf_counter()
        self.end: float | None = None

    @property
    def elapsed(self) -> float:
        end = self.end if self.end is not None else time.perf_counter()
        return end - self.start


@contextmanager
def stopwatch() -> Iterator[Stopwatch]:
    """Measure the wall time of a block; read ``.elapsed`` inside or after it."""
    watch = Stopwatch()
    try:
        yield watch
    finally:
        watch.end = time.perf_counter()


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to measure and log execution time of algorithm functions.

    Logs the function name and execution time at INFO level.

    Usage:
        @timed
        def letterbox_resize(data, ...):
            # ... processing ...
            return result
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with stopwatch() as watch:
            try:
                return func(*args, **kwargs)
            finally:
                logger.info(f"[PROFILE] {func.__qualname__} took {watch.elapsed:.3f}s")

    return wrapper
