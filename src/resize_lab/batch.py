"""Batch driver - resizes every image of a directory."""

from pathlib import Path
from typing import Any

from loguru import logger

from .backends import get_backend
from .backends.base import ImageBackend
from .common.errors import ImageTooSmallError, ResizeError
from .common.schemas import ResizeConfig, ResizeOutcome
from .letterbox import letterbox_resize
from .utils.profiling import stopwatch


def list_source_images(images_directory: Path, output_prefix: str) -> list[Path]:
    """Regular files of the directory, sorted, minus earlier resize outputs."""
    if not images_directory.is_dir():
        raise FileNotFoundError(f"Images directory not found: {images_directory}")

    return sorted(
        path
        for path in images_directory.iterdir()
        if path.is_file() and not path.name.startswith(output_prefix)
    )


def output_path_for(source: Path, output_directory: Path, output_prefix: str) -> Path:
    return output_directory / f"{output_prefix}{source.stem}.png"


def resize_file(
    source: Path,
    config: ResizeConfig,
    backend: ImageBackend[Any],
) -> ResizeOutcome:
    """Resize one file and report what happened instead of raising.

    Only resize errors are turned into outcomes. File system errors and
    anything unexpected propagate to the caller.
    """
    output_path = output_path_for(
        source, config.resolved_output_directory, config.output_prefix
    )

    with stopwatch() as watch:
        try:
            png = letterbox_resize(
                source.read_bytes(),
                backend=backend,
                target_width=config.target_width,
                target_height=config.target_height,
                resize_ratio=config.resize_ratio,
                min_width=config.min_width,
                min_height=config.min_height,
                background=config.background,
                blur_block_size=config.blur_block_size,
            )
        except ImageTooSmallError as exc:
            logger.warning(f"Skipping {source.name}: {exc}")
            return ResizeOutcome(
                input_path=str(source),
                backend=backend.name,
                status="skipped",
                error_kind=exc.kind,
                error_message=str(exc),
                elapsed_seconds=watch.elapsed,
            )
        except ResizeError as exc:
            logger.error(f"Failed to resize {source.name}: {exc}")
            return ResizeOutcome(
                input_path=str(source),
                backend=backend.name,
                status="error",
                error_kind=exc.kind,
                error_message=str(exc),
                elapsed_seconds=watch.elapsed,
            )

        _ = output_path.write_bytes(png)

    logger.info(f"Resized {source.name} -> {output_path.name} ({watch.elapsed:.3f}s)")
    return ResizeOutcome(
        input_path=str(source),
        output_path=str(output_path),
        backend=backend.name,
        status="ok",
        elapsed_seconds=watch.elapsed,
    )


def resize_directory(
    config: ResizeConfig,
    backend: ImageBackend[Any] | None = None,
) -> list[ResizeOutcome]:
    """Resize every eligible image in config.images_directory.

    Args:
        config: Batch settings
        backend: Backend instance; resolved from config.backend if None

    Returns:
        One outcome per source file, in file name order

    Raises:
        FileNotFoundError: If the images directory does not exist
        InvalidParameterError: If config.backend is unknown
    """
    if backend is None:
        backend = get_backend(config.backend)

    sources = list_source_images(config.images_directory, config.output_prefix)
    output_directory = config.resolved_output_directory
    output_directory.mkdir(parents=True, exist_ok=True)

    logger.info(
        f"Resizing {len(sources)} file(s) from {config.images_directory} "
        + f"to {config.target_width}x{config.target_height} with {backend.name}"
    )

    outcomes = [resize_file(source, config, backend) for source in sources]

    summary = {status: 0 for status in ("ok", "skipped", "error")}
    for outcome in outcomes:
        summary[outcome.status] += 1
    logger.info(
        f"Finished {backend.name}: {summary['ok']} resized, "
        + f"{summary['skipped']} skipped, {summary['error']} failed"
    )

    return outcomes
