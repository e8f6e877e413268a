"""Command line entry point: ``resize-lab``."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from .backends import available_backends
from .batch import resize_directory
from .common.errors import InvalidParameterError
from .common.schemas import ResizeConfig, ResizeOutcome

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str) -> None:
    logger.remove()
    _ = logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resize-lab",
        description="Letterbox every image of a directory into a fixed-size PNG.",
    )
    parser.add_argument("--config", type=Path, help="JSON config file (camelCase keys)")
    parser.add_argument("--images-dir", type=Path, dest="images_directory")
    parser.add_argument("--output-dir", type=Path, dest="output_directory")
    parser.add_argument("--width", type=int, dest="target_width")
    parser.add_argument("--height", type=int, dest="target_height")
    parser.add_argument("--ratio", type=float, dest="resize_ratio")
    parser.add_argument("--min-width", type=int, dest="min_width")
    parser.add_argument("--min-height", type=int, dest="min_height")

    backends = parser.add_mutually_exclusive_group()
    backends.add_argument("--backend", choices=available_backends())
    backends.add_argument(
        "--all-backends",
        action="store_true",
        help="run once per backend, each into its own output subdirectory",
    )

    parser.add_argument("--background", choices=["transparent", "blur"])
    parser.add_argument("--blur-block-size", type=int, dest="blur_block_size")
    parser.add_argument("--output-prefix", dest="output_prefix")
    parser.add_argument("--list-backends", action="store_true")
    parser.add_argument("--log-level", default="INFO")
    return parser


def load_config(args: argparse.Namespace) -> ResizeConfig:
    overrides: dict[str, object] = {
        key: getattr(args, key)
        for key in (
            "images_directory",
            "output_directory",
            "target_width",
            "target_height",
            "resize_ratio",
            "min_width",
            "min_height",
            "backend",
            "background",
            "blur_block_size",
            "output_prefix",
        )
    }

    if args.config is not None:
        return ResizeConfig.from_json_file(args.config, **overrides)

    return ResizeConfig.model_validate(
        {key: value for key, value in overrides.items() if value is not None}
    )


def run(config: ResizeConfig, all_backends: bool = False) -> list[ResizeOutcome]:
    if not all_backends:
        return resize_directory(config)

    outcomes: list[ResizeOutcome] = []
    for name in available_backends():
        backend_config = config.model_copy(
            update={
                "backend": name,
                "output_directory": config.resolved_output_directory / name,
            }
        )
        outcomes.extend(resize_directory(backend_config))
    return outcomes


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.list_backends:
        for name in available_backends():
            print(name)
        return 0

    try:
        config = load_config(args)
    except (ValueError, OSError) as exc:
        # pydantic ValidationError and malformed JSON are both ValueErrors
        parser.error(f"invalid configuration: {exc}")

    try:
        outcomes = run(config, all_backends=args.all_backends)
    except (FileNotFoundError, InvalidParameterError) as exc:
        logger.error(str(exc))
        return 2

    return 1 if any(outcome.status == "error" for outcome in outcomes) else 0


if __name__ == "__main__":
    sys.exit(main())
