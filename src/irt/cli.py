"""
cli.py - Command-line entrypoint.
Usage examples:
  irt -w 80% photo.jpg
  irt -h 200px -o ./small.png photo.png
  irt -l 1024px photos/
"""

import argparse
import asyncio
import os
import sys

from loguru import logger
from pydantic import ValidationError

from .batch import DEFAULT_MAX_WORKERS, BatchResizer
from .common.errors import IrtError, UsageError
from .config import ResizeConfig
from .plugins.image_resize.task import ImageResizeTask

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

LOG_FORMAT = "{time:YYYY/MM/DD HH:mm:ss} | {level} | {message}"
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: str) -> None:
    logger.remove()
    _ = logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    # -h is the height flag, so help lives on --help only
    parser = argparse.ArgumentParser(
        prog="irt",
        description="Resize an image file, or every image in a directory ending with '/'.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-w", "--width", default="", help="width,  example: 80%%, 200px")
    parser.add_argument("-h", "--height", default="", help="height, example: 80%%, 100px")
    parser.add_argument(
        "-l", "--length", default="", help="length of the longer edge (directory mode), example: 80%%, 100px"
    )
    parser.add_argument(
        "-o", "--output", default="", help="output file name and path, example: ./out.jpg"
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help=f"files resized at the same time in directory mode (default: $IRT_JOBS or {DEFAULT_MAX_WORKERS})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="log level (default: $IRT_LOG_LEVEL or INFO)",
    )
    parser.add_argument("input", nargs="?", default="", help="input file, or directory ending with '/'")
    return parser


def resolve_log_level(cli_value: str | None) -> str:
    """Return the log level from ``--log-level``, else ``IRT_LOG_LEVEL``, else INFO.

    Raises:
        UsageError: If the environment names an unknown level
    """
    if cli_value is not None:
        return cli_value

    level = os.environ.get("IRT_LOG_LEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        raise UsageError(
            f"invalid IRT_LOG_LEVEL '{level}': expected one of {', '.join(LOG_LEVELS)}"
        )
    return level


def resolve_jobs(cli_value: int | None) -> int:
    """Return the worker count from ``--jobs``, else ``IRT_JOBS``, else the CPU count.

    Raises:
        UsageError: If ``IRT_JOBS`` is not an integer
    """
    if cli_value is not None:
        return cli_value

    raw = os.environ.get("IRT_JOBS")
    if raw is None:
        return DEFAULT_MAX_WORKERS
    try:
        return int(raw)
    except ValueError:
        raise UsageError(f"invalid IRT_JOBS '{raw}': expected a positive integer") from None


def load_config(args: argparse.Namespace) -> ResizeConfig:
    """Build the run configuration.

    Raises:
        UsageError: If the options are missing, conflicting or malformed
    """
    jobs = resolve_jobs(args.jobs)
    try:
        return ResizeConfig(
            input_path=args.input,
            width=args.width,
            height=args.height,
            length=args.length,
            output_path=args.output,
            jobs=jobs,
        )
    except ValidationError as exc:
        messages = "; ".join(str(error["msg"]) for error in exc.errors())
        raise UsageError(messages) from exc


def run_single(config: ResizeConfig) -> int:
    task = ImageResizeTask()
    try:
        _ = asyncio.run(task.run(config.single_file_params()))
    except (IrtError, OSError) as exc:
        logger.error(str(exc))
        return EXIT_FAILURE
    return EXIT_OK


def run_batch(config: ResizeConfig) -> int:
    if config.length is None:
        raise UsageError("Please input length")

    resizer = BatchResizer(max_workers=config.jobs)
    try:
        summary = asyncio.run(resizer.run(config.input_path, config.length))
    except OSError as exc:
        logger.error(str(exc))
        return EXIT_FAILURE

    for record in summary.failures:
        logger.error(f"failed: {record.input_path}: {record.error_message}")

    return EXIT_OK if summary.failed == 0 else EXIT_FAILURE


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        log_level = resolve_log_level(args.log_level)
    except UsageError as exc:
        configure_logging("INFO")
        logger.error(str(exc))
        return EXIT_USAGE

    configure_logging(log_level)

    logger.info("image resize start!")

    try:
        config = load_config(args)
    except UsageError as exc:
        logger.error(str(exc))
        return EXIT_USAGE

    if config.is_batch:
        return run_batch(config)
    return run_single(config)


if __name__ == "__main__":
    sys.exit(main())
