"""Command line entrypoint for building slideshows."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from slideshow.app_logging import configure_logging
from slideshow.config import Settings
from slideshow.containers import build_container
from slideshow.errors import ConfigurationError

_logger = logging.getLogger(__name__)

EXIT_FAILED_DATASET = 1
EXIT_BAD_CONFIGURATION = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slideshow",
        description="Assemble ordered slideshows from tagged photo files.",
    )
    parser.add_argument(
        "datasets",
        nargs="*",
        help="Input base names to process (default: all known datasets)",
    )
    parser.add_argument("--input-dir", type=Path, help="Directory holding <name>.txt")
    parser.add_argument(
        "--output-dir", type=Path, help="Directory for <name>_result.txt files"
    )
    parser.add_argument(
        "--window-cap", type=int, help="Odd matcher window size, at least 3"
    )
    parser.add_argument("--workers", type=int, help="Maximum parallel files")
    parser.add_argument(
        "--executor",
        choices=("process", "thread"),
        help="Worker pool used to process files in parallel",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the run report as JSON"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.datasets:
        overrides["datasets"] = args.datasets
    if args.input_dir is not None:
        overrides["input_dir"] = args.input_dir
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.window_cap is not None:
        overrides["window_cap"] = args.window_cap
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.executor is not None:
        overrides["executor"] = args.executor
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the batch and return a process exit code."""
    args = _build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        settings = _settings_from_args(args)
        container = build_container(settings)
    except (ConfigurationError, ValidationError) as exc:
        _logger.error("Invalid configuration: %s", exc)
        return EXIT_BAD_CONFIGURATION

    batch = container.runner.run(settings.datasets)

    if args.json:
        print(batch.model_dump_json(indent=2))
    else:
        for report in batch.reports:
            print(report.summary())

    if batch.failed:
        return EXIT_FAILED_DATASET
    return 0


if __name__ == "__main__":
    sys.exit(main())
