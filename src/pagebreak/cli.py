"""Command-line interface for pagebreak."""

import argparse
import logging
import sys
import time
from pathlib import Path

from pagebreak.batch import DEFAULT_PATTERN, BatchDriver
from pagebreak.exceptions import SourceNotFoundError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def run(args: argparse.Namespace) -> int:
    """Paginate the source directory into the output directory.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    started = time.perf_counter()
    driver = BatchDriver(
        working_directory=Path.cwd(),
        source=args.source,
        output=args.output,
        pattern=args.pattern,
        workers=args.workers,
    )

    try:
        report = driver.run()
    except SourceNotFoundError as e:
        logger.error(f"Pagebreak error: {e.message}")
        return 1

    logger.info(f"Paginated {len(report.files)} files into {report.page_count} pages")
    logger.info(f"  Copied: {report.copied}")
    logger.info(f"  Output: {report.output}")

    if report.failed:
        logger.warning(f"  Failed: {len(report.failed)}")
        for file_report in report.failed:
            for error in file_report.errors:
                logger.warning(f"    - {file_report.source_path}: {error}")

    logger.info(f"Finished in {time.perf_counter() - started:.3f} seconds")
    return 1 if report.failed else 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="pagebreak",
        description="Framework agnostic website pagination",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-s", "--source",
        type=Path,
        default=Path("."),
        metavar="PATH",
        help="Source directory of the website to paginate (default: .)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        metavar="PATH",
        help="Output directory; may be the source directory to paginate in place",
    )
    parser.add_argument(
        "--pattern",
        default=DEFAULT_PATTERN,
        help=f"Glob pattern for HTML files (default: {DEFAULT_PATTERN})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Maximum number of worker threads",
    )

    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
