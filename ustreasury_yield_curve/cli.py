"""Command line entry point: download, then convert."""

import argparse
import logging
import sys
from pathlib import Path

from ustreasury_yield_curve.config import Settings
from ustreasury_yield_curve.data import YieldCurveConverter, YieldCurveDownloader


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Download U.S. Treasury yield curve rates and convert them to CSV"
    )
    parser.add_argument(
        "--start-year",
        type=int,
        help="First year to process (default: YIELD_CURVE_START_YEAR or 1990)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Output root; the CSV is written under alternative/ustreasury",
    )
    parser.add_argument(
        "--download-dir",
        type=Path,
        help="Directory for the raw yearly XML files",
    )
    parser.add_argument(
        "--skip-download",
        action="store_true",
        help="Convert previously downloaded files only",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args: argparse.Namespace, settings: Settings | None = None) -> int:
    """Run download and conversion. Returns the process exit code."""
    try:
        settings = settings or Settings()
        if args.start_year is not None:
            settings.start_year = args.start_year
        if args.output_dir is not None:
            settings.output_dir = args.output_dir
        if args.download_dir is not None:
            settings.download_dir = args.download_dir
        settings.validate()

        downloader = YieldCurveDownloader(settings.download_dir, settings)
    except Exception:
        logger.exception(f"The downloader {YieldCurveDownloader.__name__} failed to be constructed")
        return 1

    if not args.skip_download:
        try:
            with downloader:
                downloader.download(settings.start_year)
        except Exception:
            logger.exception(f"The downloader {YieldCurveDownloader.__name__} exited unexpectedly")
            return 1

    try:
        converter = YieldCurveConverter(settings.download_dir, settings.destination_dir)
        result = converter.convert(settings.start_year)
    except Exception:
        logger.exception(f"The converter {YieldCurveConverter.__name__} exited unexpectedly")
        return 1

    logger.info(
        f"Successfully completed download/conversion of U.S. Treasury yield curve data: "
        f"{result.row_count} rows in {result.path}"
    )
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
