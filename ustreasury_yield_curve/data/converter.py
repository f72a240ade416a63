"""Convert downloaded yearly feeds into a single sorted CSV file."""

import logging
import os
import tempfile
from datetime import date
from pathlib import Path

import pandas as pd

from ustreasury_yield_curve.config import OUTPUT_FILENAME, RAW_FILE_TEMPLATE
from ustreasury_yield_curve.data.feed_parser import parse_feed_file
from ustreasury_yield_curve.errors import ConstructionFailure, MissingInputFile
from ustreasury_yield_curve.models import ConversionResult


logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def sort_csv_lines(lines: list[str]) -> list[str]:
    """Stable sort of CSV lines by the YYYYMMDD date in their first column."""
    if not lines:
        return []
    keys = pd.to_datetime(
        pd.Series([line.split(",", 1)[0] for line in lines]), format="%Y%m%d"
    )
    return [lines[i] for i in keys.argsort(kind="stable")]


class YieldCurveConverter:
    """Converts yearly yield curve XML feeds to CSV."""

    def __init__(self, source_dir: Path, destination_dir: Path) -> None:
        self.source_dir = Path(source_dir)
        self.destination_dir = Path(destination_dir)
        try:
            self.destination_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConstructionFailure(
                f"Could not create destination directory {self.destination_dir}: {e}"
            ) from e

    @property
    def output_path(self) -> Path:
        return self.destination_dir / OUTPUT_FILENAME

    def convert_year(self, year: int) -> list[str]:
        """
        Read one year's feed and return its CSV lines sorted by date.

        Raises:
            MissingInputFile: The year's XML file is not in the source directory
            InvalidFeedData: The file is not a usable feed document
        """
        raw_file = self.source_dir / RAW_FILE_TEMPLATE.format(year=year)
        if not raw_file.is_file():
            raise MissingInputFile(
                f"Failed to find yield curve rates file: {raw_file.resolve()}"
            )

        feed = parse_feed_file(raw_file, year=year)
        entries = sorted(feed.entries, key=lambda entry: entry.date)
        return [entry.to_csv_line() for entry in entries]

    def convert(self, start_year: int, end_year: int | None = None) -> ConversionResult:
        """
        Convert every year from start_year through end_year into one CSV.

        The destination file is only replaced once all years have been
        read, so a failure leaves any previous output untouched.

        Args:
            start_year: First year to convert
            end_year: Last year to convert, defaults to the current year

        Returns:
            ConversionResult with the output path and row counts
        """
        if end_year is None:
            end_year = date.today().year

        logger.info(
            f"Converting U.S. Treasury yield curve data {start_year}-{end_year}"
        )

        lines: list[str] = []
        rows_per_year: dict[int, int] = {}
        for year in range(start_year, end_year + 1):
            year_lines = self.convert_year(year)
            rows_per_year[year] = len(year_lines)
            lines.extend(year_lines)
            logger.debug(f"  {year}: {len(year_lines)} rows")

        final_lines = sort_csv_lines(lines)

        logger.info(f"Writing {len(final_lines)} lines to {self.output_path}")
        self._write_atomic(final_lines)

        logger.info("Data conversion complete")
        return ConversionResult(
            path=self.output_path,
            row_count=len(final_lines),
            rows_per_year=rows_per_year,
        )

    def _write_atomic(self, lines: list[str]) -> None:
        """Write to a temp file beside the output, then rename over it."""
        fd, tmp_name = tempfile.mkstemp(
            dir=self.destination_dir, prefix=".yieldcurverates.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
            # mkstemp creates 0600; match what a plain open() would give
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, self.output_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
