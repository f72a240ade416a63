"""Data models for yield curve feeds."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from ustreasury_yield_curve.config import MATURITIES


@dataclass(frozen=True)
class YieldCurveEntry:
    """Single observation date from a yearly feed.

    Yields keep the feed's decimal text as-is. A maturity that was not
    published on this date is ``None``.
    """

    date: date
    yields: dict[str, str | None] = field(default_factory=dict)

    def get(self, maturity: str) -> str | None:
        """Yield for a feed field such as ``BC_10YEAR``."""
        return self.yields.get(maturity)

    def to_csv_row(self) -> list[str]:
        row = [self.date.strftime("%Y%m%d")]
        for maturity in MATURITIES:
            value = self.yields.get(maturity)
            row.append(value if value is not None else "")
        return row

    def to_csv_line(self) -> str:
        return ",".join(self.to_csv_row())


@dataclass
class YearFeed:
    """One year's parsed feed document."""

    entries: list[YieldCurveEntry]
    year: int | None = None

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class DownloadResult:
    """Outcome of a download run."""

    start_year: int
    end_year: int
    files: dict[int, Path]

    @property
    def year_count(self) -> int:
        return len(self.files)


@dataclass
class ConversionResult:
    """Outcome of a conversion run."""

    path: Path
    row_count: int
    rows_per_year: dict[int, int]
