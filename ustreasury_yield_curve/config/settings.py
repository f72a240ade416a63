"""Configuration settings for the downloader and converter."""

from dataclasses import dataclass, field
from pathlib import Path
import os
import tempfile

from dotenv import load_dotenv


load_dotenv()


DEFAULT_START_YEAR = 1990

DEFAULT_FEED_URL = (
    "https://home.treasury.gov/resource-center/data-chart-center/interest-rates/"
    "pages/xml?data=daily_treasury_yield_curve&field_tdr_date_value={year}"
)

# Feed field -> CSV column, in output order
MATURITIES: dict[str, str] = {
    "BC_1MONTH": "1mo",
    "BC_2MONTH": "2mo",
    "BC_3MONTH": "3mo",
    "BC_6MONTH": "6mo",
    "BC_1YEAR": "1yr",
    "BC_2YEAR": "2yr",
    "BC_3YEAR": "3yr",
    "BC_5YEAR": "5yr",
    "BC_7YEAR": "7yr",
    "BC_10YEAR": "10yr",
    "BC_20YEAR": "20yr",
    "BC_30YEAR": "30yr",
}

CSV_COLUMNS: list[str] = ["date", *MATURITIES.values()]

RAW_FILE_TEMPLATE = "yieldcurverates_{year}.xml"
OUTPUT_FILENAME = "yieldcurverates.csv"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    """Application settings."""

    start_year: int = field(
        default_factory=lambda: _env_int("YIELD_CURVE_START_YEAR", DEFAULT_START_YEAR)
    )
    output_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("TEMP_OUTPUT_DIRECTORY", "/temp-output-directory")
        )
    )
    download_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "YIELD_CURVE_DOWNLOAD_DIR",
                str(Path(tempfile.gettempdir()) / "ustreasury"),
            )
        )
    )
    feed_url_template: str = field(
        default_factory=lambda: os.getenv("YIELD_CURVE_FEED_URL", DEFAULT_FEED_URL)
    )
    http_timeout: float = field(
        default_factory=lambda: _env_float("YIELD_CURVE_HTTP_TIMEOUT", 30.0)
    )

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        self.download_dir = Path(self.download_dir)

    @property
    def destination_dir(self) -> Path:
        """Directory the converted CSV is written to."""
        return self.output_dir / "alternative" / "ustreasury"

    def feed_url(self, year: int) -> str:
        return self.feed_url_template.format(year=year)

    def validate(self) -> None:
        """Validate settings before any work starts."""
        if isinstance(self.start_year, bool) or not isinstance(self.start_year, int):
            raise ValueError(f"start_year must be an integer, got {self.start_year!r}")
        if "{year}" not in self.feed_url_template:
            raise ValueError(
                "YIELD_CURVE_FEED_URL must contain a '{year}' placeholder"
            )
        if self.http_timeout <= 0:
            raise ValueError(f"http_timeout must be positive, got {self.http_timeout}")
