"""Treasury yield curve feed downloader."""

import logging
from datetime import date
from pathlib import Path

import httpx

from ustreasury_yield_curve.config import RAW_FILE_TEMPLATE, Settings
from ustreasury_yield_curve.data.feed_parser import parse_feed
from ustreasury_yield_curve.errors import (
    ConstructionFailure,
    DownloadFailure,
    InvalidFeedData,
)
from ustreasury_yield_curve.models import DownloadResult


logger = logging.getLogger(__name__)


class YieldCurveDownloader:
    """Fetches yearly yield curve feeds and stores them as XML files."""

    def __init__(
        self,
        download_dir: Path,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.download_dir = Path(download_dir)
        try:
            self.download_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConstructionFailure(
                f"Could not create download directory {self.download_dir}: {e}"
            ) from e
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.http_timeout, follow_redirects=True
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "YieldCurveDownloader":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def path_for(self, year: int) -> Path:
        return self.download_dir / RAW_FILE_TEMPLATE.format(year=year)

    def _fetch_year(self, year: int) -> bytes:
        """Fetch one year's raw feed document."""
        url = self.settings.feed_url(year)
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DownloadFailure(
                f"HTTP {e.response.status_code} fetching {year} feed from {url}"
            ) from e
        except httpx.HTTPError as e:
            raise DownloadFailure(f"Error fetching {year} feed from {url}: {e}") from e

        if not response.content.strip():
            raise DownloadFailure(f"Empty response for {year} feed from {url}")
        return response.content

    def download_year(self, year: int, allow_empty: bool = False) -> Path:
        """
        Download a single year's feed, overwriting any existing file.

        Args:
            year: Calendar year to fetch
            allow_empty: Accept a feed with no entries (the current year
                may not have published yet)

        Returns:
            Path of the stored XML file
        """
        content = self._fetch_year(year)

        try:
            feed = parse_feed(content, year=year)
        except InvalidFeedData as e:
            raise DownloadFailure(f"Invalid feed received for {year}: {e}") from e
        if not feed.entries and not allow_empty:
            raise DownloadFailure(f"No published yield curve data for {year}")

        path = self.path_for(year)
        try:
            path.write_bytes(content)
        except OSError as e:
            raise DownloadFailure(f"Could not write {path}: {e}") from e

        logger.info(f"  {year}: {len(feed)} entries -> {path.name}")
        return path

    def download(self, start_year: int, end_year: int | None = None) -> DownloadResult:
        """
        Download every year from start_year through end_year inclusive.

        Args:
            start_year: First year to fetch
            end_year: Last year to fetch, defaults to the current year

        Returns:
            DownloadResult mapping each year to its stored file

        Raises:
            DownloadFailure: Any fetch or write failed. Nothing is retried.
        """
        current_year = date.today().year
        if end_year is None:
            end_year = current_year

        logger.info(
            f"Downloading U.S. Treasury yield curve feeds {start_year}-{end_year} "
            f"to {self.download_dir}"
        )

        files: dict[int, Path] = {}
        for year in range(start_year, end_year + 1):
            files[year] = self.download_year(year, allow_empty=year >= current_year)

        logger.info(f"Downloaded {len(files)} yearly feeds")
        return DownloadResult(start_year=start_year, end_year=end_year, files=files)
