from __future__ import annotations

from datetime import date

import httpx
import pytest

from conftest import make_feed
from ustreasury_yield_curve.config import Settings
from ustreasury_yield_curve.data.downloader import YieldCurveDownloader
from ustreasury_yield_curve.errors import ConstructionFailure, DownloadFailure


URL_TEMPLATE = "https://example.test/feed?year={year}"


def feed_for(year: int) -> bytes:
    return make_feed([(f"{year}-01-02T00:00:00", {"BC_10YEAR": "2.50"})])


def make_downloader(tmp_path, handler) -> YieldCurveDownloader:
    settings = Settings(
        download_dir=tmp_path / "raw",
        output_dir=tmp_path / "out",
        feed_url_template=URL_TEMPLATE,
    )
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return YieldCurveDownloader(settings.download_dir, settings, client=client)


def test_download_writes_one_file_per_year(tmp_path):
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        year = int(request.url.params["year"])
        requested.append(year)
        return httpx.Response(200, content=feed_for(year))

    with make_downloader(tmp_path, handler) as downloader:
        result = downloader.download(2018, end_year=2020)

    assert requested == [2018, 2019, 2020]
    assert result.year_count == 3
    for year in (2018, 2019, 2020):
        path = tmp_path / "raw" / f"yieldcurverates_{year}.xml"
        assert result.files[year] == path
        assert path.read_bytes() == feed_for(year)


def test_download_overwrites_existing_file(tmp_path):
    raw = tmp_path / "raw"
    raw.mkdir()
    (raw / "yieldcurverates_2019.xml").write_text("old")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=feed_for(2019))

    with make_downloader(tmp_path, handler) as downloader:
        downloader.download(2019, end_year=2019)

    assert (raw / "yieldcurverates_2019.xml").read_bytes() == feed_for(2019)


def test_http_error_aborts_run(tmp_path):
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        year = int(request.url.params["year"])
        requested.append(year)
        if year == 2019:
            return httpx.Response(503, content=b"unavailable")
        return httpx.Response(200, content=feed_for(year))

    with make_downloader(tmp_path, handler) as downloader:
        with pytest.raises(DownloadFailure, match="503"):
            downloader.download(2018, end_year=2020)

    assert requested == [2018, 2019]
    assert not (tmp_path / "raw" / "yieldcurverates_2020.xml").exists()


def test_network_error_is_download_failure(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with make_downloader(tmp_path, handler) as downloader:
        with pytest.raises(DownloadFailure) as excinfo:
            downloader.download(2019, end_year=2019)

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_empty_body_is_download_failure(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"")

    with make_downloader(tmp_path, handler) as downloader:
        with pytest.raises(DownloadFailure, match="Empty response"):
            downloader.download(2019, end_year=2019)


def test_non_feed_body_is_download_failure(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html><body>maintenance</body></html>")

    with make_downloader(tmp_path, handler) as downloader:
        with pytest.raises(DownloadFailure, match="Invalid feed"):
            downloader.download(2019, end_year=2019)

    assert not (tmp_path / "raw" / "yieldcurverates_2019.xml").exists()


def test_past_year_without_data_is_download_failure(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=make_feed([]))

    with make_downloader(tmp_path, handler) as downloader:
        with pytest.raises(DownloadFailure, match="No published"):
            downloader.download(1960, end_year=1960)


def test_current_year_may_be_empty(tmp_path):
    current_year = date.today().year

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=make_feed([]))

    with make_downloader(tmp_path, handler) as downloader:
        result = downloader.download(current_year)

    assert result.end_year == current_year
    assert result.files[current_year].exists()


def test_constructor_fails_for_unusable_directory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(ConstructionFailure):
        YieldCurveDownloader(blocker / "raw", Settings(download_dir=blocker / "raw"))


def test_close_releases_client(tmp_path):
    downloader = make_downloader(tmp_path, lambda request: httpx.Response(200))
    downloader.close()
    assert downloader._client is None
