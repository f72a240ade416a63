from __future__ import annotations

from pathlib import Path

import pytest


FEED_HEADER = (
    '<?xml version="1.0" encoding="utf-8" standalone="yes"?>\n'
    '<feed xmlns:d="http://schemas.microsoft.com/ado/2007/08/dataservices" '
    'xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata" '
    'xmlns="http://www.w3.org/2005/Atom">\n'
    '  <title type="text">DailyTreasuryYieldCurveRateData</title>\n'
)


def make_entry(new_date: str, yields: dict[str, str | None]) -> str:
    """One <entry>; a None yield is written as an m:null element."""
    fields = [f'<d:NEW_DATE m:type="Edm.DateTime">{new_date}</d:NEW_DATE>']
    for name, value in yields.items():
        if value is None:
            fields.append(f'<d:{name} m:type="Edm.Double" m:null="true" />')
        else:
            fields.append(f'<d:{name} m:type="Edm.Double">{value}</d:{name}>')
    return (
        "  <entry>\n"
        '    <content type="application/xml">\n'
        "      <m:properties>\n        "
        + "\n        ".join(fields)
        + "\n      </m:properties>\n"
        "    </content>\n"
        "  </entry>\n"
    )


def make_feed(entries: list[tuple[str, dict[str, str | None]]]) -> bytes:
    body = "".join(make_entry(new_date, yields) for new_date, yields in entries)
    return (FEED_HEADER + body + "</feed>\n").encode("utf-8")


def write_feed(
    directory: Path, year: int, entries: list[tuple[str, dict[str, str | None]]]
) -> Path:
    path = directory / f"yieldcurverates_{year}.xml"
    path.write_bytes(make_feed(entries))
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "raw"
    path.mkdir()
    return path


@pytest.fixture
def destination_dir(tmp_path: Path) -> Path:
    return tmp_path / "output" / "alternative" / "ustreasury"
