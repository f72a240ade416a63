"""Parse the Treasury's yearly yield curve Atom feed."""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path

from ustreasury_yield_curve.config import MATURITIES
from ustreasury_yield_curve.errors import InvalidFeedData
from ustreasury_yield_curve.models import YearFeed, YieldCurveEntry


logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip the XML namespace: ``{ns}TAG`` -> ``TAG``."""
    return tag.split("}", 1)[-1] if "}" in tag else tag


def _parse_date(text: str | None) -> datetime:
    if text is None or not text.strip():
        raise InvalidFeedData("Feed entry is missing NEW_DATE")
    value = text.strip()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise InvalidFeedData(f"Unparsable NEW_DATE value: {value!r}") from None


def _parse_properties(properties: ET.Element) -> YieldCurveEntry:
    """Build an entry from an ``m:properties`` element.

    Yield elements that are missing, empty, or flagged ``m:null="true"``
    are recorded as absent.
    """
    fields: dict[str, str | None] = {}
    for child in properties:
        name = _local_name(child.tag)
        text = (child.text or "").strip()
        fields[name] = text or None

    observed = _parse_date(fields.get("NEW_DATE"))
    yields = {maturity: fields.get(maturity) for maturity in MATURITIES}
    return YieldCurveEntry(date=observed.date(), yields=yields)


def parse_feed(source: bytes | str, year: int | None = None) -> YearFeed:
    """
    Parse a yearly feed document.

    Args:
        source: Raw XML document
        year: Year the document was published for, if known

    Returns:
        YearFeed with one entry per ``<entry>`` element, in document order

    Raises:
        InvalidFeedData: Document is empty, malformed, or not an Atom feed
    """
    if not source or not source.strip():
        raise InvalidFeedData("XML data is empty")

    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise InvalidFeedData(f"XML data could not be parsed: {e}") from e

    if _local_name(root.tag) != "feed":
        raise InvalidFeedData(
            f"Expected a <feed> document, got <{_local_name(root.tag)}>. "
            "Perhaps this is the wrong XML data?"
        )

    entries = []
    for entry in root.findall("{*}entry"):
        # entry/content/m:properties; fall back to any nested properties
        properties = entry.find("{*}content/{*}properties")
        if properties is None:
            properties = entry.find(".//{*}properties")
        if properties is None:
            raise InvalidFeedData("Feed entry has no properties element")
        entries.append(_parse_properties(properties))

    return YearFeed(entries=entries, year=year)


def parse_feed_file(path: Path, year: int | None = None) -> YearFeed:
    """Read and parse a feed stored on disk."""
    logger.debug(f"Parsing {path}")
    with open(path, "rb") as f:
        return parse_feed(f.read(), year=year)
