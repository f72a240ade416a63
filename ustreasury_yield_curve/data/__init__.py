"""Data downloading, parsing and conversion."""

from .converter import YieldCurveConverter
from .downloader import YieldCurveDownloader
from .feed_parser import parse_feed, parse_feed_file
from .reader import load_yield_curve

__all__ = [
    "YieldCurveConverter",
    "YieldCurveDownloader",
    "parse_feed",
    "parse_feed_file",
    "load_yield_curve",
]
