"""Yield curve data models."""

from .yield_curve import ConversionResult, DownloadResult, YearFeed, YieldCurveEntry

__all__ = ["ConversionResult", "DownloadResult", "YearFeed", "YieldCurveEntry"]
