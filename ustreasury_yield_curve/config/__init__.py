"""Configuration."""

from .settings import (
    CSV_COLUMNS,
    DEFAULT_FEED_URL,
    DEFAULT_START_YEAR,
    MATURITIES,
    OUTPUT_FILENAME,
    RAW_FILE_TEMPLATE,
    Settings,
)

__all__ = [
    "CSV_COLUMNS",
    "DEFAULT_FEED_URL",
    "DEFAULT_START_YEAR",
    "MATURITIES",
    "OUTPUT_FILENAME",
    "RAW_FILE_TEMPLATE",
    "Settings",
]
