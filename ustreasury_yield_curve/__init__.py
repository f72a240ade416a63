"""U.S. Treasury yield curve rate downloader and CSV converter."""

__version__ = "0.1.0"
