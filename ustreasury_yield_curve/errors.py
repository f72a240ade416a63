"""Exceptions raised by the downloader and converter."""


class YieldCurveError(Exception):
    """Base class for all yield curve processing errors."""


class MissingInputFile(YieldCurveError, FileNotFoundError):
    """An expected yearly XML file is absent from the source directory."""


class InvalidFeedData(YieldCurveError, ValueError):
    """A feed document is empty, malformed, or not a yield curve feed."""


class DownloadFailure(YieldCurveError):
    """Fetching or persisting a year's feed failed."""


class ConstructionFailure(YieldCurveError):
    """The downloader or converter could not be initialized."""
