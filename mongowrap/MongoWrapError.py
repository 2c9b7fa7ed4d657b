"""Base class for every error raised by mongowrap."""


class MongoWrapError(Exception):
    """Base error; the driver exception, if any, is chained as ``__cause__``."""
