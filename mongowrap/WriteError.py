"""Raised for write-path driver failures."""

from .MongoWrapError import MongoWrapError


class WriteError(MongoWrapError):
    pass
