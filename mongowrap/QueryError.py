"""Raised for read-path driver failures."""

from .MongoWrapError import MongoWrapError


class QueryError(MongoWrapError):
    pass
