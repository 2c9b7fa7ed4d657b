"""Raised for identifier strings that cannot become an ObjectId."""

from .MongoWrapError import MongoWrapError


class InvalidIdentifierError(MongoWrapError, ValueError):
    pass
