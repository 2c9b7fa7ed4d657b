"""Raised when an operation needs a session and none is open."""

from .MongoWrapError import MongoWrapError


class NotConnectedError(MongoWrapError, RuntimeError):
    def __init__(self, message: str = "Registry not connected. Call connect() first."):
        super().__init__(message)
