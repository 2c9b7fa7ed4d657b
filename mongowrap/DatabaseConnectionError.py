"""Raised when a session cannot be established."""

from .MongoWrapError import MongoWrapError


class DatabaseConnectionError(MongoWrapError, ConnectionError):
    """Server unreachable or address malformed."""

    def __init__(self, address: str, message: str):
        self.address = address
        super().__init__(message)
