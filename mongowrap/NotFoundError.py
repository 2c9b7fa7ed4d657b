"""Raised when an operation expected to match one document matched none."""

from typing import Any

from .MongoWrapError import MongoWrapError


class NotFoundError(MongoWrapError, LookupError):
    def __init__(self, collection_key: str, filter: Any):
        self.collection_key = collection_key
        self.filter = filter
        super().__init__(f"No document in {collection_key} matches {filter!r}")
