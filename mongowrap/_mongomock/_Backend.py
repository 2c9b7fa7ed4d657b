"""In-memory backend: every connect() hands out the same mongomock client."""

import mongomock

from .._AbstractBackend import _AbstractBackend
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data as _DatabaseConfigData

# One in-memory server per process; reconnects see the data written before them
_server: mongomock.MongoClient | None = None


def _in_memory_server() -> mongomock.MongoClient:
    global _server
    if _server is None:
        _server = mongomock.MongoClient()
    return _server


class _Backend(_AbstractBackend):
    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _DatabaseConfigData):
            raise ValueError("MongoMock config data is required")

    def connect(self, address: str) -> mongomock.MongoClient:
        self._check_address(address)
        return _in_memory_server()

    def close(self, client: mongomock.MongoClient) -> None:
        # The in-memory server outlives registries, closing it would drop its data
        pass
