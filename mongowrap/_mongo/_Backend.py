"""MongoDB client backend."""

from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .._AbstractBackend import _AbstractBackend
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data as _DatabaseConfigData


class _Backend(_AbstractBackend):
    def __init__(self, database_config: DatabaseConfig):
        if not isinstance(database_config.data, _DatabaseConfigData):
            raise ValueError("MongoDB config data is required")
        self.server_selection_timeout_ms = database_config.data.server_selection_timeout_ms

    def connect(self, address: str) -> MongoClient[Any]:
        self._check_address(address)
        client: MongoClient[Any] = MongoClient(address, serverSelectionTimeoutMS=self.server_selection_timeout_ms)
        try:
            client.server_info()  # Test connection
        except PyMongoError:
            client.close()
            raise
        return client

    def close(self, client: MongoClient[Any]) -> None:
        client.close()
