"""mongowrap - session and CRUD convenience layer over pymongo.

Each module exports exactly one function or class, following the
single file == function/class rule.
"""

from .ConnectionRegistry import ConnectionRegistry
from .DatabaseConfig import DatabaseConfig
from .DatabaseConnectionError import DatabaseConnectionError
from .DocumentModel import DocumentModel
from .InvalidIdentifierError import InvalidIdentifierError
from .LogConfig import LogConfig
from .MongoWrapConfig import MongoWrapConfig
from .MongoWrapError import MongoWrapError
from .NotConnectedError import NotConnectedError
from .NotFoundError import NotFoundError
from .parse_collection_key import parse_collection_key
from .QueryError import QueryError
from .to_object_id import to_object_id
from .WriteError import WriteError

__all__ = [
    "ConnectionRegistry",
    "DatabaseConfig",
    "DatabaseConnectionError",
    "DocumentModel",
    "InvalidIdentifierError",
    "LogConfig",
    "MongoWrapConfig",
    "MongoWrapError",
    "NotConnectedError",
    "NotFoundError",
    "QueryError",
    "WriteError",
    "parse_collection_key",
    "to_object_id",
]
