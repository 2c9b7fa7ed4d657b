"""Connection registry: one driver session plus a table of collection handles."""

import logging
import threading
from collections.abc import Mapping, MutableMapping
from typing import Any

import pymongo.errors
from bson import ObjectId
from bson.errors import BSONError
from pymongo.collection import Collection

from ._AbstractBackend import _AbstractBackend
from .constants import COLLECTION_KEY_SEPARATOR
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig
from .DatabaseConnectionError import DatabaseConnectionError
from .DocumentModel import DocumentModel
from .MongoWrapConfig import MongoWrapConfig
from .NotConnectedError import NotConnectedError
from .NotFoundError import NotFoundError
from .parse_collection_key import parse_collection_key
from .QueryError import QueryError
from .to_object_id import to_object_id
from .utils.configure_logging import configure_logging
from .WriteError import WriteError

logger = logging.getLogger(__name__)

_DRIVER_ERRORS = (pymongo.errors.PyMongoError, BSONError)

# The driver rejects argument types with TypeError and update shapes with ValueError
_WRITE_ERRORS = (*_DRIVER_ERRORS, TypeError, ValueError)


class ConnectionRegistry:
    """Holds one driver session and the collection handles derived from it.

    Collection handles are cached under ``"<database>.<collection>"`` keys.
    Every CRUD method takes such a key; a key that was never registered
    through :meth:`get_or_create_collection` is parsed and its handle derived
    on first use.

    Example:
        ```python
        with ConnectionRegistry() as registry:
            registry.connect("mongodb://localhost:27017")
            registry.get_or_create_collection("test", "users")
            oid = registry.insert("test.users", {"name": "Ann"})
            registry.update("test.users", oid, {"$set": {"name": "Anna"}})
        ```
    """

    def __init__(self, database_config: DatabaseConfig | None = None):
        if database_config is None:
            database_config = DatabaseConfig.model_validate({"type": "mongo", "data": {}})
        self.database_config = database_config
        self._backend = self._load_backend(database_config)
        self._lock = threading.Lock()
        self._session: Any = None
        self._collections: dict[str, Collection] = {}
        self._generation = 0

    @classmethod
    def open(cls, config: MongoWrapConfig | None = None) -> "ConnectionRegistry":
        """Build a registry from configuration and connect to its configured uri.

        Args:
            config: Loaded configuration. If None, read from the config file.

        Raises:
            ValueError: If the configuration carries no uri
            DatabaseConnectionError: If the server cannot be reached
        """
        if config is None:
            config = MongoWrapConfig.load()
        configure_logging(level=config.log.level)
        address = config.database.uri
        if not address:
            raise ValueError("database.data.uri is required to open a registry from configuration")
        registry = cls(config.database)
        registry.connect(address)
        return registry

    @staticmethod
    def _load_backend(database_config: DatabaseConfig) -> _AbstractBackend:
        backend_type = database_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        module = __import__(f"mongowrap._{backend_type}._Backend", fromlist=[""])
        return module._Backend(database_config)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # Session

    @property
    def session(self) -> Any:
        """Current driver client, or None before connect()."""
        return self._session

    @property
    def is_connected(self) -> bool:
        return self._session is not None

    @property
    def generation(self) -> int:
        """Incremented by every successful connect()."""
        return self._generation

    @property
    def collections(self) -> dict[str, Collection]:
        with self._lock:
            return dict(self._collections)

    def connect(self, address: str) -> None:
        """Establish a session to ``address``, replacing the current one.

        The handle table is emptied together with the session swap and the
        previous client is closed afterwards. A failed attempt leaves the
        current session untouched.

        Raises:
            DatabaseConnectionError: If the address is malformed or the server is unreachable
        """
        logger.info(f"Connecting to {address}")
        try:
            client = self._backend.connect(address)
        except DatabaseConnectionError as exc:
            logger.error(f"Connection to {address} refused: {exc}")
            raise
        except (pymongo.errors.PyMongoError, ValueError) as exc:
            # the driver raises plain ValueError for unparsable host:port pairs
            logger.error(f"Connection to {address} failed: {exc}")
            raise DatabaseConnectionError(address, str(exc)) from exc

        with self._lock:
            previous = self._session
            self._session = client
            self._collections = {}
            self._generation += 1
            generation = self._generation

        if previous is not None and previous is not client:
            self._backend.close(previous)
        logger.info(f"Connected to {address} (generation {generation})")

    def close(self) -> None:
        """Close the session and forget every collection handle."""
        with self._lock:
            previous = self._session
            self._session = None
            self._collections = {}
        if previous is not None:
            self._backend.close(previous)
            logger.info("Session closed")

    # Collections

    def get_or_create_collection(self, database_name: str, collection_name: str) -> Collection:
        """Return the handle for ``database_name.collection_name`` and cache it.

        The server creates the collection on its first write.
        """
        key = f"{database_name}{COLLECTION_KEY_SEPARATOR}{collection_name}"
        with self._lock:
            session = self._require_session()
            collection = session[database_name][collection_name]
            self._collections[key] = collection
        logger.debug(f"Registered collection handle {key}")
        return collection

    def _require_session(self) -> Any:
        if self._session is None:
            raise NotConnectedError()
        return self._session

    def _collection(self, collection_key: str) -> Collection:
        with self._lock:
            self._require_session()
            collection = self._collections.get(collection_key)
        if collection is None:
            database_name, collection_name = parse_collection_key(collection_key)
            collection = self.get_or_create_collection(database_name, collection_name)
        return collection

    # Identifiers

    @staticmethod
    def to_object_id(hex_string: str) -> ObjectId:
        return to_object_id(hex_string)

    # Reads

    def find_by_id(
        self, collection_key: str, document_id: Any, projection: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Fetch the document whose ``_id`` is ``document_id``.

        Args:
            collection_key: "database.collection"
            document_id: Identifier value, usually an ObjectId
            projection: Fields to include/exclude, e.g. ``{"name": 1}``.
                Careful: an empty projection returns the whole document.

        Raises:
            NotFoundError: If no document has that identifier
            QueryError: On driver failure
        """
        return self.find_one(collection_key, {"_id": document_id}, projection)

    def find_one(
        self, collection_key: str, filter: Mapping[str, Any], projection: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Fetch the first document matching ``filter``.

        Same projection caveat as :meth:`find_by_id`.

        Raises:
            NotFoundError: If nothing matches
            QueryError: On driver failure
        """
        collection = self._collection(collection_key)
        try:
            # Empty projection means all fields, not just _id
            document = collection.find_one(filter, projection or None)
        except _DRIVER_ERRORS as exc:
            logger.warning(f"find_one on {collection_key} failed: {exc}")
            raise QueryError(str(exc)) from exc
        if document is None:
            raise NotFoundError(collection_key, filter)
        return document

    def find_all(
        self,
        collection_key: str,
        filter: Mapping[str, Any] | None = None,
        projection: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch every document matching ``filter`` as a list (empty when nothing matches).

        Raises:
            QueryError: On driver failure
        """
        collection = self._collection(collection_key)
        try:
            return list(collection.find(filter or {}, projection or None))
        except _DRIVER_ERRORS as exc:
            logger.warning(f"find on {collection_key} failed: {exc}")
            raise QueryError(str(exc)) from exc

    # Writes

    def insert(self, collection_key: str, document: Mapping[str, Any] | DocumentModel) -> Any:
        """Insert one document as-is.

        Returns:
            The document's ``_id``, generated by the driver when the document has none

        Raises:
            WriteError: On driver failure (duplicate key, unencodable value, non-mapping document)
        """
        if isinstance(document, DocumentModel):
            document = document.to_document()
        elif isinstance(document, Mapping) and not isinstance(document, MutableMapping):
            # insert_one adds _id to the document it is given
            document = dict(document)
        collection = self._collection(collection_key)
        try:
            result = collection.insert_one(document)
        except _WRITE_ERRORS as exc:
            logger.warning(f"insert into {collection_key} failed: {exc}")
            raise WriteError(str(exc)) from exc
        return result.inserted_id

    def update(self, collection_key: str, document_id: Any, update: Mapping[str, Any]) -> None:
        """Apply ``update`` ($set, $inc, ...) to the document whose ``_id`` is ``document_id``.

        Raises:
            NotFoundError: If no document has that identifier
            WriteError: On driver failure, including updates without $ operators
        """
        collection = self._collection(collection_key)
        try:
            result = collection.update_one({"_id": document_id}, update)
        except _WRITE_ERRORS as exc:
            logger.warning(f"update in {collection_key} failed: {exc}")
            raise WriteError(str(exc)) from exc
        if result.matched_count == 0:
            raise NotFoundError(collection_key, {"_id": document_id})

    def delete(self, collection_key: str, document_id: Any) -> None:
        """Remove the document whose ``_id`` is ``document_id``.

        Raises:
            NotFoundError: If no document has that identifier
            WriteError: On driver failure
        """
        collection = self._collection(collection_key)
        try:
            result = collection.delete_one({"_id": document_id})
        except _WRITE_ERRORS as exc:
            logger.warning(f"delete in {collection_key} failed: {exc}")
            raise WriteError(str(exc)) from exc
        if result.deleted_count == 0:
            raise NotFoundError(collection_key, {"_id": document_id})

    def delete_all(self, collection_key: str, filter: Mapping[str, Any]) -> int:
        """Remove every document matching ``filter``; ``{}`` empties the collection.

        Returns:
            Number of documents deleted

        Raises:
            WriteError: On driver failure, or when ``filter`` is not a mapping
        """
        # No default filter: emptying a collection takes an explicit {}
        if not isinstance(filter, Mapping):
            raise WriteError(f"filter must be a mapping (found: {type(filter).__name__})")
        collection = self._collection(collection_key)
        try:
            deleted = collection.delete_many(filter).deleted_count
        except _WRITE_ERRORS as exc:
            logger.warning(f"delete_many in {collection_key} failed: {exc}")
            raise WriteError(str(exc)) from exc
        logger.debug(f"Deleted {deleted} document(s) from {collection_key}")
        return deleted
