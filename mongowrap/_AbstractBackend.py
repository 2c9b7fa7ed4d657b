"""Abstract base class for driver client backends."""

from abc import ABC, abstractmethod
from typing import Any

from .DatabaseConnectionError import DatabaseConnectionError

_URI_SCHEMES = ("mongodb://", "mongodb+srv://")


class _AbstractBackend(ABC):
    @abstractmethod
    def connect(self, address: str) -> Any:
        """Open a client for ``address`` and return it.

        Raises:
            DatabaseConnectionError: If the address is malformed
            pymongo.errors.PyMongoError: If the driver cannot reach the server
        """
        pass

    @abstractmethod
    def close(self, client: Any) -> None:
        pass

    @staticmethod
    def _check_address(address: str) -> None:
        if not isinstance(address, str) or not address.startswith(_URI_SCHEMES):
            raise DatabaseConnectionError(
                str(address),
                f"Address must start with 'mongodb://' or 'mongodb+srv://' (found: {address!r})",
            )
