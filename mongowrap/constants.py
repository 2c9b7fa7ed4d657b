"""Shared constants for mongowrap home directory and identifier formats."""

MONGOWRAP_HOME_EXT = ".mongowrap"  # user-level state/config directory suffix

MONGOWRAP_HOME_ENV = "MONGOWRAP_HOME"

# ObjectId external representation
OBJECT_ID_HEX_LENGTH = 24
OBJECT_ID_BYTE_LENGTH = 12

# Separator between database and collection in collection keys
COLLECTION_KEY_SEPARATOR = "."

DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 5000
