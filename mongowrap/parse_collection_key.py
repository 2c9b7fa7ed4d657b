"""Split a collection key into its database and collection names."""

from .constants import COLLECTION_KEY_SEPARATOR


def parse_collection_key(collection_key: str) -> tuple[str, str]:
    """Parse collection key like 'test.users' into (database, collection).

    Only the first separator splits, so collection names may contain dots
    ('app.system.profile' -> ('app', 'system.profile')).

    Args:
        collection_key: Key in format "database.collection"

    Returns:
        Tuple of (database_name, collection_name)

    Raises:
        ValueError: If format is not "database.collection"
    """
    if COLLECTION_KEY_SEPARATOR not in collection_key:
        raise ValueError(
            f"Collection key must be in format 'database.collection' "
            f"(found: {collection_key!r}, expected: format like 'test.users')"
        )
    database_name, collection_name = collection_key.split(COLLECTION_KEY_SEPARATOR, 1)
    if not database_name or not collection_name:
        raise ValueError(
            f"Collection key must be in format 'database.collection' "
            f"(found: {collection_key!r}, expected: format like 'test.users' with both parts non-empty)"
        )
    return database_name, collection_name
