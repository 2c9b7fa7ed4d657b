"""In-memory mongomock client backend."""
