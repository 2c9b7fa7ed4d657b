"""MongoDB client backend."""
