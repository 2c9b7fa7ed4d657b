"""Mock MongoDB-specific configuration data for testing."""

from pydantic import BaseModel, Field


class _Data(BaseModel):
    """MongoMock configuration data.

    Note: MongoMock doesn't dial anything since it's an in-memory database.
    The uri is only the default address handed to connect().
    """

    uri: str | None = Field(default="mongodb://localhost", description="Default address for ConnectionRegistry.open()")

    model_config = {"extra": "forbid"}
