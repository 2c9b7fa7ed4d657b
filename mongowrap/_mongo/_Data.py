"""MongoDB-specific configuration data."""

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_SERVER_SELECTION_TIMEOUT_MS


class _Data(BaseModel):
    uri: str | None = Field(
        default=None,
        description="MongoDB connection URI used by ConnectionRegistry.open().",
    )
    server_selection_timeout_ms: int = Field(
        default=DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
        gt=0,
        description="Driver server selection timeout applied when dialing.",
    )

    model_config = {"extra": "forbid"}

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("mongodb"):
            raise ValueError(f"database.data.uri must start with 'mongodb://' (found: {v!r})")
        return v
