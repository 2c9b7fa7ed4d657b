"""Typed base model for documents stored through the registry."""

from collections.abc import Mapping
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class DocumentModel(BaseModel):
    """Base class for typed domain documents.

    Subclasses declare the fields they care about; any other field found in a
    stored document is kept as an extra and written back unchanged.

    Example:
        ```python
        class User(DocumentModel):
            name: str

        user = User.from_document(registry.find_by_id("test.users", oid))
        registry.insert("test.users", User(name="Ann"))
        ```
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, arbitrary_types_allowed=True)

    id: ObjectId | None = Field(default=None, alias="_id")

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        return cls.model_validate(dict(document))

    def to_document(self) -> dict[str, Any]:
        """Raw document for the driver; ``_id`` is left out while unset so the driver generates one."""
        document = self.model_dump(by_alias=True)
        if document.get("_id") is None:
            document.pop("_id", None)
        return document
