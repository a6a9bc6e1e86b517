"""
Shared base for stored records.

Stored documents keep the camelCase field names the web client already uses,
while Python code works with snake_case attributes.
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate an opaque record id compatible with Mongo ObjectId."""
    return str(ObjectId())


class DocumentModel(BaseModel):
    """Base record mapped to a single Mongo document"""

    id: Optional[str] = Field(default=None, alias="_id")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_document(cls, doc: Dict[str, Any]):
        return cls.model_validate(doc)

    def to_document(self) -> Dict[str, Any]:
        """Document body without the id; the store owns `_id`."""
        return self.model_dump(by_alias=True, exclude={"id"})

    def to_public(self) -> Dict[str, Any]:
        """JSON-friendly representation used by API responses."""
        return self.model_dump(by_alias=True, mode="json")
