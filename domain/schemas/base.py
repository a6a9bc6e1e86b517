from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Payload model accepting and emitting camelCase keys"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class InsertedResponse(CamelModel):
    """Id of a freshly appended record"""

    inserted_id: str = Field(..., description="Id of the inserted record")


class IdentifiedModel(CamelModel):
    """Response carrying a record id; accepts the stored `_id` key as input"""

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))
