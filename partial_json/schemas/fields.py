from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FieldsSchema(BaseModel):
    model_config = ConfigDict(
        serialize_by_alias=True, populate_by_name=True, alias_generator=to_camel
    )

    present: bool
    fields: str | None = None
    tree: dict[str, Any] = Field(default_factory=dict)


class FieldsErrorSchema(BaseModel):
    message: str
    position: int
