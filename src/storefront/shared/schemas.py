"""Base pydantic models for the HTTP contracts.

Wire names are camelCase; Python attributes stay snake_case. Request bodies
reject unknown fields.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class MessageResponse(ApiModel):
    message: str
