"""
Pydantic schema for the Users service greeting.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HelloWorld(BaseModel):
    """Body of ``GET /users-api``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    hello_world_msg: str = Field(..., examples=["Hello World!!!"])
