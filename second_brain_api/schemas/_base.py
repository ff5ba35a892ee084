# File: /second_brain_api/schemas/_base.py | Version: 2.0 | Title: Pydantic Base Schema (ORM mode + camelCase wire names)
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire; either spelling accepted on input."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
