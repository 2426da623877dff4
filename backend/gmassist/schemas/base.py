# backend/gmassist/schemas/base.py
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

# Limit for every long free-text field
LONG_TEXT = 10000


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Either is accepted on input."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_null(*fields: str):
    """Validator for partial updates: the field may be omitted but not set to null."""
    def check(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value
    return field_validator(*fields)(classmethod(check))
