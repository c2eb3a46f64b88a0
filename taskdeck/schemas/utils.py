"""
Shared schema configuration.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that speaks camelCase JSON and accepts snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def normalize_display_name(v: str) -> str:
    """
    Trim a profile display name and reject names that are empty once trimmed.

    Args:
        v: Raw display name from the request body

    Returns:
        The trimmed display name
    """
    v_normalized = v.strip()
    if not v_normalized:
        raise ValueError("displayName must not be empty")
    return v_normalized
