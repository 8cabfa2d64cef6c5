"""Base types for the wire models of every resource module."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

__all__ = ["ApiEnum", "ApiModel"]


class ApiEnum(str, Enum):
    """Enum serialised in snake_case that also accepts the SCREAMING_CASE alias."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


class ApiModel(BaseModel):
    # Unknown fields from newer API revisions are ignored
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
