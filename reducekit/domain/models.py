"""
Domain models for reducekit.

Defines the driver record used by the lessons. Matchers accept plain mappings
as records too; this model exists for callers that want validation and
immutability.
"""
from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel, Field


class Driver(BaseModel):
    """
    A driver record with a name and a hometown.
    """

    name: str = Field(..., description="Driver's name; the field record matching compares.")
    hometown: str = Field(..., description="City the driver is from.")

    model_config = {
        "frozen": True,
    }


# A record is either a mapping of field names to values or an object exposing
# the same fields as attributes (such as Driver).
Record = Union[Mapping[str, Any], BaseModel]


__all__ = ["Driver", "Record"]
