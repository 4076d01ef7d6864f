"""Shared schema base classes for provider payloads."""

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """Immutable record decoded from an upstream payload.

    Fields declare the upstream key as ``validation_alias`` so records can be
    built from raw JSON or by field name, and serialize by field name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
