"""Pydantic model for the Linode API response envelope.

Every call returns a JSON object of the form::

    {"ERRORARRAY": [...], "ACTION": "test.echo", "DATA": {...}}
"""

from typing import Any

from pydantic import BaseModel, Field


class ResponseEnvelope(BaseModel):
    """Top-level JSON object returned by every API call.

    Fields:
        errors: Error descriptors from ERRORARRAY; non-empty means failure
        action: Echoed operation name from ACTION
        data: Arbitrary JSON node from DATA
    """

    errors: list[Any] = Field(alias="ERRORARRAY")
    action: str | None = Field(default=None, alias="ACTION")
    data: Any = Field(default=None, alias="DATA")

    model_config = {"extra": "allow", "frozen": True}

    @property
    def failed(self) -> bool:
        return bool(self.errors)
