"""Base model shared by request and result schemas.

Python attributes are snake_case; the wire format is camelCase
(``childAge``, ``homeTips``). Both spellings are accepted on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """BaseModel with camelCase aliases, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Serialise with wire (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)
