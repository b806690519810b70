"""Common base model and field types for all contract schemas."""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

# Numbers arrive as JSON numbers only; "16" or "16px" are rejected.
Number = Union[StrictInt, StrictFloat]
SortKey = Annotated[StrictInt, Field(ge=0)]
DateString = Annotated[str, Field(pattern=r"^\d{4}-\d{2}(-\d{2})?$")]


class ContractModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON shape shared with the other services."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
