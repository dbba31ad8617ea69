"""Common Schema Building Blocks - base model and constrained field types.

Invariants:
    - ArtifactModel ignores unknown fields and accepts camelCase or snake_case keys
    - Numeric ranges are closed intervals; out-of-range values fail (never clamped)
    - Booleans and integers are strict: "true" or "3" are rejected, not coerced

Design Decisions:
    - Annotated aliases over per-field Field(...) repetition: one definition per
      constraint, shared by every artifact schema
    - Enums stay lax so JSON strings map onto str Enums
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StringConstraints
from pydantic.alias_generators import to_camel


class ArtifactModel(BaseModel):
    """Base for every caller-supplied artifact."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, dropping unset optional scalars."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]
Text = Annotated[str, StringConstraints(strict=True)]
Identifier = NonEmptyStr

PositiveInt = Annotated[int, Field(strict=True, gt=0)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]

UnitInterval = Annotated[float, Field(strict=True, ge=0.0, le=1.0)]
NonNegativeFloat = Annotated[float, Field(strict=True, ge=0.0)]
Score10 = Annotated[float, Field(strict=True, ge=0.0, le=10.0)]
Number = Annotated[float, Field(strict=True)]

Flag = StrictBool

NonEmptyTextList = Annotated[list[Text], Field(min_length=1)]
