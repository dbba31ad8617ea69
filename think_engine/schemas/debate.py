"""Argument Schema - one node of a structured argumentation graph.

Invariants:
    - confidence in [0, 1]
    - respondsTo is a single id; supports/contradicts are id lists
    - premises holds at least one entry
"""

from pydantic import Field

from think_engine.core.domain_types import ArgumentType
from think_engine.schemas.common import (
    ArtifactModel, Flag, Identifier, NonEmptyStr, NonEmptyTextList, Text,
    UnitInterval,
)


class Argument(ArtifactModel):
    claim: NonEmptyStr
    premises: NonEmptyTextList
    conclusion: NonEmptyStr
    argument_type: ArgumentType
    confidence: UnitInterval
    next_argument_needed: Flag
    argument_id: Identifier | None = None
    responds_to: Identifier | None = None
    supports: list[Identifier] = Field(default_factory=list)
    contradicts: list[Identifier] = Field(default_factory=list)
    strengths: list[Text] = Field(default_factory=list)
    weaknesses: list[Text] = Field(default_factory=list)
    suggested_next_types: list[ArgumentType] = Field(default_factory=list)
