"""Deliberation Schemas - personas, contributions, and the council session record.

Invariants:
    - Every contribution and persona field shape is validated here; roster membership,
      reference resolution and stage order are enforced in core/enforce_council
    - iteration is a non-negative integer
    - predefinedPersonas / personaCategory are request conveniences resolved against
      the injected PersonaRegistry before enforcement

Design Decisions:
    - Persona is frozen: once introduced into a deliberation it is compared by value
      across calls (PERSONA_MUTATED), never patched in place
"""

from pydantic import ConfigDict, Field

from think_engine.core.domain_types import (
    ContributionType, CouncilStage, PersonaCategory,
)
from think_engine.schemas.common import (
    ArtifactModel, Flag, Identifier, NonEmptyStr, NonNegativeInt, Text,
    UnitInterval,
)


class Communication(ArtifactModel):
    model_config = ConfigDict(frozen=True)

    style: Text
    tone: Text


class Persona(ArtifactModel):
    """Immutable persona definition."""
    model_config = ConfigDict(frozen=True)

    id: Identifier
    name: NonEmptyStr
    expertise: list[Text]
    background: NonEmptyStr
    perspective: NonEmptyStr
    biases: list[Text]
    communication: Communication
    category: PersonaCategory | None = None
    tags: list[Text] = Field(default_factory=list)
    concerns: list[Text] = Field(default_factory=list)
    typical_questions: list[Text] = Field(default_factory=list)


class Contribution(ArtifactModel):
    id: Identifier | None = None
    persona_id: Identifier
    content: NonEmptyStr
    type: ContributionType
    confidence: UnitInterval
    reference_ids: list[Identifier] = Field(default_factory=list)


class Position(ArtifactModel):
    persona_id: Identifier
    position: Text
    arguments: list[Text]


class Disagreement(ArtifactModel):
    topic: NonEmptyStr
    positions: list[Position]


class Deliberation(ArtifactModel):
    topic: NonEmptyStr
    personas: list[Persona] = Field(default_factory=list)
    contributions: list[Contribution]
    stage: CouncilStage
    active_persona_id: Identifier
    session_id: Identifier
    iteration: NonNegativeInt
    next_contribution_needed: Flag
    next_persona_id: Identifier | None = None
    consensus_points: list[Text] = Field(default_factory=list)
    disagreements: list[Disagreement] = Field(default_factory=list)
    key_insights: list[Text] = Field(default_factory=list)
    open_questions: list[Text] = Field(default_factory=list)
    final_recommendation: Text | None = None
    suggested_contribution_types: list[ContributionType] = Field(default_factory=list)
    predefined_personas: list[Identifier] = Field(default_factory=list)
    persona_category: PersonaCategory | None = None
