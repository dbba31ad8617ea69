"""Scientific Inquiry Schemas - hypotheses, experiments, and the inquiry stage record.

Invariants:
    - Prediction uses the wire keys if/then/else (Python keywords, aliased explicitly)
    - iteration is a positive integer for inquiries and hypotheses
"""

from pydantic import Field

from think_engine.core.domain_types import (
    HypothesisStatus, InquiryStage, VariableType,
)
from think_engine.schemas.common import (
    ArtifactModel, Flag, Identifier, NonEmptyStr, PositiveInt, Text,
    UnitInterval,
)


class Variable(ArtifactModel):
    name: NonEmptyStr
    type: VariableType
    operationalization: Text | None = None


class Prediction(ArtifactModel):
    if_: NonEmptyStr = Field(alias="if")
    then: NonEmptyStr
    else_: Text | None = Field(None, alias="else")


class HypothesisData(ArtifactModel):
    statement: NonEmptyStr
    variables: list[Variable]
    assumptions: list[Text]
    hypothesis_id: Identifier
    confidence: UnitInterval
    domain: NonEmptyStr
    iteration: PositiveInt
    status: HypothesisStatus
    alternative_to: list[Identifier] = Field(default_factory=list)
    refinement_of: Identifier | None = None


class ExperimentData(ArtifactModel):
    design: NonEmptyStr
    methodology: NonEmptyStr
    predictions: list[Prediction]
    experiment_id: Identifier
    hypothesis_id: Identifier
    control_measures: list[Text]
    results: Text | None = None
    outcome_matched: Flag | None = None
    unexpected_observations: list[Text] = Field(default_factory=list)
    limitations: list[Text] = Field(default_factory=list)
    next_steps: list[Text] = Field(default_factory=list)


class ScientificInquiry(ArtifactModel):
    stage: InquiryStage
    inquiry_id: Identifier
    iteration: PositiveInt
    next_stage_needed: Flag
    observation: Text | None = None
    question: Text | None = None
    hypothesis: HypothesisData | None = None
    experiment: ExperimentData | None = None
    analysis: Text | None = None
    conclusion: Text | None = None
