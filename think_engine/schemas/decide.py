"""Decision Frame Schemas - options, criteria, outcomes, and per-option analyses.

Invariants:
    - Criterion.weight >= 0; probabilities and confidences in [0, 1]
    - Eisenhower urgency/importance in [1, 5]; quadrant consistency checked in core
    - Every per-option record carries an optionId resolved in core/enforce_decision
    - iteration is a non-negative integer
"""

from typing import Annotated

from pydantic import Field

from think_engine.core.domain_types import (
    AnalysisType, CostBenefitType, DecisionStage, DoorType,
    EisenhowerQuadrant, RiskTolerance,
    EISENHOWER_MIN_RATING, EISENHOWER_MAX_RATING,
)
from think_engine.schemas.common import (
    ArtifactModel, Flag, Identifier, NonEmptyStr, NonNegativeFloat,
    NonNegativeInt, Number, Score10, Text, UnitInterval,
)

EisenhowerRating = Annotated[
    float, Field(strict=True, ge=EISENHOWER_MIN_RATING, le=EISENHOWER_MAX_RATING),
]


class Option(ArtifactModel):
    id: Identifier
    name: NonEmptyStr
    description: NonEmptyStr


class Criterion(ArtifactModel):
    id: Identifier
    name: NonEmptyStr
    description: NonEmptyStr
    weight: NonNegativeFloat


class Outcome(ArtifactModel):
    id: Identifier
    description: NonEmptyStr
    probability: UnitInterval
    value: Number
    option_id: Identifier
    confidence_in_estimate: UnitInterval


class EisenhowerClassification(ArtifactModel):
    option_id: Identifier
    urgency: EisenhowerRating
    importance: EisenhowerRating
    quadrant: EisenhowerQuadrant


class CostBenefitItem(ArtifactModel):
    option_id: Identifier
    description: NonEmptyStr
    amount: Number
    type: CostBenefitType
    category: Text | None = None
    timeframe: Text | None = None


class CostBenefitAnalysis(ArtifactModel):
    option_id: Identifier
    costs: list[CostBenefitItem]
    benefits: list[CostBenefitItem]
    net_value: Number
    benefit_cost_ratio: Number | None = None
    roi: Number | None = None
    discount_rate: Number | None = None
    time_period_years: Number | None = None
    npv: Number | None = None


class RiskItem(ArtifactModel):
    option_id: Identifier
    description: NonEmptyStr
    probability: UnitInterval
    impact: Score10
    risk_score: NonNegativeFloat
    category: Text | None = None
    mitigation: list[Text] = Field(default_factory=list)


class ReversibilityData(ArtifactModel):
    option_id: Identifier
    reversibility_score: Score10
    undo_cost: NonNegativeFloat
    time_to_reverse: NonNegativeFloat
    door_type: DoorType
    undo_complexity: Text | None = None
    reversibility_notes: Text | None = None


class TimeHorizonRegret(ArtifactModel):
    ten_minutes: Text
    ten_months: Text
    ten_years: Text


class RegretMinimizationData(ArtifactModel):
    option_id: Identifier
    future_self_perspective: NonEmptyStr
    potential_regrets: TimeHorizonRegret
    regret_score: Score10 | None = None
    time_horizon_analysis: Text | None = None


class DecisionFrame(ArtifactModel):
    decision_statement: NonEmptyStr
    options: list[Option]
    analysis_type: AnalysisType
    stage: DecisionStage
    decision_id: Identifier
    iteration: NonNegativeInt
    next_stage_needed: Flag
    criteria: list[Criterion] = Field(default_factory=list)
    stakeholders: list[Text] = Field(default_factory=list)
    constraints: list[Text] = Field(default_factory=list)
    time_horizon: Text | None = None
    risk_tolerance: RiskTolerance | None = None
    possible_outcomes: list[Outcome] = Field(default_factory=list)
    recommendation: Text | None = None
    rationale: Text | None = None
    eisenhower_classification: list[EisenhowerClassification] = Field(default_factory=list)
    cost_benefit_analysis: list[CostBenefitAnalysis] = Field(default_factory=list)
    risk_assessment: list[RiskItem] = Field(default_factory=list)
    reversibility_analysis: list[ReversibilityData] = Field(default_factory=list)
    regret_minimization_analysis: list[RegretMinimizationData] = Field(default_factory=list)
