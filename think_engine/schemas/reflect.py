"""Metacognitive Monitoring Schemas - knowledge, claim, and reasoning self-assessments."""

from pydantic import Field

from think_engine.core.domain_types import (
    AssessmentType, ClaimStatus, KnowledgeLevel, MonitoringStage,
)
from think_engine.schemas.common import (
    ArtifactModel, Flag, Identifier, NonEmptyStr, NonNegativeInt, Score10,
    Text, UnitInterval,
)


class KnowledgeAssessment(ArtifactModel):
    domain: NonEmptyStr
    knowledge_level: KnowledgeLevel
    confidence_score: UnitInterval
    supporting_evidence: NonEmptyStr
    known_limitations: list[Text]
    relevant_training_cutoff: Text | None = None


class ClaimAssessment(ArtifactModel):
    claim: NonEmptyStr
    status: ClaimStatus
    confidence_score: UnitInterval
    evidence_basis: NonEmptyStr
    falsifiability_criteria: Text | None = None
    alternative_interpretations: list[Text] = Field(default_factory=list)


class ReasoningAssessment(ArtifactModel):
    step: NonEmptyStr
    potential_biases: list[Text]
    assumptions: list[Text]
    logical_validity: Score10
    inference_strength: Score10


class MetacognitiveMonitoring(ArtifactModel):
    task: NonEmptyStr
    stage: MonitoringStage
    overall_confidence: UnitInterval
    uncertainty_areas: list[Text]
    recommended_approach: NonEmptyStr
    monitoring_id: Identifier
    iteration: NonNegativeInt
    next_assessment_needed: Flag
    knowledge_assessment: KnowledgeAssessment | None = None
    claims: list[ClaimAssessment] = Field(default_factory=list)
    reasoning_steps: list[ReasoningAssessment] = Field(default_factory=list)
    suggested_assessments: list[AssessmentType] = Field(default_factory=list)
