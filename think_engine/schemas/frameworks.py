"""Framework Tool Schemas - stateless mental model, pattern, paradigm, and debugging records.

Invariants:
    - The name field is one of a fixed enum per tool
    - Step/benefit/limitation lists hold at least one entry
"""

from pydantic import Field

from think_engine.core.domain_types import (
    DebuggingApproachName, DesignPatternName, MentalModelName, ParadigmName,
)
from think_engine.schemas.common import (
    ArtifactModel, NonEmptyStr, NonEmptyTextList, Text,
)


class MentalModel(ArtifactModel):
    model_name: MentalModelName
    problem: NonEmptyStr
    steps: NonEmptyTextList
    reasoning: NonEmptyStr
    conclusion: NonEmptyStr


class DesignPattern(ArtifactModel):
    pattern_name: DesignPatternName
    context: NonEmptyStr
    implementation: NonEmptyTextList
    benefits: NonEmptyTextList
    tradeoffs: NonEmptyTextList
    code_example: Text | None = None
    languages: list[Text] = Field(default_factory=list)


class ProgrammingParadigm(ArtifactModel):
    paradigm_name: ParadigmName
    problem: NonEmptyStr
    approach: NonEmptyTextList
    benefits: NonEmptyTextList
    limitations: NonEmptyTextList
    code_example: Text | None = None
    languages: list[Text] = Field(default_factory=list)


class DebuggingApproach(ArtifactModel):
    approach_name: DebuggingApproachName
    issue: NonEmptyStr
    steps: NonEmptyTextList
    findings: NonEmptyStr
    resolution: NonEmptyStr
