"""Response Projections - the caller-visible subset of each accepted artifact.

Invariants:
    - Pure functions: validated model (+ computed facts) in, camelCase dict out
    - project_thought echoes every declared Thought field unchanged
    - Stateless framework tools report presence flags, never the full artifact
"""

from think_engine.core.diagram_state import AppliedOperation
from think_engine.core.domain_types import ArgumentType
from think_engine.schemas.council import Deliberation
from think_engine.schemas.debate import Argument
from think_engine.schemas.decide import DecisionFrame
from think_engine.schemas.frameworks import (
    DebuggingApproach, DesignPattern, MentalModel, ProgrammingParadigm,
)
from think_engine.schemas.hypothesis import ScientificInquiry
from think_engine.schemas.map import DiagramOperation
from think_engine.schemas.reflect import MetacognitiveMonitoring
from think_engine.schemas.trace import Thought


def project_thought(thought: Thought, history_length: int, branch_ids: list[str]) -> dict:
    return {
        **thought.to_wire(),
        "thoughtHistoryLength": history_length,
        "branches": branch_ids,
    }


def project_argument(
    argument_id: str,
    argument: Argument,
    suggested: tuple[ArgumentType, ...],
    thread_root: str,
    thread_length: int,
    unresolved: list[str],
) -> dict:
    return {
        "argumentId": argument_id,
        "argumentType": argument.argument_type.value,
        "claim": argument.claim,
        "confidence": argument.confidence,
        "nextArgumentNeeded": argument.next_argument_needed,
        "suggestedNextTypes": [t.value for t in suggested],
        "threadRootId": thread_root,
        "threadLength": thread_length,
        "unresolvedReferences": unresolved,
    }


def project_deliberation(
    deliberation: Deliberation, persona_ids: list[str], contribution_count: int,
) -> dict:
    return {
        "sessionId": deliberation.session_id,
        "topic": deliberation.topic,
        "stage": deliberation.stage.value,
        "iteration": deliberation.iteration,
        "activePersonaId": deliberation.active_persona_id,
        "nextPersonaId": deliberation.next_persona_id,
        "personaIds": persona_ids,
        "contributionCount": contribution_count,
        "consensusPointCount": len(deliberation.consensus_points),
        "disagreementCount": len(deliberation.disagreements),
        "nextContributionNeeded": deliberation.next_contribution_needed,
    }


def project_decision(frame: DecisionFrame, advisories: list[str]) -> dict:
    return {
        "decisionId": frame.decision_id,
        "decisionStatement": frame.decision_statement,
        "analysisType": frame.analysis_type.value,
        "stage": frame.stage.value,
        "iteration": frame.iteration,
        "optionCount": len(frame.options),
        "criteriaCount": len(frame.criteria),
        "outcomeCount": len(frame.possible_outcomes),
        "hasRecommendation": bool(frame.recommendation),
        "advisories": advisories,
        "nextStageNeeded": frame.next_stage_needed,
    }


def project_diagram(
    operation: DiagramOperation,
    element_count: int,
    applied: AppliedOperation | None = None,
    mermaid: str | None = None,
) -> dict:
    projection = {
        "diagramId": operation.diagram_id,
        "diagramType": operation.diagram_type.value,
        "operation": operation.operation.value,
        "iteration": operation.iteration,
        "elementCount": element_count,
        "nextOperationNeeded": operation.next_operation_needed,
    }
    if applied is not None:
        projection.update({
            "created": applied.created,
            "updated": applied.updated,
            "deleted": applied.deleted,
            "cascadedDeletes": applied.cascaded_deletes,
            "detached": applied.detached,
        })
    if mermaid is not None:
        projection["mermaid"] = mermaid
    for key, value in (
        ("observation", operation.observation),
        ("insight", operation.insight),
        ("hypothesis", operation.hypothesis),
    ):
        if value:
            projection[key] = value
    return projection


def project_mental_model(model: MentalModel) -> dict:
    return {
        "modelName": model.model_name.value,
        "status": "success",
        "hasSteps": bool(model.steps),
        "hasConclusion": bool(model.conclusion),
    }


def project_design_pattern(pattern: DesignPattern) -> dict:
    return {
        "patternName": pattern.pattern_name.value,
        "status": "success",
        "hasImplementation": bool(pattern.implementation),
        "hasCodeExample": bool(pattern.code_example),
    }


def project_paradigm(paradigm: ProgrammingParadigm) -> dict:
    return {
        "paradigmName": paradigm.paradigm_name.value,
        "status": "success",
        "hasApproach": bool(paradigm.approach),
        "hasCodeExample": bool(paradigm.code_example),
    }


def project_debugging(approach: DebuggingApproach) -> dict:
    return {
        "approachName": approach.approach_name.value,
        "status": "success",
        "hasSteps": bool(approach.steps),
        "hasResolution": bool(approach.resolution),
    }


def project_monitoring(entry: MetacognitiveMonitoring, total_assessments: int) -> dict:
    return {
        "task": entry.task,
        "stage": entry.stage.value,
        "monitoringId": entry.monitoring_id,
        "iteration": entry.iteration,
        "overallConfidence": entry.overall_confidence,
        "totalAssessments": total_assessments,
        "nextAssessmentNeeded": entry.next_assessment_needed,
    }


def project_inquiry(entry: ScientificInquiry, total_stages: int) -> dict:
    return {
        "stage": entry.stage.value,
        "inquiryId": entry.inquiry_id,
        "iteration": entry.iteration,
        "totalStages": total_stages,
        "nextStageNeeded": entry.next_stage_needed,
    }
