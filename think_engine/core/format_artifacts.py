"""Artifact Formatting - plain-text renderings of accepted artifacts for the log stream.

Invariants:
    - Pure string builders: no IO, no colour codes
    - Every renderer accepts a validated schema model and never fails on optional fields
"""

from think_engine.schemas.council import Deliberation
from think_engine.schemas.debate import Argument
from think_engine.schemas.decide import DecisionFrame
from think_engine.schemas.hypothesis import ScientificInquiry
from think_engine.schemas.map import DiagramOperation
from think_engine.schemas.reflect import MetacognitiveMonitoring
from think_engine.schemas.trace import Thought


def _numbered(title: str, items: list[str]) -> list[str]:
    if not items:
        return []
    return [f"{title}:"] + [f"  {i}. {item}" for i, item in enumerate(items, start=1)]


def format_thought(thought: Thought) -> str:
    position = f"Thought {thought.thought_number}/{thought.total_thoughts}"
    if thought.is_revision and thought.revises_thought:
        header = f"{position} (Revising Thought {thought.revises_thought}):"
    elif thought.branch_from_thought and thought.branch_id:
        header = (
            f'{position} (Branch "{thought.branch_id}" '
            f"from Thought {thought.branch_from_thought}):"
        )
    else:
        header = f"{position}:"
    lines = [f"{header} {thought.thought}"]
    if thought.next_thought_needed:
        lines.append("Continuing to next thought...")
        if thought.needs_more_thoughts:
            lines.append("More thoughts needed than initially estimated.")
    else:
        lines.append("Thinking process complete.")
    return "\n".join(lines)


def format_argument(argument_id: str, argument: Argument) -> str:
    lines = [
        f"Structured Argumentation [{argument_id}]",
        f"Type: {argument.argument_type.value} (confidence {argument.confidence:.2f})",
        f"Claim: {argument.claim}",
        *_numbered("Premises", argument.premises),
        f"Conclusion: {argument.conclusion}",
    ]
    if argument.responds_to:
        lines.append(f"Responds to: {argument.responds_to}")
    if argument.supports:
        lines.append(f"Supports: {', '.join(argument.supports)}")
    if argument.contradicts:
        lines.append(f"Contradicts: {', '.join(argument.contradicts)}")
    lines += _numbered("Strengths", argument.strengths)
    lines += _numbered("Weaknesses", argument.weaknesses)
    lines.append(
        "Next argument needed" if argument.next_argument_needed else "Argumentation complete"
    )
    return "\n".join(lines)


def format_deliberation(deliberation: Deliberation, persona_names: dict[str, str]) -> str:
    lines = [
        "Collaborative Reasoning Session",
        f"Topic: {deliberation.topic}",
        f"Stage: {deliberation.stage.value} (Iteration: {deliberation.iteration})",
        f"Active Persona: {persona_names.get(deliberation.active_persona_id, deliberation.active_persona_id)}",
    ]
    if deliberation.contributions:
        lines.append("Contributions:")
        for c in deliberation.contributions:
            name = persona_names.get(c.persona_id, c.persona_id)
            lines.append(f"  {name} ({c.type.value}, confidence: {c.confidence:.2f}): {c.content}")
    lines += _numbered("Consensus Points", deliberation.consensus_points)
    lines += _numbered("Key Insights", deliberation.key_insights)
    if deliberation.final_recommendation:
        lines.append(f"Final Recommendation: {deliberation.final_recommendation}")
    return "\n".join(lines)


def format_decision(frame: DecisionFrame) -> str:
    lines = [
        f"Decision Framework: {frame.decision_statement}",
        f"Analysis: {frame.analysis_type.value} | Stage: {frame.stage.value} "
        f"(Iteration: {frame.iteration})",
        *_numbered("Options", [f"{o.name}: {o.description}" for o in frame.options]),
        *_numbered("Criteria", [f"{c.name} (weight {c.weight:g})" for c in frame.criteria]),
    ]
    for item in frame.eisenhower_classification:
        lines.append(
            f"  {item.option_id}: Urgency: {item.urgency:g}/5, "
            f"Importance: {item.importance:g}/5 -> {item.quadrant.value}"
        )
    if frame.recommendation:
        lines.append(f"Recommendation: {frame.recommendation}")
    return "\n".join(lines)


def format_diagram_operation(operation: DiagramOperation) -> str:
    lines = [
        f"Visual Reasoning: {operation.operation.value.upper()} on {operation.diagram_id} "
        f"({operation.diagram_type.value}, iteration {operation.iteration})",
    ]
    for element in operation.elements or []:
        detail = f"  {element.type.value} {element.id}"
        if element.label:
            detail += f' "{element.label}"'
        if element.source or element.target:
            detail += f" {element.source} -> {element.target}"
        lines.append(detail)
    if operation.transformation_type:
        lines.append(f"Transformation: {operation.transformation_type.value}")
    for label, value in (
        ("Observation", operation.observation),
        ("Insight", operation.insight),
        ("Hypothesis", operation.hypothesis),
    ):
        if value:
            lines.append(f"{label}: {value}")
    return "\n".join(lines)


def format_framework(title: str, name: str, sections: dict[str, str | list[str] | None]) -> str:
    """Shared renderer for the stateless framework tools."""
    lines = [f"{title}: {name}"]
    for label, value in sections.items():
        if not value:
            continue
        if isinstance(value, list):
            lines += _numbered(label, value)
        else:
            lines.append(f"{label}: {value}")
    return "\n".join(lines)


def format_monitoring(entry: MetacognitiveMonitoring) -> str:
    lines = [
        f"Metacognitive Monitoring: {entry.task}",
        f"Stage: {entry.stage.value} (Iteration: {entry.iteration}) "
        f"| Overall confidence: {entry.overall_confidence:.2f}",
        *_numbered("Uncertainty Areas", entry.uncertainty_areas),
        f"Recommended Approach: {entry.recommended_approach}",
    ]
    for claim in entry.claims:
        lines.append(f"  [{claim.status.value}] {claim.claim} ({claim.confidence_score:.2f})")
    return "\n".join(lines)


def format_inquiry(entry: ScientificInquiry) -> str:
    lines = [f"Scientific Inquiry {entry.inquiry_id}: {entry.stage.value} (Iteration: {entry.iteration})"]
    for label, value in (
        ("Observation", entry.observation),
        ("Question", entry.question),
        ("Analysis", entry.analysis),
        ("Conclusion", entry.conclusion),
    ):
        if value:
            lines.append(f"{label}: {value}")
    if entry.hypothesis:
        h = entry.hypothesis
        lines.append(f"Hypothesis [{h.status.value}, {h.confidence:.2f}]: {h.statement}")
    if entry.experiment:
        lines.append(f"Experiment {entry.experiment.experiment_id}: {entry.experiment.design}")
    return "\n".join(lines)
