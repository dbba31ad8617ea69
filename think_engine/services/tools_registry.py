"""Tools Registry - names, descriptions, and JSON input schemas of the eleven tools.

Invariants:
    - One entry per ToolName, in ToolName order
    - input_schema is generated from the pydantic model (camelCase aliases), never hand-written

Design Decisions:
    - Explicit TOOL_MODELS / TOOL_DESCRIPTIONS dicts: every tool visible in one place
      (ADR: no auto-discovery)
"""

from typing import Any

from think_engine.core.domain_types import ToolName
from think_engine.schemas.common import ArtifactModel
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

TOOL_MODELS: dict[ToolName, type[ArtifactModel]] = {
    ToolName.TRACE: Thought,
    ToolName.MODEL: MentalModel,
    ToolName.PATTERN: DesignPattern,
    ToolName.PARADIGM: ProgrammingParadigm,
    ToolName.DEBUG: DebuggingApproach,
    ToolName.COUNCIL: Deliberation,
    ToolName.DECIDE: DecisionFrame,
    ToolName.REFLECT: MetacognitiveMonitoring,
    ToolName.HYPOTHESIS: ScientificInquiry,
    ToolName.DEBATE: Argument,
    ToolName.MAP: DiagramOperation,
}

TOOL_DESCRIPTIONS: dict[ToolName, str] = {
    ToolName.TRACE: (
        "Record one step of a sequential thought chain. Supports revisions of earlier "
        "thoughts and named branches. The thought is echoed back with history size."
    ),
    ToolName.MODEL: (
        "Apply a named mental model (first principles, opportunity cost, Pareto, ...) "
        "to a problem with explicit steps, reasoning and conclusion."
    ),
    ToolName.PATTERN: "Describe how a named software design pattern applies in a context.",
    ToolName.PARADIGM: "Describe how a named programming paradigm approaches a problem.",
    ToolName.DEBUG: "Record a systematic debugging approach: issue, steps, findings, resolution.",
    ToolName.COUNCIL: (
        "Advance a multi-persona deliberation. Contributions must come from roster "
        "personas; stages only move forward; the next speaker must differ from the active one."
    ),
    ToolName.DECIDE: (
        "Advance a structured decision analysis (weighted criteria, Eisenhower, "
        "cost-benefit, risk, reversibility, regret minimization). Stages only move forward."
    ),
    ToolName.REFLECT: (
        "Record a metacognitive self-assessment of knowledge, claims and reasoning, "
        "tracked per monitoring session."
    ),
    ToolName.HYPOTHESIS: (
        "Record one stage of a scientific inquiry: observation, question, hypothesis, "
        "experiment, analysis or conclusion."
    ),
    ToolName.DEBATE: (
        "Add an argument (thesis, antithesis, synthesis, objection, rebuttal) "
        "to the argument graph, linked by respondsTo, supports and contradicts."
    ),
    ToolName.MAP: (
        "Create, update, delete, transform or observe elements of a diagram. Deleting a "
        "node also deletes the edges attached to it."
    ),
}


def tool_definition(tool: ToolName) -> dict[str, Any]:
    return {
        "name": tool.value,
        "description": TOOL_DESCRIPTIONS[tool],
        "input_schema": TOOL_MODELS[tool].model_json_schema(by_alias=True),
    }


def all_tool_definitions() -> list[dict[str, Any]]:
    return [tool_definition(tool) for tool in ToolName]
