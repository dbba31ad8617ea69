"""Framework Handlers - stateless mental model, design pattern, paradigm, and debugging tools.

Invariants:
    - No state is read or written; each call is validate -> render -> project
    - Projections carry their own "status": "success" field
"""

import logging

from think_engine.config import Settings
from think_engine.core.domain_types import ToolName
from think_engine.core.format_artifacts import format_framework
from think_engine.core.projections import (
    project_debugging, project_design_pattern, project_mental_model, project_paradigm,
)
from think_engine.schemas.frameworks import (
    DebuggingApproach, DesignPattern, MentalModel, ProgrammingParadigm,
)
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


class FrameworkHandlers:
    """model / pattern / paradigm / debug tools."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _render(self, tool: ToolName, text: str) -> None:
        if self.settings.render_artifacts:
            logger.info(text, extra={"tool_name": tool.value})

    def process_mental_model(self, input_data: dict) -> dict:
        model = validate_artifact(MentalModel, input_data, ToolName.MODEL.value)
        self._render(ToolName.MODEL, format_framework(
            "Mental Model", model.model_name.value, {
                "Problem": model.problem,
                "Steps": model.steps,
                "Reasoning": model.reasoning,
                "Conclusion": model.conclusion,
            },
        ))
        return project_mental_model(model)

    def process_design_pattern(self, input_data: dict) -> dict:
        pattern = validate_artifact(DesignPattern, input_data, ToolName.PATTERN.value)
        self._render(ToolName.PATTERN, format_framework(
            "Design Pattern", pattern.pattern_name.value, {
                "Context": pattern.context,
                "Implementation": pattern.implementation,
                "Benefits": pattern.benefits,
                "Trade-offs": pattern.tradeoffs,
                "Languages": ", ".join(pattern.languages),
                "Code Example": pattern.code_example,
            },
        ))
        return project_design_pattern(pattern)

    def process_paradigm(self, input_data: dict) -> dict:
        paradigm = validate_artifact(ProgrammingParadigm, input_data, ToolName.PARADIGM.value)
        self._render(ToolName.PARADIGM, format_framework(
            "Programming Paradigm", paradigm.paradigm_name.value, {
                "Problem": paradigm.problem,
                "Approach": paradigm.approach,
                "Benefits": paradigm.benefits,
                "Limitations": paradigm.limitations,
                "Languages": ", ".join(paradigm.languages),
                "Code Example": paradigm.code_example,
            },
        ))
        return project_paradigm(paradigm)

    def process_debugging(self, input_data: dict) -> dict:
        approach = validate_artifact(DebuggingApproach, input_data, ToolName.DEBUG.value)
        self._render(ToolName.DEBUG, format_framework(
            "Debugging Approach", approach.approach_name.value, {
                "Issue": approach.issue,
                "Steps": approach.steps,
                "Findings": approach.findings,
                "Resolution": approach.resolution,
            },
        ))
        return project_debugging(approach)
