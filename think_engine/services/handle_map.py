"""Map Handlers - visual reasoning over per-diagram element sets.

Invariants:
    - observe is a pure read: it never creates or mutates diagram state
    - Mutations are computed on a copy, validated, and only then committed
    - A diagram's state is created only when its first mutation is accepted
"""

import logging

from think_engine.config import Settings
from think_engine.core.diagram_state import DiagramState, apply_operation
from think_engine.core.domain_types import DiagramId, DiagramOperationType, ToolName
from think_engine.core.enforce_diagram import validate_applied, validate_operation
from think_engine.core.format_artifacts import format_diagram_operation
from think_engine.core.mermaid import render_mermaid
from think_engine.core.projections import project_diagram
from think_engine.schemas.map import DiagramOperation
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


class MapHandlers:
    """map tool: one DiagramState per diagramId."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.diagrams: dict[DiagramId, DiagramState] = {}

    def process_operation(self, input_data: dict) -> dict:
        operation = validate_artifact(DiagramOperation, input_data, ToolName.MAP.value)
        diagram_id = DiagramId(operation.diagram_id)
        state = self.diagrams.get(diagram_id)

        error = validate_operation(state, operation)
        if error:
            return error

        if operation.operation == DiagramOperationType.OBSERVE:
            elements = state.elements.values() if state else []
            return {
                "status": "ok",
                **project_diagram(
                    operation,
                    state.element_count if state else 0,
                    mermaid=render_mermaid(operation.diagram_type, elements),
                ),
            }

        applied = apply_operation(state.elements if state else {}, operation)
        error = validate_applied(applied)
        if error:
            return error

        state = state or DiagramState(diagram_id=diagram_id)
        state.commit(operation, applied)
        self.diagrams[diagram_id] = state

        if self.settings.render_artifacts:
            logger.info(
                format_diagram_operation(operation),
                extra={"tool_name": ToolName.MAP.value, "session_id": diagram_id},
            )
        return {"status": "ok", **project_diagram(operation, state.element_count, applied)}

    def get_diagram(self, diagram_id: str) -> DiagramState | None:
        return self.diagrams.get(DiagramId(diagram_id))
