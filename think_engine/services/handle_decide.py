"""Decide Handlers - staged decision frames keyed by decisionId.

Invariants:
    - Stage order is forward-only per decisionId; iteration never decreases
    - Stage and iteration order are checked before the closed-frame check
    - Option/criterion identity, option references, and Eisenhower quadrants are
      checked before any mutation
    - Weight-sum notes are returned as advisories and never block the call
"""

import logging

from think_engine.config import Settings
from think_engine.core.decision_state import DecisionState
from think_engine.core.domain_types import DECISION_STAGE_ORDER, DecisionId, ToolName
from think_engine.core.enforce_decision import validate_decision_frame, weight_advisories
from think_engine.core.enforce_stages import (
    check_iteration_monotonic, check_session_open, check_stage_progression,
)
from think_engine.core.format_artifacts import format_decision
from think_engine.core.projections import project_decision
from think_engine.schemas.decide import DecisionFrame
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


class DecideHandlers:
    """decide tool: one DecisionState per decisionId."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.decisions: dict[DecisionId, DecisionState] = {}

    def process_decision(self, input_data: dict) -> dict:
        frame = validate_artifact(DecisionFrame, input_data, ToolName.DECIDE.value)
        decision_id = DecisionId(frame.decision_id)
        state = self.decisions.get(decision_id) or DecisionState(decision_id=decision_id)

        error = (
            check_stage_progression(state.stage, frame.stage, DECISION_STAGE_ORDER)
            or check_iteration_monotonic(state.iteration, frame.iteration)
            or check_session_open(state.completed, "Decision", decision_id)
            or validate_decision_frame(frame)
        )
        if error:
            return error

        state.commit(frame)
        self.decisions[decision_id] = state

        if self.settings.render_artifacts:
            logger.info(
                format_decision(frame),
                extra={"tool_name": ToolName.DECIDE.value, "session_id": decision_id},
            )
        return {"status": "ok", **project_decision(frame, weight_advisories(frame))}
