"""Trace Handlers - sequential thinking with revision and branch bookkeeping.

Invariants:
    - The accepted thought is echoed field-for-field (plus history facts)
    - History bounds come from Settings (trace_max_* / trace_*_cleanup)
    - Reference checks run only when trace_strict_references is enabled

Design Decisions:
    - Caller-trusted references by default; strict mode is opt-in (ADR: flagged behaviour change)
"""

import logging

from think_engine.config import Settings
from think_engine.core.domain_types import ToolName
from think_engine.core.enforce_trace import validate_thought_references
from think_engine.core.format_artifacts import format_thought
from think_engine.core.projections import project_thought
from think_engine.core.thought_history import ThoughtHistory
from think_engine.schemas.trace import Thought
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


class TraceHandlers:
    """trace tool: one ThoughtHistory per engine."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.history = ThoughtHistory(
            max_thought_history=settings.trace_max_thought_history,
            max_branches=settings.trace_max_branches,
            max_thoughts_per_branch=settings.trace_max_thoughts_per_branch,
            enable_auto_cleanup=settings.trace_enable_auto_cleanup,
            cleanup_on_complete=settings.trace_cleanup_on_complete,
        )

    def process_thought(self, input_data: dict) -> dict:
        thought = validate_artifact(Thought, input_data, ToolName.TRACE.value)

        if self.settings.trace_strict_references:
            error = validate_thought_references(thought, self.history)
            if error:
                return error

        self.history.record(thought)
        if self.settings.render_artifacts:
            logger.info(format_thought(thought), extra={"tool_name": ToolName.TRACE.value})

        return {
            "status": "ok",
            **project_thought(thought, len(self.history.history), self.history.branch_ids),
        }
