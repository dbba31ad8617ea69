"""Debate Handlers - structured argumentation over one shared argument graph.

Invariants:
    - Self reference and support/contradict overlap are rejected before any mutation
    - Missing argumentId is generated as arg-<hex>; resubmitting an id replaces the node
    - Unknown referenced ids are reported (unresolvedReferences), not rejected
"""

import logging
import uuid

from think_engine.config import Settings
from think_engine.core.argument_graph import ArgumentGraph
from think_engine.core.domain_types import ToolName
from think_engine.core.enforce_arguments import suggest_next_types, validate_argument_edges
from think_engine.core.format_artifacts import format_argument
from think_engine.core.projections import project_argument
from think_engine.schemas.debate import Argument
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


def _new_argument_id() -> str:
    return f"arg-{uuid.uuid4().hex[:8]}"


class DebateHandlers:
    """debate tool: validate edges, then thread the node into the graph."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.graph = ArgumentGraph()

    def process_argument(self, input_data: dict) -> dict:
        argument = validate_artifact(Argument, input_data, ToolName.DEBATE.value)
        argument_id = argument.argument_id or _new_argument_id()

        error = validate_argument_edges(argument_id, argument)
        if error:
            return error

        unresolved = self.graph.unresolved_references(argument_id, argument)
        argument = argument.model_copy(update={"argument_id": argument_id})
        root = self.graph.add(argument_id, argument)

        if self.settings.render_artifacts:
            logger.info(
                format_argument(argument_id, argument),
                extra={"tool_name": ToolName.DEBATE.value},
            )
        return {
            "status": "ok",
            **project_argument(
                argument_id,
                argument,
                suggest_next_types(argument.argument_type),
                root,
                len(self.graph.threads[root]),
                unresolved,
            ),
        }
