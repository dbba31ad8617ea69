"""Tool Dispatch - explicit routing from tool name to handler, wrapped in the envelope.

Invariants:
    - Every tool->handler mapping is visible: no getattr magic, no auto-discovery
    - Unknown tools return an UNKNOWN_TOOL envelope (never raises)
    - Validation failures become VALIDATION_ERROR envelopes via ArtifactValidationError.to_result()
    - Any other exception becomes INTERNAL_ERROR and is logged with its traceback
    - Every call is logged once with tool name, request id, error code, and timing

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: no convention-over-config)
    - Handlers split per tool family: each class owns only its own sessions
    - One ToolDispatch per engine instance; instances never share state
      (ADR: session isolation, no module singletons)
"""

import logging
import time
from collections.abc import Callable

from think_engine.config import Settings
from think_engine.core.deliberation_state import DeliberationState
from think_engine.core.diagram_state import DiagramState
from think_engine.core.errors import ArtifactValidationError, error_result
from think_engine.core.persona_library import build_default_registry
from think_engine.core.persona_registry import PersonaRegistry
from think_engine.services.handle_council import CouncilHandlers
from think_engine.services.handle_debate import DebateHandlers
from think_engine.services.handle_decide import DecideHandlers
from think_engine.services.handle_frameworks import FrameworkHandlers
from think_engine.services.handle_hypothesis import HypothesisHandlers
from think_engine.services.handle_map import MapHandlers
from think_engine.services.handle_reflect import ReflectHandlers
from think_engine.services.handle_trace import TraceHandlers
from think_engine.services.response_envelope import new_request_id, wrap_result

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, settings: Settings, registry: PersonaRegistry | None = None):
        self.settings = settings
        self.registry = registry if registry is not None else build_default_registry()

        self.trace = TraceHandlers(settings)
        self.frameworks = FrameworkHandlers(settings)
        self.council = CouncilHandlers(settings, self.registry)
        self.decide = DecideHandlers(settings)
        self.reflect = ReflectHandlers(settings)
        self.hypothesis = HypothesisHandlers(settings)
        self.debate = DebateHandlers(settings)
        self.map = MapHandlers(settings)

        # ADR: every mapping explicit; adding a tool requires editing this dict
        self._handlers: dict[str, Callable[[dict], dict]] = {
            "trace": self.trace.process_thought,
            "model": self.frameworks.process_mental_model,
            "pattern": self.frameworks.process_design_pattern,
            "paradigm": self.frameworks.process_paradigm,
            "debug": self.frameworks.process_debugging,
            "council": self.council.process_deliberation,
            "decide": self.decide.process_decision,
            "reflect": self.reflect.process_monitoring,
            "hypothesis": self.hypothesis.process_inquiry,
            "debate": self.debate.process_argument,
            "map": self.map.process_operation,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def execute(self, tool_name: str, input_data: object) -> dict:
        """Route tool_name to its handler and return the envelope as a wire dict."""
        started = time.perf_counter()
        request_id = new_request_id()
        result = self._run(tool_name, input_data)
        envelope = wrap_result(
            tool_name, result, started, self.settings.engine_version, request_id,
        )
        self._log_tool_call(tool_name, result, request_id, envelope.metadata.processing_time_ms)
        return envelope.to_wire()

    def _run(self, tool_name: str, input_data: object) -> dict:
        handler = self._handlers.get(tool_name)
        if not handler:
            return error_result(
                "UNKNOWN_TOOL",
                f"Tool '{tool_name}' does not exist.",
                available_tools=self.tool_names,
            )
        try:
            return handler(input_data)
        except ArtifactValidationError as e:
            return e.to_result()
        except Exception:
            logger.exception(
                f"Unhandled error in tool '{tool_name}'",
                extra={"tool_name": tool_name, "error_code": "INTERNAL_ERROR"},
            )
            return error_result("INTERNAL_ERROR", "An unexpected error occurred")

    def _log_tool_call(
        self, tool_name: str, result: dict, request_id: str, elapsed_ms: float,
    ) -> None:
        error_code = result.get("error_code")
        extra = {
            "tool_name": tool_name,
            "request_id": request_id,
            "processing_time_ms": elapsed_ms,
        }
        if error_code:
            extra["error_code"] = error_code
            logger.warning(f"Tool '{tool_name}' rejected: {result.get('message')}", extra=extra)
        else:
            logger.info(f"Tool '{tool_name}' ok", extra=extra)

    # ─── Read-only session views ────────────────────────────────

    def diagram(self, diagram_id: str) -> DiagramState | None:
        return self.map.get_diagram(diagram_id)

    def deliberation(self, session_id: str) -> DeliberationState | None:
        return self.council.get_session(session_id)

    def confidence_progression(self, monitoring_id: str) -> dict | None:
        return self.reflect.confidence_progression(monitoring_id)

    def hypothesis_evolution(self, inquiry_id: str) -> dict | None:
        return self.hypothesis.hypothesis_evolution(inquiry_id)
