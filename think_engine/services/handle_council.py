"""Council Handlers - multi-persona deliberation sessions keyed by sessionId.

Invariants:
    - Personas resolve in order: predefinedPersonas, then personaCategory, then custom
      personas (a custom persona overrides a predefined one with the same id)
    - Checks run before any mutation: roster/turn/reference rules, stage order,
      iteration order, then session open (a regression on a closed session is
      still reported as a regression)
    - A session's state is created only when its first call is accepted

Design Decisions:
    - PersonaRegistry is injected (constructor), never imported as a global
      (ADR: session isolation and testability)
"""

import logging

from think_engine.config import Settings
from think_engine.core.deliberation_state import DeliberationState
from think_engine.core.domain_types import COUNCIL_STAGE_ORDER, SessionId, ToolName
from think_engine.core.enforce_council import identify_contributions, validate_deliberation
from think_engine.core.enforce_stages import (
    check_iteration_monotonic, check_session_open, check_stage_progression,
)
from think_engine.core.errors import error_result
from think_engine.core.format_artifacts import format_deliberation
from think_engine.core.persona_registry import PersonaRegistry
from think_engine.core.projections import project_deliberation
from think_engine.schemas.council import Deliberation, Persona
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


class CouncilHandlers:
    """council tool: one DeliberationState per sessionId."""

    def __init__(self, settings: Settings, registry: PersonaRegistry):
        self.settings = settings
        self.registry = registry
        self.sessions: dict[SessionId, DeliberationState] = {}

    def resolve_personas(self, deliberation: Deliberation) -> tuple[list[Persona], dict | None]:
        """Roster for this call, or an error when a predefined id is unknown."""
        roster: dict[str, Persona] = {}
        for persona_id in deliberation.predefined_personas:
            persona = self.registry.get(persona_id)
            if persona is None:
                return [], error_result(
                    "PERSONA_NOT_FOUND",
                    f"Predefined persona '{persona_id}' does not exist.",
                    persona_id=persona_id,
                )
            roster.setdefault(persona.id, persona)
        if deliberation.persona_category:
            for persona in self.registry.by_category(deliberation.persona_category):
                roster.setdefault(persona.id, persona)
        for persona in deliberation.personas:
            roster[persona.id] = persona
        return list(roster.values()), None

    def process_deliberation(self, input_data: dict) -> dict:
        deliberation = validate_artifact(Deliberation, input_data, ToolName.COUNCIL.value)
        session_id = SessionId(deliberation.session_id)
        state = self.sessions.get(session_id) or DeliberationState(session_id=session_id)

        roster, error = self.resolve_personas(deliberation)
        if error:
            return error

        contributions = identify_contributions(deliberation.contributions)
        error = (
            validate_deliberation(
                submitted_personas=deliberation.personas,
                roster=roster,
                recorded_personas=state.personas,
                contributions=contributions,
                recorded_contributions=state.contributions,
                active_persona_id=deliberation.active_persona_id,
                next_persona_id=deliberation.next_persona_id,
            )
            or check_stage_progression(state.stage, deliberation.stage, COUNCIL_STAGE_ORDER)
            or check_iteration_monotonic(state.iteration, deliberation.iteration)
            or check_session_open(state.completed, "Deliberation", session_id)
        )
        if error:
            return error

        state.commit(deliberation, roster, contributions)
        self.sessions[session_id] = state

        if self.settings.render_artifacts:
            names = {p.id: p.name for p in state.personas.values()}
            logger.info(
                format_deliberation(deliberation, names),
                extra={"tool_name": ToolName.COUNCIL.value, "session_id": session_id},
            )
        return {
            "status": "ok",
            **project_deliberation(deliberation, state.persona_ids, state.contribution_count),
        }

    def get_session(self, session_id: str) -> DeliberationState | None:
        return self.sessions.get(SessionId(session_id))
