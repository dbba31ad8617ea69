"""Deliberation State - per-session council record accumulated across calls.

Invariants:
    - personas is append-only; a recorded persona never changes
    - contributions keyed by id, in first-seen order; a recorded contribution never changes
    - stage/iteration hold the last accepted values (None before the first call)
    - completed flips to True once nextContributionNeeded=False is accepted

Design Decisions:
    - Pure dataclass, no IO: CouncilHandlers owns a dict[SessionId, DeliberationState]
    - commit() is the only mutator and runs after every check passed
"""

from dataclasses import dataclass, field

from think_engine.core.domain_types import CouncilStage
from think_engine.schemas.council import Contribution, Deliberation, Persona


@dataclass
class DeliberationState:
    """Council session state, one per sessionId."""

    session_id: str
    topic: str = ""
    personas: dict[str, Persona] = field(default_factory=dict)
    contributions: dict[str, Contribution] = field(default_factory=dict)
    stage: CouncilStage | None = None
    iteration: int | None = None
    completed: bool = False
    latest: Deliberation | None = None

    @property
    def persona_ids(self) -> list[str]:
        return list(self.personas)

    @property
    def contribution_ids(self) -> set[str]:
        return set(self.contributions)

    @property
    def contribution_count(self) -> int:
        return len(self.contributions)

    def commit(
        self,
        deliberation: Deliberation,
        roster: list[Persona],
        contributions: list[tuple[str, Contribution]],
    ) -> None:
        for persona in roster:
            self.personas.setdefault(persona.id, persona)
        for contribution_id, contribution in contributions:
            self.contributions.setdefault(contribution_id, contribution)
        self.topic = deliberation.topic
        self.stage = deliberation.stage
        self.iteration = deliberation.iteration
        self.completed = not deliberation.next_contribution_needed
        self.latest = deliberation

    def summary(self) -> dict:
        """Read-only view for the sessions API."""
        latest = self.latest
        return {
            "sessionId": self.session_id,
            "topic": self.topic,
            "stage": self.stage.value if self.stage else None,
            "iteration": self.iteration,
            "completed": self.completed,
            "personaIds": self.persona_ids,
            "contributionCount": self.contribution_count,
            "consensusPoints": list(latest.consensus_points) if latest else [],
            "keyInsights": list(latest.key_insights) if latest else [],
            "openQuestions": list(latest.open_questions) if latest else [],
            "finalRecommendation": latest.final_recommendation if latest else None,
        }
