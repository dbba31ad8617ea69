"""Decision State - per-decisionId record of the last accepted frame.

Invariants:
    - stage/iteration hold the last accepted values (None before the first call)
    - completed flips to True once nextStageNeeded=False is accepted
    - stage_history lists every accepted stage in call order
"""

from dataclasses import dataclass, field

from think_engine.core.domain_types import DecisionStage
from think_engine.schemas.decide import DecisionFrame


@dataclass
class DecisionState:
    decision_id: str
    stage: DecisionStage | None = None
    iteration: int | None = None
    completed: bool = False
    stage_history: list[DecisionStage] = field(default_factory=list)
    latest: DecisionFrame | None = None

    def commit(self, frame: DecisionFrame) -> None:
        self.stage = frame.stage
        self.iteration = frame.iteration
        self.completed = not frame.next_stage_needed
        self.stage_history.append(frame.stage)
        self.latest = frame
