"""Thought Schema - one numbered step of a sequential thinking chain.

Invariants:
    - thoughtNumber and totalThoughts are positive integers
    - revisesThought / branchFromThought, when present, are positive integers
    - Cross-call existence of referenced thoughts is NOT checked here (see enforce_trace)
"""

from think_engine.schemas.common import ArtifactModel, Flag, Identifier, NonEmptyStr, PositiveInt


class Thought(ArtifactModel):
    thought: NonEmptyStr
    thought_number: PositiveInt
    total_thoughts: PositiveInt
    next_thought_needed: Flag
    is_revision: Flag | None = None
    revises_thought: PositiveInt | None = None
    branch_from_thought: PositiveInt | None = None
    branch_id: Identifier | None = None
    needs_more_thoughts: Flag | None = None
