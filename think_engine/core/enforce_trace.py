"""Trace Enforcement - optional existence checks for revision and branch references.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - Only consulted when trace_strict_references is enabled; by default
      revisesThought / branchFromThought stay caller-trusted
"""

from think_engine.core.errors import error_result
from think_engine.core.thought_history import ThoughtHistory
from think_engine.schemas.trace import Thought


def check_revision_reference(thought: Thought, history: ThoughtHistory) -> dict | None:
    """A revision must name an earlier, stored thought."""
    target = thought.revises_thought
    if not thought.is_revision or target is None:
        return None
    if target >= thought.thought_number or not history.has_thought(target, thought.branch_id):
        return error_result(
            "INVALID_THOUGHT_REFERENCE",
            f"revisesThought {target} does not reference an earlier recorded thought.",
            field="revisesThought", value=target,
        )
    return None


def check_branch_anchor(thought: Thought, history: ThoughtHistory) -> dict | None:
    """A branch must be anchored at a stored main-line thought."""
    anchor = thought.branch_from_thought
    if anchor is None:
        return None
    if not history.has_thought(anchor):
        return error_result(
            "INVALID_THOUGHT_REFERENCE",
            f"branchFromThought {anchor} does not reference a recorded thought.",
            field="branchFromThought", value=anchor,
        )
    return None


def validate_thought_references(thought: Thought, history: ThoughtHistory) -> dict | None:
    """Chain strict-mode reference checks. Returns first error or None."""
    return (
        check_revision_reference(thought, history)
        or check_branch_anchor(thought, history)
    )
