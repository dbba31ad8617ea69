"""Stage Enforcement - forward-only stage machines shared by council and decide.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - Repeating the current stage or skipping ahead is allowed; moving back is not
    - iteration never decreases within one session
    - A completed session (terminal flag seen) accepts no further mutation
"""

from collections.abc import Sequence
from enum import Enum

from think_engine.core.errors import error_result


def check_stage_progression(
    previous: Enum | None, requested: Enum, order: Sequence[Enum],
) -> dict | None:
    """Reject a stage that sits earlier in order than the recorded one."""
    if previous is None:
        return None
    if order.index(requested) < order.index(previous):
        return error_result(
            "STAGE_REGRESSION",
            f"Stage cannot move backwards from '{previous.value}' "
            f"to '{requested.value}'.",
            previous_stage=previous.value, requested_stage=requested.value,
        )
    return None


def check_iteration_monotonic(previous: int | None, requested: int) -> dict | None:
    """Reject an iteration lower than the last recorded one."""
    if previous is not None and requested < previous:
        return error_result(
            "ITERATION_REGRESSION",
            f"Iteration cannot decrease from {previous} to {requested}.",
            previous_iteration=previous, requested_iteration=requested,
        )
    return None


def check_session_open(completed: bool, kind: str, session_id: str) -> dict | None:
    """Reject mutation of a session whose terminal flag was already submitted."""
    if completed:
        return error_result(
            "SESSION_COMPLETED",
            f"{kind} '{session_id}' is complete and accepts no further changes.",
            session_id=session_id,
        )
    return None
