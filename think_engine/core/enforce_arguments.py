"""Argument Enforcement - structural edge rules and the suggested-next-move table.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - validate_argument_edges chains all checks: first error wins
    - suggest_next_types always returns a non-empty tuple

Design Decisions:
    - Referenced ids that do not exist yet are NOT rejected here; callers may
      reference arguments they submit later (reported as unresolvedReferences)
    - Next-move guidance is a lookup table, never hidden state
"""

from think_engine.core.domain_types import ArgumentType
from think_engine.core.errors import error_result
from think_engine.schemas.debate import Argument


NEXT_ARGUMENT_TYPES: dict[ArgumentType, tuple[ArgumentType, ...]] = {
    ArgumentType.THESIS: (ArgumentType.ANTITHESIS, ArgumentType.OBJECTION),
    ArgumentType.ANTITHESIS: (ArgumentType.SYNTHESIS, ArgumentType.REBUTTAL),
    ArgumentType.OBJECTION: (ArgumentType.SYNTHESIS, ArgumentType.REBUTTAL),
    ArgumentType.REBUTTAL: (ArgumentType.SYNTHESIS, ArgumentType.REBUTTAL),
    # synthesis opens a new thread
    ArgumentType.SYNTHESIS: (ArgumentType.THESIS,),
}


def suggest_next_types(argument_type: ArgumentType) -> tuple[ArgumentType, ...]:
    """Advisory next argument types for a node of the given type."""
    return NEXT_ARGUMENT_TYPES[ArgumentType(argument_type)]


def check_self_reference(argument_id: str, argument: Argument) -> dict | None:
    """An argument may not respond to, support, or contradict itself."""
    fields = []
    if argument.responds_to == argument_id:
        fields.append("respondsTo")
    if argument_id in argument.supports:
        fields.append("supports")
    if argument_id in argument.contradicts:
        fields.append("contradicts")
    if fields:
        return error_result(
            "SELF_REFERENCE",
            f"Argument '{argument_id}' references itself via {', '.join(fields)}.",
            argument_id=argument_id, fields=fields,
        )
    return None


def check_edges_disjoint(argument: Argument) -> dict | None:
    """No target may be both supported and contradicted by the same argument."""
    overlap = sorted(set(argument.supports) & set(argument.contradicts))
    if overlap:
        return error_result(
            "CONFLICTING_EDGES",
            f"Argument both supports and contradicts: {overlap}.",
            ids=overlap,
        )
    return None


def validate_argument_edges(argument_id: str, argument: Argument) -> dict | None:
    """Chain all argument edge checks. Returns first error or None."""
    return (
        check_self_reference(argument_id, argument)
        or check_edges_disjoint(argument)
    )
