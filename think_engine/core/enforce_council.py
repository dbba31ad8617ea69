"""Council Enforcement - roster, turn-taking, and reference rules for deliberations.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - validate_deliberation chains all checks: first error wins
    - A contribution without an id is identified as c<position> (1-based)
    - referenceIds resolve only to contributions recorded earlier: in prior calls
      or earlier in the same submitted list
    - A recorded contribution is immutable: resubmitting its id with other content
      is CONTRIBUTION_MUTATED

Design Decisions:
    - Stage and iteration discipline lives in enforce_stages (shared with decide)
    - Turn-taking validates the caller's choice only; the engine never picks a persona
"""

from think_engine.core.errors import error_result
from think_engine.schemas.council import Contribution, Persona


def identify_contributions(
    contributions: list[Contribution],
) -> list[tuple[str, Contribution]]:
    """Pair every contribution with its explicit or positional id."""
    return [
        (c.id or f"c{position}", c)
        for position, c in enumerate(contributions, start=1)
    ]


def check_unique_persona_ids(personas: list[Persona]) -> dict | None:
    seen: set[str] = set()
    duplicates = []
    for persona in personas:
        if persona.id in seen and persona.id not in duplicates:
            duplicates.append(persona.id)
        seen.add(persona.id)
    if duplicates:
        return error_result(
            "DUPLICATE_ID",
            f"Persona ids must be unique; duplicated: {duplicates}.",
            ids=duplicates,
        )
    return None


def check_personas_unchanged(
    recorded: dict[str, Persona], roster: list[Persona],
) -> dict | None:
    """A persona already introduced into the session may not be redefined."""
    changed = [
        p.id for p in roster if p.id in recorded and recorded[p.id] != p
    ]
    if changed:
        return error_result(
            "PERSONA_MUTATED",
            f"Personas are immutable once introduced; changed: {changed}.",
            ids=changed,
        )
    return None


def check_roster_not_empty(roster_ids: set[str]) -> dict | None:
    if not roster_ids:
        return error_result(
            "NO_PERSONAS",
            "No personas provided. Specify predefinedPersonas, "
            "personaCategory, or custom personas.",
        )
    return None


def check_contribution_personas(
    contributions: list[tuple[str, Contribution]], roster_ids: set[str],
) -> dict | None:
    """Every contribution must come from a persona in the roster."""
    unknown = [
        {"contributionId": cid, "personaId": c.persona_id}
        for cid, c in contributions if c.persona_id not in roster_ids
    ]
    if unknown:
        names = sorted({u["personaId"] for u in unknown})
        return error_result(
            "PERSONA_MISMATCH",
            f"Contributions reference personas outside the roster: {names}.",
            contributions=unknown, roster=sorted(roster_ids),
        )
    return None


def check_unique_contribution_ids(
    contributions: list[tuple[str, Contribution]],
) -> dict | None:
    seen: set[str] = set()
    duplicates = []
    for cid, _ in contributions:
        if cid in seen and cid not in duplicates:
            duplicates.append(cid)
        seen.add(cid)
    if duplicates:
        return error_result(
            "DUPLICATE_ID",
            f"Contribution ids must be unique; duplicated: {duplicates}.",
            ids=duplicates,
        )
    return None


def check_contributions_unchanged(
    contributions: list[tuple[str, Contribution]], recorded: dict[str, Contribution],
) -> dict | None:
    """A contribution id already recorded in the session must carry the same content."""
    changed = [
        cid for cid, c in contributions
        if cid in recorded and _content(recorded[cid]) != _content(c)
    ]
    if changed:
        return error_result(
            "CONTRIBUTION_MUTATED",
            f"Recorded contributions are immutable; changed: {changed}. "
            "Resubmit the full contribution list or give new contributions explicit ids.",
            ids=changed,
        )
    return None


def _content(contribution: Contribution) -> dict:
    return contribution.model_dump(exclude={"id"})


def check_contribution_references(
    contributions: list[tuple[str, Contribution]], recorded_ids: set[str],
) -> dict | None:
    """referenceIds must name a contribution recorded before the referencing one."""
    known = set(recorded_ids)
    for cid, contribution in contributions:
        if cid in contribution.reference_ids:
            return error_result(
                "SELF_REFERENCE",
                f"Contribution '{cid}' references itself.",
                contribution_id=cid,
            )
        missing = [r for r in contribution.reference_ids if r not in known]
        if missing:
            return error_result(
                "DANGLING_REFERENCE",
                f"Contribution '{cid}' references unknown contributions: {missing}.",
                contribution_id=cid, missing=missing,
            )
        known.add(cid)
    return None


def check_active_persona(active_id: str, roster_ids: set[str]) -> dict | None:
    if active_id not in roster_ids:
        return error_result(
            "UNKNOWN_ACTIVE_PERSONA",
            f"activePersonaId '{active_id}' is not in the persona roster.",
            persona_id=active_id,
        )
    return None


def check_next_persona(
    next_id: str | None, active_id: str, roster_ids: set[str],
) -> dict | None:
    """nextPersonaId, when given, must be a different roster member."""
    if next_id is None:
        return None
    if next_id not in roster_ids:
        return error_result(
            "TURN_TAKING_VIOLATION",
            f"nextPersonaId '{next_id}' is not in the persona roster.",
            persona_id=next_id,
        )
    if next_id == active_id:
        return error_result(
            "TURN_TAKING_VIOLATION",
            f"nextPersonaId must differ from activePersonaId ('{active_id}').",
            persona_id=next_id,
        )
    return None


def validate_deliberation(
    *,
    submitted_personas: list[Persona],
    roster: list[Persona],
    recorded_personas: dict[str, Persona],
    contributions: list[tuple[str, Contribution]],
    recorded_contributions: dict[str, Contribution],
    active_persona_id: str,
    next_persona_id: str | None,
) -> dict | None:
    """Chain all council roster/turn/reference checks. Returns first error or None."""
    roster_ids = {p.id for p in roster} | set(recorded_personas)
    return (
        check_unique_persona_ids(submitted_personas)
        or check_roster_not_empty(roster_ids)
        or check_personas_unchanged(recorded_personas, roster)
        or check_contribution_personas(contributions, roster_ids)
        or check_unique_contribution_ids(contributions)
        or check_contributions_unchanged(contributions, recorded_contributions)
        or check_contribution_references(contributions, set(recorded_contributions))
        or check_active_persona(active_persona_id, roster_ids)
        or check_next_persona(next_persona_id, active_persona_id, roster_ids)
    )
