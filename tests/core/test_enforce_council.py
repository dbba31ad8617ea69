"""Council enforcement tests - roster membership, references, and turn-taking.

Tests cover:
    - Contribution ids: explicit or positional c<n>
    - PERSONA_MISMATCH, PERSONA_MUTATED, CONTRIBUTION_MUTATED, NO_PERSONAS, DUPLICATE_ID
    - Reference resolution: earlier contributions only
    - Active/next persona rules
"""

from think_engine.core.enforce_council import (
    check_contribution_references,
    check_contributions_unchanged,
    check_next_persona,
    check_personas_unchanged,
    identify_contributions,
    validate_deliberation,
)
from think_engine.schemas.council import Contribution, Persona

from tests.payloads import contribution, persona


def _persona(persona_id: str, **overrides) -> Persona:
    return Persona.model_validate(persona(persona_id, **overrides))


def _contrib(persona_id: str, **overrides) -> Contribution:
    return Contribution.model_validate(contribution(persona_id, **overrides))


def _validate(roster, contributions, active="p1", next_id=None, recorded=None, recorded_contributions=None):
    return validate_deliberation(
        submitted_personas=roster,
        roster=roster,
        recorded_personas=recorded or {},
        contributions=identify_contributions(contributions),
        recorded_contributions=recorded_contributions or {},
        active_persona_id=active,
        next_persona_id=next_id,
    )


def test_identify_contributions_uses_position_when_id_missing():
    pairs = identify_contributions([_contrib("p1"), _contrib("p2", id="x")])
    assert [cid for cid, _ in pairs] == ["c1", "x"]


def test_valid_deliberation_passes():
    roster = [_persona("p1"), _persona("p2")]
    assert _validate(roster, [_contrib("p1"), _contrib("p2")], next_id="p2") is None


def test_contribution_from_outside_roster_is_persona_mismatch():
    error = _validate([_persona("p2"), _persona("p3")], [_contrib("p1")], active="p2")
    assert error["error_code"] == "PERSONA_MISMATCH"
    assert error["details"]["contributions"] == [{"contributionId": "c1", "personaId": "p1"}]


def test_empty_roster_is_no_personas():
    assert _validate([], [])["error_code"] == "NO_PERSONAS"


def test_duplicate_persona_ids_rejected():
    error = _validate([_persona("p1"), _persona("p1")], [])
    assert error["error_code"] == "DUPLICATE_ID"


def test_duplicate_contribution_ids_rejected():
    error = _validate([_persona("p1")], [_contrib("p1", id="a"), _contrib("p1", id="a")])
    assert error["error_code"] == "DUPLICATE_ID"
    assert error["details"]["ids"] == ["a"]


def test_recorded_persona_cannot_change():
    recorded = {"p1": _persona("p1")}
    error = check_personas_unchanged(recorded, [_persona("p1", background="Rewritten")])
    assert error["error_code"] == "PERSONA_MUTATED"
    assert check_personas_unchanged(recorded, [_persona("p1")]) is None


def test_recorded_personas_remain_in_roster():
    recorded = {"p1": _persona("p1")}
    error = _validate([_persona("p2")], [_contrib("p1")], active="p2", recorded=recorded)
    assert error is None


def test_reference_to_earlier_contribution_in_same_list():
    pairs = identify_contributions([_contrib("p1"), _contrib("p2", referenceIds=["c1"])])
    assert check_contribution_references(pairs, set()) is None


def test_reference_to_later_contribution_is_dangling():
    pairs = identify_contributions([_contrib("p1", referenceIds=["c2"]), _contrib("p2")])
    error = check_contribution_references(pairs, set())
    assert error["error_code"] == "DANGLING_REFERENCE"
    assert error["details"]["missing"] == ["c2"]


def test_reference_to_recorded_contribution_passes():
    pairs = identify_contributions([_contrib("p1", id="new", referenceIds=["old"])])
    assert check_contribution_references(pairs, {"old"}) is None


def test_self_reference_rejected():
    pairs = identify_contributions([_contrib("p1", referenceIds=["c1"])])
    assert check_contribution_references(pairs, set())["error_code"] == "SELF_REFERENCE"


def test_active_persona_must_be_in_roster():
    error = _validate([_persona("p1")], [], active="ghost")
    assert error["error_code"] == "UNKNOWN_ACTIVE_PERSONA"


def test_next_persona_rules():
    roster = {"p1", "p2"}
    assert check_next_persona(None, "p1", roster) is None
    assert check_next_persona("p2", "p1", roster) is None
    assert check_next_persona("p1", "p1", roster)["error_code"] == "TURN_TAKING_VIOLATION"
    assert check_next_persona("p9", "p1", roster)["error_code"] == "TURN_TAKING_VIOLATION"


def test_recorded_contribution_cannot_change():
    recorded = {"c1": _contrib("p1", content="first idea")}
    pairs = identify_contributions([_contrib("p2", content="second idea")])
    error = check_contributions_unchanged(pairs, recorded)
    assert error["error_code"] == "CONTRIBUTION_MUTATED"
    assert error["details"]["ids"] == ["c1"]


def test_resubmitted_contribution_with_explicit_id_matches_positional_record():
    recorded = {"c1": _contrib("p1")}
    pairs = identify_contributions([_contrib("p1", id="c1"), _contrib("p2")])
    assert check_contributions_unchanged(pairs, recorded) is None


def test_mutated_contribution_rejected_in_chain():
    recorded = {"a": _contrib("p1", id="a")}
    error = _validate(
        [_persona("p1"), _persona("p2")],
        [_contrib("p1", id="a", confidence=0.1)],
        recorded_contributions=recorded,
    )
    assert error["error_code"] == "CONTRIBUTION_MUTATED"
