"""Trace enforcement tests - strict-mode reference existence."""

from think_engine.core.enforce_trace import validate_thought_references
from think_engine.core.thought_history import ThoughtHistory
from think_engine.schemas.trace import Thought

from tests.payloads import thought


def _t(number: int, **overrides) -> Thought:
    return Thought.model_validate(thought(number, 5, **overrides))


def _history_with(*numbers: int) -> ThoughtHistory:
    history = ThoughtHistory()
    for number in numbers:
        history.record(_t(number))
    return history


def test_plain_thought_passes():
    assert validate_thought_references(_t(1), ThoughtHistory()) is None


def test_revision_of_recorded_thought_passes():
    history = _history_with(1, 2)
    assert validate_thought_references(_t(3, isRevision=True, revisesThought=1), history) is None


def test_revision_of_unknown_thought_rejected():
    error = validate_thought_references(
        _t(3, isRevision=True, revisesThought=2), _history_with(1),
    )
    assert error["error_code"] == "INVALID_THOUGHT_REFERENCE"
    assert error["details"]["field"] == "revisesThought"


def test_revision_must_point_backwards():
    error = validate_thought_references(
        _t(2, isRevision=True, revisesThought=4), _history_with(1, 4),
    )
    assert error["error_code"] == "INVALID_THOUGHT_REFERENCE"


def test_branch_anchor_must_exist():
    error = validate_thought_references(
        _t(3, branchFromThought=2, branchId="b"), _history_with(1),
    )
    assert error["details"]["field"] == "branchFromThought"
