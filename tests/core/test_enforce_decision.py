"""Decision enforcement tests - identity, option references, Eisenhower quadrants, weights."""

import pytest

from think_engine.core.domain_types import EisenhowerQuadrant
from think_engine.core.enforce_decision import (
    expected_quadrant,
    validate_decision_frame,
    weight_advisories,
)
from think_engine.schemas.decide import DecisionFrame

from tests.payloads import decision


def _frame(**overrides) -> DecisionFrame:
    return DecisionFrame.model_validate(decision(**overrides))


@pytest.mark.parametrize("urgency,importance,quadrant", [
    (5, 5, EisenhowerQuadrant.DO_FIRST),
    (3, 3, EisenhowerQuadrant.DO_FIRST),
    (1, 4, EisenhowerQuadrant.SCHEDULE),
    (4, 2, EisenhowerQuadrant.DELEGATE),
    (2, 2, EisenhowerQuadrant.ELIMINATE),
])
def test_expected_quadrant(urgency, importance, quadrant):
    assert expected_quadrant(urgency, importance) == quadrant


def test_minimal_frame_is_valid():
    assert validate_decision_frame(_frame()) is None


def test_duplicate_option_ids_rejected():
    options = [
        {"id": "o1", "name": "A", "description": "a"},
        {"id": "o1", "name": "B", "description": "b"},
    ]
    error = validate_decision_frame(_frame(options=options))
    assert error["error_code"] == "DUPLICATE_ID"
    assert error["details"]["field"] == "options"


def test_duplicate_criterion_ids_rejected():
    criteria = [
        {"id": "c1", "name": "Cost", "description": "c", "weight": 0.5},
        {"id": "c1", "name": "Speed", "description": "s", "weight": 0.5},
    ]
    error = validate_decision_frame(_frame(criteria=criteria))
    assert error["details"]["field"] == "criteria"


def test_outcome_for_undeclared_option_is_dangling():
    outcomes = [{
        "id": "out1", "description": "d", "probability": 0.5, "value": 10,
        "optionId": "o9", "confidenceInEstimate": 0.5,
    }]
    error = validate_decision_frame(_frame(possibleOutcomes=outcomes))
    assert error["error_code"] == "DANGLING_REFERENCE"
    assert error["details"]["references"] == [
        {"field": "possibleOutcomes.0.optionId", "optionId": "o9"},
    ]


def test_cost_benefit_items_are_checked():
    analysis = [{
        "optionId": "o1",
        "costs": [{"optionId": "o7", "description": "licence", "amount": 10, "type": "monetary"}],
        "benefits": [],
        "netValue": -10,
    }]
    error = validate_decision_frame(_frame(costBenefitAnalysis=analysis))
    assert error["details"]["references"][0]["field"] == "costBenefitAnalysis.0.costs.0.optionId"


def test_inconsistent_quadrant_rejected():
    classification = [{"optionId": "o1", "urgency": 5, "importance": 5, "quadrant": "eliminate"}]
    error = validate_decision_frame(_frame(eisenhowerClassification=classification))
    assert error["error_code"] == "QUADRANT_MISMATCH"
    assert error["details"]["mismatches"][0]["expected"] == "do-first"


def test_weights_not_summing_to_one_are_advisory():
    criteria = [
        {"id": "c1", "name": "Cost", "description": "c", "weight": 2},
        {"id": "c2", "name": "Speed", "description": "s", "weight": 1},
    ]
    frame = _frame(criteria=criteria)
    assert validate_decision_frame(frame) is None
    assert weight_advisories(frame) == ["Criterion weights sum to 3, not 1."]


def test_weights_summing_to_one_have_no_advisory():
    criteria = [
        {"id": "c1", "name": "Cost", "description": "c", "weight": 0.25},
        {"id": "c2", "name": "Speed", "description": "s", "weight": 0.75},
    ]
    assert weight_advisories(_frame(criteria=criteria)) == []
