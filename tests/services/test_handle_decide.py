"""Decide handler tests - stage monotonicity per decisionId, references, advisories."""

from think_engine.services.handle_decide import DecideHandlers

from tests.payloads import decision


def test_first_frame_accepted(settings):
    result = DecideHandlers(settings).process_decision(decision())
    assert result["status"] == "ok"
    assert result["optionCount"] == 2
    assert result["advisories"] == []


def test_decision_then_problem_definition_is_stage_regression(settings):
    handlers = DecideHandlers(settings)
    handlers.process_decision(decision(stage="decision", iteration=1))
    result = handlers.process_decision(decision(stage="problem-definition", iteration=2))
    assert result["error_code"] == "STAGE_REGRESSION"
    assert handlers.decisions["d1"].stage.value == "decision"
    assert handlers.decisions["d1"].stage_history == [handlers.decisions["d1"].stage]


def test_stages_are_tracked_per_decision(settings):
    handlers = DecideHandlers(settings)
    handlers.process_decision(decision(stage="evaluation"))
    result = handlers.process_decision(decision(decisionId="d2", stage="problem-definition"))
    assert result["status"] == "ok"


def test_dangling_option_reference_leaves_no_state(settings):
    handlers = DecideHandlers(settings)
    result = handlers.process_decision(decision(eisenhowerClassification=[
        {"optionId": "o9", "urgency": 1, "importance": 1, "quadrant": "eliminate"},
    ]))
    assert result["error_code"] == "DANGLING_REFERENCE"
    assert handlers.decisions == {}


def test_weight_advisory_does_not_block(settings):
    result = DecideHandlers(settings).process_decision(decision(criteria=[
        {"id": "c1", "name": "Cost", "description": "c", "weight": 0.4},
    ]))
    assert result["status"] == "ok"
    assert result["advisories"] == ["Criterion weights sum to 0.4, not 1."]


def test_terminal_frame_closes_decision(settings):
    handlers = DecideHandlers(settings)
    handlers.process_decision(decision(stage="decision", nextStageNeeded=False, recommendation="o1"))
    result = handlers.process_decision(decision(stage="decision", iteration=1))
    assert result["error_code"] == "SESSION_COMPLETED"


def test_regression_after_terminal_decision_frame(settings):
    handlers = DecideHandlers(settings)
    handlers.process_decision(decision(
        stage="decision", iteration=1, nextStageNeeded=False, recommendation="o1",
    ))
    result = handlers.process_decision(decision(stage="problem-definition", iteration=2))
    assert result["error_code"] == "STAGE_REGRESSION"
    assert handlers.decisions["d1"].completed is True
