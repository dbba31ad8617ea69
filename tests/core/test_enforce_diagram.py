"""Diagram enforcement tests - pre-apply and post-apply rules for map operations."""

from think_engine.core.diagram_state import DiagramState, apply_operation
from think_engine.core.enforce_diagram import validate_applied, validate_operation
from think_engine.schemas.map import DiagramOperation

from tests.payloads import diagram_operation, edge, node


def _op(operation: str, elements=None, **overrides) -> DiagramOperation:
    return DiagramOperation.model_validate(diagram_operation(operation, elements, **overrides))


def _state_with(*elements: dict, **overrides) -> DiagramState:
    state = DiagramState(diagram_id="g1")
    op = _op("create", list(elements), **overrides)
    state.commit(op, apply_operation({}, op))
    return state


def _check(state, op):
    return validate_operation(state, op) or validate_applied(
        apply_operation(state.elements if state else {}, op),
    )


def test_edge_to_missing_nodes_rejected_and_nothing_applied():
    op = _op("create", [edge("e1", "a", "b")])
    error = _check(None, op)
    assert error["error_code"] == "DANGLING_REFERENCE"
    assert error["details"]["missing"] == ["a", "b"]


def test_edge_with_nodes_in_same_batch_accepted():
    op = _op("create", [node("a"), node("b"), edge("e1", "a", "b")])
    assert _check(None, op) is None


def test_edge_without_target_is_missing_endpoint():
    error = _check(None, _op("create", [node("a"), edge("e1", "a", None)]))
    assert error["error_code"] == "MISSING_ENDPOINT"
    assert error["details"]["fields"] == ["target"]


def test_non_observe_requires_elements():
    error = _check(None, _op("create", []))
    assert error["error_code"] == "MISSING_ELEMENTS"


def test_transform_requires_transformation_type():
    state = _state_with(node("a"))
    error = _check(state, _op("transform", [node("a")], iteration=1))
    assert error["error_code"] == "MISSING_TRANSFORMATION_TYPE"
    ok = _op("transform", [node("a", properties={"x": 5})], iteration=1, transformationType="move")
    assert _check(state, ok) is None


def test_create_existing_id_is_duplicate():
    state = _state_with(node("a"))
    assert _check(state, _op("create", [node("a")], iteration=1))["error_code"] == "DUPLICATE_ID"


def test_batch_with_repeated_id_is_duplicate():
    assert _check(None, _op("create", [node("a"), node("a")]))["error_code"] == "DUPLICATE_ID"


def test_update_of_unknown_element_rejected():
    state = _state_with(node("a"))
    error = _check(state, _op("update", [node("zz")], iteration=1))
    assert error["error_code"] == "UNKNOWN_ELEMENT"


def test_diagram_type_is_fixed_after_first_operation():
    state = _state_with(node("a"))
    error = _check(state, _op("create", [node("b")], diagramType="flowchart", iteration=1))
    assert error["error_code"] == "DIAGRAM_TYPE_MISMATCH"


def test_iteration_cannot_decrease():
    state = _state_with(node("a"), iteration=3)
    error = _check(state, _op("create", [node("b")], iteration=2))
    assert error["error_code"] == "ITERATION_REGRESSION"


def test_completed_diagram_only_allows_observe():
    state = _state_with(node("a"), nextOperationNeeded=False)
    assert _check(state, _op("create", [node("b")], iteration=1))["error_code"] == "SESSION_COMPLETED"
    assert validate_operation(state, _op("observe", iteration=0)) is None


def test_iteration_regression_on_completed_diagram_reports_regression():
    state = _state_with(node("a"), iteration=3, nextOperationNeeded=False)
    error = _check(state, _op("update", [node("a")], iteration=1))
    assert error["error_code"] == "ITERATION_REGRESSION"


def test_container_must_contain_known_elements():
    container = {"id": "box", "type": "container", "properties": {}, "contains": ["ghost"]}
    error = _check(None, _op("create", [container]))
    assert error["error_code"] == "DANGLING_REFERENCE"
    assert error["details"]["element_id"] == "box"
