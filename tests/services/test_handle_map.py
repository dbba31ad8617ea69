"""Map handler tests - atomic mutation, cascade, observe as a pure read."""

from think_engine.services.handle_map import MapHandlers

from tests.payloads import diagram_operation, edge, node


def test_edge_to_missing_nodes_rejected_without_state(settings):
    handlers = MapHandlers(settings)
    result = handlers.process_operation(diagram_operation("create", [edge("e1", "a", "b")]))
    assert result["error_code"] == "DANGLING_REFERENCE"
    assert handlers.get_diagram("g1") is None


def test_create_then_delete_cascades(settings):
    handlers = MapHandlers(settings)
    created = handlers.process_operation(diagram_operation(
        "create", [node("a"), node("b"), edge("e1", "a", "b")],
    ))
    assert created["created"] == ["a", "b", "e1"]
    assert created["elementCount"] == 3

    deleted = handlers.process_operation(diagram_operation("delete", [node("a")], iteration=1))
    assert deleted["deleted"] == ["a"]
    assert deleted["cascadedDeletes"] == ["e1"]
    assert deleted["elementCount"] == 1


def test_rejected_update_leaves_elements_unchanged(settings):
    handlers = MapHandlers(settings)
    handlers.process_operation(diagram_operation("create", [node("a"), node("b"), edge("e1", "a", "b")]))
    result = handlers.process_operation(diagram_operation(
        "update", [edge("e1", "a", "ghost")], iteration=1,
    ))
    assert result["error_code"] == "DANGLING_REFERENCE"
    assert handlers.get_diagram("g1").elements["e1"].target == "b"
    assert len(handlers.get_diagram("g1").history) == 1


def test_observe_renders_without_mutating(settings):
    handlers = MapHandlers(settings)
    handlers.process_operation(diagram_operation("create", [node("a"), node("b"), edge("e1", "a", "b")]))
    result = handlers.process_operation(diagram_operation(
        "observe", iteration=1, observation="a feeds b",
    ))
    assert result["mermaid"].startswith("graph TD")
    assert result["observation"] == "a feeds b"
    assert len(handlers.get_diagram("g1").history) == 1


def test_observe_unknown_diagram_creates_nothing(settings):
    handlers = MapHandlers(settings)
    result = handlers.process_operation(diagram_operation("observe"))
    assert result["status"] == "ok"
    assert result["elementCount"] == 0
    assert result["mermaid"] == ""
    assert handlers.get_diagram("g1") is None
