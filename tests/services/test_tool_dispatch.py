"""Tool Dispatch - tests for explicit routing and the response envelope.

Tests cover:
    - All 11 tools are registered
    - Unknown tools return an UNKNOWN_TOOL envelope
    - Validation and invariant failures share one envelope shape
    - Unexpected handler exceptions become INTERNAL_ERROR
    - Engines never share state
"""

import re

from think_engine.config import Settings
from think_engine.core.domain_types import ToolName
from think_engine.services.tool_dispatch import ToolDispatch

from tests.payloads import argument, decision, deliberation, thought

_REQUEST_ID = re.compile(r"^req_[0-9a-z]+_[0-9a-z]{9}$")


def test_dispatch_has_all_11_tools(dispatch):
    assert sorted(dispatch.tool_names) == sorted(t.value for t in ToolName)


def test_success_envelope(dispatch):
    envelope = dispatch.execute("trace", thought(1))
    assert envelope["success"] is True
    assert envelope["tool"] == "trace"
    assert "error" not in envelope
    assert "status" not in envelope["data"]
    assert envelope["data"]["thoughtNumber"] == 1
    metadata = envelope["metadata"]
    assert metadata["tool"] == "trace"
    assert metadata["version"] == "2.0.0"
    assert metadata["processingTimeMs"] >= 0
    assert _REQUEST_ID.match(metadata["requestId"])


def test_unknown_tool_envelope(dispatch):
    envelope = dispatch.execute("nonexistent_tool", {})
    assert envelope["success"] is False
    assert envelope["data"] is None
    assert envelope["error"]["code"] == "UNKNOWN_TOOL"
    assert "trace" in envelope["error"]["details"]["available_tools"]


def test_validation_error_envelope_lists_fields(dispatch):
    envelope = dispatch.execute("debate", argument(confidence=1.5))
    assert envelope["success"] is False
    assert envelope["error"]["code"] == "VALIDATION_ERROR"
    assert [f["field"] for f in envelope["error"]["details"]["fields"]] == ["confidence"]


def test_non_object_input_is_validation_error(dispatch):
    envelope = dispatch.execute("trace", "just a string")
    assert envelope["error"]["code"] == "VALIDATION_ERROR"


def test_invariant_error_envelope(dispatch):
    dispatch.execute("decide", decision(stage="decision", iteration=1))
    envelope = dispatch.execute("decide", decision(stage="problem-definition", iteration=2))
    assert envelope["error"]["code"] == "STAGE_REGRESSION"
    assert envelope["data"] is None


def test_framework_projection_keeps_success_status(dispatch):
    envelope = dispatch.execute("debug", {
        "approachName": "wolf_fence",
        "issue": "Intermittent crash",
        "steps": ["Split the input"],
        "findings": "Crash in parser",
        "resolution": "Guard empty tokens",
    })
    assert envelope["data"] == {
        "approachName": "wolf_fence",
        "status": "success",
        "hasSteps": True,
        "hasResolution": True,
    }


def test_unexpected_exception_becomes_internal_error(dispatch, monkeypatch):
    def boom(input_data):
        raise RuntimeError("kaboom")

    monkeypatch.setitem(dispatch._handlers, "trace", boom)
    envelope = dispatch.execute("trace", thought(1))
    assert envelope["error"] == {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
    }


def test_engines_are_isolated(registry):
    settings = Settings(render_artifacts=False)
    first = ToolDispatch(settings, registry)
    second = ToolDispatch(settings, registry)
    first.execute("council", deliberation())
    assert first.deliberation("s1") is not None
    assert second.deliberation("s1") is None


def test_session_views(dispatch):
    dispatch.execute("council", deliberation())
    assert dispatch.deliberation("s1").summary()["contributionCount"] == 1
    assert dispatch.diagram("g1") is None
    assert dispatch.confidence_progression("m1") is None
    assert dispatch.hypothesis_evolution("i1") is None
