"""Artifact schema tests - validation collects every field error, strict scalars, round trips.

Tests cover:
    - validate_artifact reports all offending fields with camelCase paths
    - Strict booleans and integers (no string coercion)
    - Deliberation JSON round trip is lossless
    - Prediction if/then/else aliases
"""

import json

import pytest

from think_engine.core.errors import ArtifactValidationError
from think_engine.schemas.council import Deliberation
from think_engine.schemas.debate import Argument
from think_engine.schemas.hypothesis import Prediction
from think_engine.schemas.trace import Thought
from think_engine.services.validate_artifact import validate_artifact

from tests.payloads import argument, deliberation, thought


def _fields(exc: ArtifactValidationError) -> set[str]:
    return {f["field"] for f in exc.fields}


def test_valid_thought_accepted():
    model = validate_artifact(Thought, thought(1))
    assert model.thought_number == 1


def test_non_object_root_rejected():
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Thought, ["not", "an", "object"])
    assert exc_info.value.fields[0]["field"] == ""
    assert exc_info.value.code == "VALIDATION_ERROR"


def test_every_bad_field_is_reported():
    payload = thought(1, thoughtNumber=0, totalThoughts="3", nextThoughtNeeded="yes")
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Thought, payload)
    assert _fields(exc_info.value) == {"thoughtNumber", "totalThoughts", "nextThoughtNeeded"}
    assert "3 field error(s)" in exc_info.value.message


def test_missing_required_field_named():
    payload = thought(1)
    del payload["thought"]
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Thought, payload)
    assert _fields(exc_info.value) == {"thought"}


def test_confidence_out_of_range_names_confidence():
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Argument, argument(confidence=1.5))
    assert _fields(exc_info.value) == {"confidence"}


def test_responds_to_must_be_single_id():
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Argument, argument(respondsTo=["a1", "a2"]))
    assert _fields(exc_info.value) == {"respondsTo"}


def test_empty_premises_rejected():
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Argument, argument(premises=[]))
    assert _fields(exc_info.value) == {"premises"}


def test_nested_field_paths_are_dotted():
    payload = deliberation()
    payload["contributions"][0]["confidence"] = -0.1
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Deliberation, payload)
    assert _fields(exc_info.value) == {"contributions.0.confidence"}


def test_unknown_enum_value_rejected():
    with pytest.raises(ArtifactValidationError) as exc_info:
        validate_artifact(Deliberation, deliberation(stage="brainstorm"))
    assert _fields(exc_info.value) == {"stage"}


def test_unknown_fields_ignored():
    model = validate_artifact(Thought, thought(1, somethingElse=True))
    assert "somethingElse" not in model.to_wire()


def test_deliberation_round_trip_is_lossless():
    original = validate_artifact(Deliberation, deliberation(
        consensusPoints=["Start small"],
        disagreements=[{
            "topic": "Storage",
            "positions": [{"personaId": "p1", "position": "SQL", "arguments": ["mature"]}],
        }],
        finalRecommendation="Pilot",
    ))
    reparsed = validate_artifact(Deliberation, json.loads(json.dumps(original.to_wire())))
    assert reparsed == original


def test_prediction_keyword_aliases():
    prediction = Prediction.model_validate({"if": "cache warm", "then": "p99 drops"})
    assert prediction.if_ == "cache warm"
    assert prediction.to_wire() == {"if": "cache warm", "then": "p99 drops"}
