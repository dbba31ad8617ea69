"""Artifact Validation - raw tool input to typed schema model, or one error listing every bad field.

Invariants:
    - A non-mapping root fails immediately (no field inspection)
    - Every pydantic error is reported, with a dotted camelCase field path
    - Raises ArtifactValidationError; never returns a partially valid model
"""

from collections.abc import Mapping
from typing import TypeVar

from pydantic import ValidationError

from think_engine.core.errors import ArtifactValidationError, ErrorContext
from think_engine.schemas.common import ArtifactModel

M = TypeVar("M", bound=ArtifactModel)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def validate_artifact(model: type[M], raw: object, tool_name: str | None = None) -> M:
    """Validate raw against model, collecting all violations into one error."""
    context = ErrorContext(tool_name=tool_name)
    if not isinstance(raw, Mapping):
        raise ArtifactValidationError(
            model.__name__,
            [{
                "field": "",
                "message": f"Expected an object, got {type(raw).__name__}",
                "type": "model_type",
            }],
            context,
        )
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        fields = [
            {
                "field": _field_path(e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        raise ArtifactValidationError(model.__name__, fields, context) from exc
