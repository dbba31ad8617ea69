"""Response Envelope Schemas - the uniform success/error shape of every tool call.

Invariants:
    - error is present only when success is False; data is None on failure
    - metadata.tool always equals the top-level tool
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseMetadata(_WireModel):
    tool: str
    processing_time_ms: float
    version: str
    timestamp: str
    request_id: str


class ErrorBody(_WireModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ToolEnvelope(_WireModel):
    success: bool
    tool: str
    data: dict[str, Any] | None = None
    metadata: ResponseMetadata
    error: ErrorBody | None = None

    def to_wire(self) -> dict:
        body = self.model_dump(mode="json", by_alias=True)
        if body["error"] is None:
            del body["error"]
        elif body["error"]["details"] is None:
            del body["error"]["details"]
        return body
