"""Response Envelope - wraps every handler outcome in the uniform tool envelope.

Invariants:
    - success is True iff the handler result has no error_code
    - data is the handler projection without the internal "status": "ok" marker; None on failure
    - metadata.processingTimeMs is measured from the caller-supplied start time
"""

import random
import string
import time
from datetime import datetime, timezone

from think_engine.schemas.envelope import ErrorBody, ResponseMetadata, ToolEnvelope

_BASE36 = string.digits + string.ascii_lowercase


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def new_request_id() -> str:
    """req_<base36 epoch millis>_<9 random base36 chars>."""
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"req_{_base36(int(time.time() * 1000))}_{suffix}"


def wrap_result(
    tool: str, result: dict, started: float, version: str,
    request_id: str | None = None,
) -> ToolEnvelope:
    """Build the envelope for one tool call. started is a time.perf_counter() value."""
    metadata = ResponseMetadata(
        tool=tool,
        processing_time_ms=round((time.perf_counter() - started) * 1000, 3),
        version=version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        request_id=request_id or new_request_id(),
    )
    if result.get("error_code"):
        return ToolEnvelope(
            success=False,
            tool=tool,
            data=None,
            metadata=metadata,
            error=ErrorBody(
                code=result["error_code"],
                message=result.get("message", ""),
                details=result.get("details"),
            ),
        )
    data = {k: v for k, v in result.items() if (k, v) != ("status", "ok")}
    return ToolEnvelope(success=True, tool=tool, data=data, metadata=metadata)
