"""Session Routes - read-only views of per-session engine state.

Invariants:
    - Never mutate state; tools are the only writers
    - Unknown ids raise ResourceNotFoundError (404 via the global handler)
"""

from fastapi import APIRouter, Depends

from think_engine.api.dependencies import get_dispatch
from think_engine.core.errors import ErrorContext, ResourceNotFoundError
from think_engine.services.tool_dispatch import ToolDispatch

router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


@router.get("/maps/{diagram_id}")
async def get_diagram(diagram_id: str, dispatch: ToolDispatch = Depends(get_dispatch)):
    state = dispatch.diagram(diagram_id)
    if state is None:
        raise ResourceNotFoundError("Diagram", diagram_id, ErrorContext(session_id=diagram_id))
    return state.snapshot()


@router.get("/council/{session_id}")
async def get_deliberation(session_id: str, dispatch: ToolDispatch = Depends(get_dispatch)):
    state = dispatch.deliberation(session_id)
    if state is None:
        raise ResourceNotFoundError("Deliberation", session_id, ErrorContext(session_id=session_id))
    return state.summary()


@router.get("/reflect/{monitoring_id}")
async def get_confidence_progression(
    monitoring_id: str, dispatch: ToolDispatch = Depends(get_dispatch),
):
    progression = dispatch.confidence_progression(monitoring_id)
    if progression is None:
        raise ResourceNotFoundError(
            "Monitoring session", monitoring_id, ErrorContext(session_id=monitoring_id),
        )
    return progression


@router.get("/hypothesis/{inquiry_id}")
async def get_hypothesis_evolution(
    inquiry_id: str, dispatch: ToolDispatch = Depends(get_dispatch),
):
    evolution = dispatch.hypothesis_evolution(inquiry_id)
    if evolution is None:
        raise ResourceNotFoundError("Inquiry", inquiry_id, ErrorContext(session_id=inquiry_id))
    return evolution
