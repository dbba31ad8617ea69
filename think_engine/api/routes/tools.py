"""Tool Routes - invoke any of the eleven tools and list their schemas.

Invariants:
    - POST /tools/{tool_name} always answers 200 with the envelope; success/failure
      lives in the envelope, not the HTTP status
    - The body is passed to the dispatcher as-is (any JSON value); schema checks
      happen in the engine so every field error is reported in one envelope
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from think_engine.api.dependencies import get_dispatch
from think_engine.services.tool_dispatch import ToolDispatch
from think_engine.services.tools_registry import all_tool_definitions

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("")
async def list_tools():
    return {"tools": all_tool_definitions()}


@router.post("/{tool_name}")
async def call_tool(
    tool_name: str,
    payload: Any = Body(None),
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    return dispatch.execute(tool_name, payload)
