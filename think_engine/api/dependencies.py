"""Route Dependencies - hand the app-scoped ToolDispatch to route handlers."""

from fastapi import Request

from think_engine.services.tool_dispatch import ToolDispatch


def get_dispatch(request: Request) -> ToolDispatch:
    return request.app.state.dispatch
