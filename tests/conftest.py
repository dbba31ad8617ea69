"""Root conftest - shared fixtures for every test layer."""

import pytest

from think_engine.config import Settings
from think_engine.core.persona_library import build_default_registry
from think_engine.services.tool_dispatch import ToolDispatch


@pytest.fixture
def settings() -> Settings:
    return Settings(render_artifacts=True, log_format="text")


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def dispatch(settings, registry) -> ToolDispatch:
    return ToolDispatch(settings, registry)
