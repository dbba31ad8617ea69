"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Trace history limits are positive integers

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: engine works out-of-the-box with no .env
    - trace_strict_references defaults to False: revision/branch references stay
      caller-trusted unless an operator opts in (ADR: flagged behaviour change)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Engine
    engine_version: str = "2.0.0"
    render_artifacts: bool = True

    # Trace history bounds
    trace_max_thought_history: int = Field(1000, gt=0)
    trace_max_branches: int = Field(50, gt=0)
    trace_max_thoughts_per_branch: int = Field(200, gt=0)
    trace_enable_auto_cleanup: bool = True
    trace_cleanup_on_complete: bool = True
    trace_strict_references: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
