"""Central configuration loading utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class BaseEnvSettings(BaseSettings):
    """Base settings that enforce case sensitivity for env vars."""

    model_config = {"env_file": None, "case_sensitive": True, "extra": "ignore"}


class N8nSettings(BaseEnvSettings):
    """Connection settings for the n8n public API."""

    host_url: str = Field(..., alias="N8N_HOST_URL", min_length=1)
    api_key: str = Field(..., alias="N8N_API_KEY", min_length=1)
    request_timeout: float = Field(30.0, alias="N8N_REQUEST_TIMEOUT", gt=0)

    @field_validator("host_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def _resolve_env_file(explicit: Optional[str] = None) -> Optional[str]:
    """Determine the environment file to load configuration from."""

    candidates: list[Path] = []

    if explicit:
        candidates.append(Path(explicit).expanduser())

    value = os.getenv("N8N_MCP_ENV_FILE")
    if value:
        candidates.append(Path(value).expanduser())

    project_root = Path(__file__).resolve().parents[2]
    env_dir = project_root / "env"
    candidates.extend(
        [
            env_dir / "n8n.env",
            env_dir / "n8n.local.env",
            project_root / ".env",
        ]
    )

    for candidate in candidates:
        if candidate.exists():
            return str(candidate)

    return None


@lru_cache(maxsize=1)
def load_n8n_settings(env_file: Optional[str] = None) -> N8nSettings:
    return N8nSettings(_env_file=_resolve_env_file(env_file))


def reset_settings_cache() -> None:
    load_n8n_settings.cache_clear()  # type: ignore[attr-defined]
