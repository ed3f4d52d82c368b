"""n8n-specific endpoint configuration."""

from __future__ import annotations

from pydantic import BaseModel

from ..settings import N8nSettings


class N8nEndpoints(BaseModel):
    host_url: str
    api_prefix: str = "/api/v1"
    webhook_prefix: str = "/webhook"

    @property
    def api_base_url(self) -> str:
        return f"{self.host_url}{self.api_prefix}"

    def webhook_url(self, path: str) -> str:
        return f"{self.host_url}{self.webhook_prefix}/{path}"

    @classmethod
    def from_settings(cls, settings: N8nSettings) -> "N8nEndpoints":
        return cls(host_url=settings.host_url)
