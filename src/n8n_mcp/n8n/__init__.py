"""n8n public API exposed as MCP tools."""

from .client import N8nApiClient, N8nApiError
from .dispatcher import ToolDispatcher, ToolResult
from .server import build_n8n_server
from .tools import N8N_TOOL_SPECS, ToolSpec

__all__ = [
    "N8N_TOOL_SPECS",
    "N8nApiClient",
    "N8nApiError",
    "ToolDispatcher",
    "ToolResult",
    "ToolSpec",
    "build_n8n_server",
]
