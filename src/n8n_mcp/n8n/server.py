"""Factory for the n8n MCP server."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from mcp import types
from mcp.server.fastmcp import FastMCP

from ..logging import configure_logging, get_logger
from ..settings import N8nSettings, load_n8n_settings
from .client import N8nApiClient
from .dispatcher import ToolDispatcher

LOGGER = get_logger(__name__)


def build_n8n_server(
    settings: Optional[N8nSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    configure_logging()
    settings = settings or load_n8n_settings()
    dispatcher = ToolDispatcher(N8nApiClient(settings, transport=transport))
    server = FastMCP(
        "n8n-cloud-mcp",
        json_response=True,
        stateless_http=True,
    )

    tools = dispatcher.list_tools()
    for tool in tools:
        LOGGER.info("tool_registered", tool=tool.name)

    # The catalog carries its own schemas and error envelopes, so the
    # low-level handlers replace FastMCP's signature-derived ones.
    async def handle_list_tools() -> List[types.Tool]:
        return tools

    async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        result = await dispatcher.invoke(name, arguments)
        return result.to_call_tool_result()

    server._mcp_server.list_tools()(handle_list_tools)
    server._mcp_server.call_tool(validate_input=False)(handle_call_tool)
    return server
