"""Smoke tests for the assembled n8n MCP server."""

import json

import httpx
import pytest
from mcp import types

from n8n_mcp.n8n import ToolResult, build_n8n_server

from .conftest import HOST
from .test_tools import EXPECTED_REQUIRED


@pytest.mark.asyncio
async def test_server_lists_catalog(settings, stub) -> None:
    server = build_n8n_server(settings, transport=httpx.MockTransport(stub.handler))
    handler = server._mcp_server.request_handlers[types.ListToolsRequest]

    result = await handler(types.ListToolsRequest(method="tools/list"))

    assert [tool.name for tool in result.root.tools] == list(EXPECTED_REQUIRED)


async def _call(server, name, arguments):
    handler = server._mcp_server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return (await handler(request)).root


@pytest.mark.asyncio
async def test_server_call_relays_remote_error(settings, stub) -> None:
    stub.on("GET", f"{HOST}/api/v1/workflows/X", status_code=404, json={"message": "not found"})
    server = build_n8n_server(settings, transport=httpx.MockTransport(stub.handler))

    result = await _call(server, "get_workflow", {"id": "X"})

    assert result.isError is True
    assert [block.text for block in result.content] == ["Error: not found"]


@pytest.mark.asyncio
async def test_server_call_unknown_tool(settings, stub) -> None:
    server = build_n8n_server(settings, transport=httpx.MockTransport(stub.handler))

    result = await _call(server, "nope", {})

    assert result.isError is True
    assert [block.text for block in result.content] == ["Unknown tool: nope"]
    assert stub.requests == []


@pytest.mark.asyncio
async def test_server_call_reports_invalid_arguments(settings, stub) -> None:
    server = build_n8n_server(settings, transport=httpx.MockTransport(stub.handler))

    result = await _call(server, "get_workflow", {})

    assert result.isError is True
    assert result.content[0].text == "Invalid arguments for get_workflow: id: Field required"
    assert stub.requests == []


@pytest.mark.asyncio
async def test_server_call_without_arguments(settings, stub) -> None:
    document = {"data": [{"id": "t1", "name": "prod"}]}
    stub.on("GET", f"{HOST}/api/v1/tags", json=document)
    server = build_n8n_server(settings, transport=httpx.MockTransport(stub.handler))

    result = await _call(server, "get_workflow_tags", None)

    assert result.isError is False
    assert result.content[0].text == json.dumps(document, indent=2)


def test_error_result_envelope() -> None:
    envelope = ToolResult("Error: not found", is_error=True).to_call_tool_result()

    assert envelope.isError is True
    assert [(block.type, block.text) for block in envelope.content] == [("text", "Error: not found")]


def test_success_result_envelope() -> None:
    envelope = ToolResult('{\n  "ok": true\n}').to_call_tool_result()

    assert envelope.isError is False
    assert envelope.content[0].text == '{\n  "ok": true\n}'
