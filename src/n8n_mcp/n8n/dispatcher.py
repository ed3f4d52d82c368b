"""Route tool invocations to their handlers and shape the results."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import httpx
from mcp import types
from pydantic import ValidationError

from ..logging import get_logger
from .client import N8nApiClient, N8nApiError
from .tools import N8N_TOOL_SPECS, ToolSpec

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ToolResult:
    payload: str
    is_error: bool = False

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.payload)],
            isError=self.is_error,
        )


def format_payload(body: Any) -> str:
    return json.dumps(body, indent=2, ensure_ascii=False)


def _format_validation_error(name: str, exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        problems.append(f"{location}: {error['msg']}")
    return f"Invalid arguments for {name}: " + "; ".join(problems)


class ToolDispatcher:
    """Look up a tool by name, validate its arguments and run it."""

    def __init__(self, client: N8nApiClient, specs: Iterable[ToolSpec] = N8N_TOOL_SPECS) -> None:
        self.client = client
        self._specs: Dict[str, ToolSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"Duplicate tool name: {spec.name}")
            self._specs[spec.name] = spec

    def list_tools(self) -> List[types.Tool]:
        return [spec.describe() for spec in self._specs.values()]

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
        spec = self._specs.get(name)
        if spec is None:
            LOGGER.warning("unknown_tool", tool=name)
            return ToolResult(f"Unknown tool: {name}", is_error=True)

        try:
            parsed = spec.parse(arguments)
        except ValidationError as exc:
            LOGGER.info("tool_arguments_invalid", tool=name, errors=exc.error_count())
            return ToolResult(_format_validation_error(name, exc), is_error=True)

        LOGGER.info("tool_invoked", tool=name)
        try:
            body = await spec.invoke(self.client, parsed)
            return ToolResult(format_payload(body))
        except N8nApiError as exc:
            LOGGER.warning("tool_failed", tool=name, status_code=exc.status_code, error=exc.message)
            return ToolResult(f"Error: {exc.message}", is_error=True)
        except httpx.HTTPError as exc:
            message = str(exc) or type(exc).__name__
            LOGGER.warning("tool_failed", tool=name, error=message)
            return ToolResult(f"Error: {message}", is_error=True)
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("tool_failed", tool=name)
            return ToolResult(f"Error: {exc}", is_error=True)
