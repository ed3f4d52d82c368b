"""n8n MCP tool implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp import types

from ..logging import get_logger
from .client import N8nApiClient, path_segment
from .helpers import extract_webhooks
from .schemas import (
    CallWebhookGetArguments,
    CallWebhookPostArguments,
    CreateWorkflowArguments,
    ExecuteWorkflowArguments,
    ExecutionId,
    ListExecutionsArguments,
    ListWorkflowsArguments,
    ListWorkflowWebhooksArguments,
    NoArguments,
    ToolArguments,
    UpdateWorkflowArguments,
    WorkflowId,
    input_schema,
)

LOGGER = get_logger(__name__)

ToolHandler = Callable[[N8nApiClient, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    summary: str
    arguments: type[ToolArguments]
    func: ToolHandler

    def describe(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.summary,
            inputSchema=input_schema(self.arguments),
        )

    def parse(self, arguments: Optional[Dict[str, Any]]) -> ToolArguments:
        return self.arguments.model_validate(arguments or {})

    async def invoke(self, client: N8nApiClient, arguments: ToolArguments) -> Any:
        return await self.func(client, arguments)


def _body(args: ToolArguments, *exclude: str) -> Dict[str, Any]:
    dumped = args.model_dump(exclude=set(exclude))
    return {key: value for key, value in dumped.items() if value is not None}


def _query(**values: Any) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        params[key] = str(value).lower() if isinstance(value, bool) else str(value)
    return params


async def tool_list_workflows(client: N8nApiClient, args: ListWorkflowsArguments) -> Any:
    return await client.get("/workflows", params=_query(active=args.active, limit=args.limit))


async def tool_get_workflow(client: N8nApiClient, args: WorkflowId) -> Any:
    return await client.get(f"/workflows/{path_segment(args.id)}")


async def tool_list_workflow_webhooks(
    client: N8nApiClient, args: ListWorkflowWebhooksArguments
) -> List[Dict[str, Any]]:
    workflow = await client.get(f"/workflows/{path_segment(args.id)}")
    webhooks = extract_webhooks(workflow, client.endpoints)
    LOGGER.debug("webhooks_extracted", workflow_id=args.id, count=len(webhooks))
    return webhooks


async def tool_call_webhook_get(client: N8nApiClient, args: CallWebhookGetArguments) -> Any:
    return await client.call_webhook("GET", args.url)


async def tool_call_webhook_post(client: N8nApiClient, args: CallWebhookPostArguments) -> Any:
    return await client.call_webhook("POST", args.url, data=args.data)


async def tool_list_executions(client: N8nApiClient, args: ListExecutionsArguments) -> Any:
    params = _query(workflowId=args.workflowId, status=args.status, limit=args.limit)
    return await client.get("/executions", params=params)


async def tool_get_execution(client: N8nApiClient, args: ExecutionId) -> Any:
    return await client.get(f"/executions/{path_segment(args.id)}")


async def tool_create_workflow(client: N8nApiClient, args: CreateWorkflowArguments) -> Any:
    return await client.post("/workflows", json=_body(args))


async def tool_update_workflow(client: N8nApiClient, args: UpdateWorkflowArguments) -> Any:
    # Only fields the caller supplied are sent.
    body = _body(args, "id")
    return await client.put(f"/workflows/{path_segment(args.id)}", json=body)


async def tool_delete_workflow(client: N8nApiClient, args: WorkflowId) -> Any:
    return await client.delete(f"/workflows/{path_segment(args.id)}")


async def tool_activate_workflow(client: N8nApiClient, args: WorkflowId) -> Any:
    return await client.post(f"/workflows/{path_segment(args.id)}/activate")


async def tool_deactivate_workflow(client: N8nApiClient, args: WorkflowId) -> Any:
    return await client.post(f"/workflows/{path_segment(args.id)}/deactivate")


async def tool_get_workflow_tags(client: N8nApiClient, args: NoArguments) -> Any:
    return await client.get("/tags")


async def tool_execute_workflow(client: N8nApiClient, args: ExecuteWorkflowArguments) -> Any:
    body = {"data": args.data} if args.data is not None else {}
    return await client.post(f"/workflows/{path_segment(args.id)}/execute", json=body)


N8N_TOOL_SPECS: List[ToolSpec] = [
    ToolSpec("list_workflows", "Get all n8n workflows", ListWorkflowsArguments, tool_list_workflows),
    ToolSpec("get_workflow", "Get a specific workflow by ID", WorkflowId, tool_get_workflow),
    ToolSpec(
        "list_workflow_webhooks",
        "Get all webhooks in a workflow",
        ListWorkflowWebhooksArguments,
        tool_list_workflow_webhooks,
    ),
    ToolSpec("call_webhook_get", "Call a GET webhook", CallWebhookGetArguments, tool_call_webhook_get),
    ToolSpec("call_webhook_post", "Call a POST webhook", CallWebhookPostArguments, tool_call_webhook_post),
    ToolSpec("list_executions", "Get workflow executions", ListExecutionsArguments, tool_list_executions),
    ToolSpec("get_execution", "Get details of a specific execution", ExecutionId, tool_get_execution),
    ToolSpec("create_workflow", "Create a new workflow", CreateWorkflowArguments, tool_create_workflow),
    ToolSpec(
        "update_workflow",
        "Update an existing workflow; only the provided fields are sent",
        UpdateWorkflowArguments,
        tool_update_workflow,
    ),
    ToolSpec("delete_workflow", "Delete a workflow", WorkflowId, tool_delete_workflow),
    ToolSpec("activate_workflow", "Activate a workflow", WorkflowId, tool_activate_workflow),
    ToolSpec("deactivate_workflow", "Deactivate a workflow", WorkflowId, tool_deactivate_workflow),
    ToolSpec("get_workflow_tags", "Get all workflow tags", NoArguments, tool_get_workflow_tags),
    ToolSpec(
        "execute_workflow",
        "Execute a workflow with optional input data",
        ExecuteWorkflowArguments,
        tool_execute_workflow,
    ),
]
