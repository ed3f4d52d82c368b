"""Pydantic models for n8n tool arguments.

Each model doubles as the JSON schema advertised for its tool.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolArguments(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NoArguments(ToolArguments):
    pass


class WorkflowId(ToolArguments):
    id: str = Field(..., description="The workflow ID")


class ExecutionId(ToolArguments):
    id: str = Field(..., description="The execution ID")


class ListWorkflowsArguments(ToolArguments):
    active: Optional[bool] = Field(None, description="Filter by active status")
    limit: Optional[int] = Field(
        None, ge=1, strict=True, description="Number of workflows to return (default: 100)"
    )


class ListWorkflowWebhooksArguments(ToolArguments):
    id: str = Field(..., description="The ID of the workflow to get webhooks from")


class CallWebhookGetArguments(ToolArguments):
    url: str = Field(..., description="The webhook URL to call")


class CallWebhookPostArguments(ToolArguments):
    url: str = Field(..., description="The webhook URL to call")
    data: Dict[str, Any] = Field(..., description="Data to send in the POST request body")


class ListExecutionsArguments(ToolArguments):
    workflowId: Optional[str] = Field(None, description="Filter by workflow ID")
    status: Optional[Literal["success", "error", "waiting"]] = Field(
        None, description="Filter by execution status"
    )
    limit: Optional[int] = Field(
        None, ge=1, strict=True, description="Number of executions to return (default: 20)"
    )


class CreateWorkflowArguments(ToolArguments):
    name: str = Field(..., description="Name of the new workflow")
    nodes: List[Dict[str, Any]] = Field(..., description="Workflow nodes")
    connections: Dict[str, Any] = Field(..., description="Connections between nodes, keyed by source node name")
    settings: Optional[Dict[str, Any]] = Field(None, description="Workflow settings")


class UpdateWorkflowArguments(ToolArguments):
    id: str = Field(..., description="The workflow ID")
    name: Optional[str] = Field(None, description="New workflow name")
    nodes: Optional[List[Dict[str, Any]]] = Field(None, description="Replacement node list")
    connections: Optional[Dict[str, Any]] = Field(None, description="Replacement connections")
    settings: Optional[Dict[str, Any]] = Field(None, description="Replacement workflow settings")


class ExecuteWorkflowArguments(ToolArguments):
    id: str = Field(..., description="The workflow ID")
    data: Optional[Dict[str, Any]] = Field(None, description="Input data passed to the workflow")


def input_schema(model: type[ToolArguments]) -> Dict[str, Any]:
    """JSON schema for ``model`` without pydantic's generated titles."""
    schema = model.model_json_schema()
    schema.pop("title", None)
    schema.pop("description", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    return schema
