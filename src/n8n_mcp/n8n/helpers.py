"""Helpers that look inside n8n workflow documents."""

from __future__ import annotations

from typing import Any, Dict, List

from .config import N8nEndpoints

WEBHOOK_NODE_TYPE = "n8n-nodes-base.webhook"


def _transform_webhook_node(node: Dict[str, Any], endpoints: N8nEndpoints) -> Dict[str, Any]:
    parameters = node.get("parameters") or {}
    path = parameters.get("path")
    return {
        "id": node.get("webhookId"),
        "name": node.get("name"),
        "path": path,
        "httpMethod": parameters.get("httpMethod") or "GET",
        "url": endpoints.webhook_url(path) if isinstance(path, str) else None,
        "disabled": node.get("disabled") or False,
    }


def extract_webhooks(workflow: Dict[str, Any], endpoints: N8nEndpoints) -> List[Dict[str, Any]]:
    """Return one entry per webhook trigger node, in node order.

    Raises ``ValueError`` when the document carries no node list.
    """
    nodes = workflow.get("nodes") if isinstance(workflow, dict) else None
    if not isinstance(nodes, list):
        raise ValueError("Workflow document has no 'nodes' list")
    return [
        _transform_webhook_node(node, endpoints)
        for node in nodes
        if isinstance(node, dict) and node.get("type") == WEBHOOK_NODE_TYPE
    ]
