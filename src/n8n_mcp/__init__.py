"""MCP server exposing the n8n public API as tools."""

__version__ = "1.0.0"

__all__ = ["__version__"]
