"""CLI entry point for running the n8n MCP server."""

from __future__ import annotations

import argparse

from pydantic import ValidationError
from starlette.middleware.cors import CORSMiddleware

from .logging import configure_logging, get_logger
from .n8n import build_n8n_server
from .settings import load_n8n_settings

LOGGER = get_logger(__name__)

MISSING_CONFIGURATION = "Error: N8N_HOST_URL and N8N_API_KEY must be set\n"
REQUIRED_SETTINGS = {"N8N_HOST_URL", "N8N_API_KEY"}


def _configuration_error(exc: ValidationError) -> str:
    fields = [".".join(map(str, error["loc"])) for error in exc.errors()]
    if REQUIRED_SETTINGS.intersection(fields):
        LOGGER.error("missing_configuration", fields=fields)
        return MISSING_CONFIGURATION
    LOGGER.error("invalid_configuration", fields=fields)
    problems = "; ".join(f"{field}: {error['msg']}" for field, error in zip(fields, exc.errors()))
    return f"Error: invalid configuration: {problems}\n"


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the n8n MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mechanism for MCP (default: stdio)",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Host for http transport")
    parser.add_argument("--port", type=int, default=8080, help="Port for http transport")
    parser.add_argument("--env-file", default=None, help="Explicit env file to load settings from")
    args = parser.parse_args()

    configure_logging()
    try:
        settings = load_n8n_settings(args.env_file)
    except ValidationError as exc:
        parser.exit(1, _configuration_error(exc))

    server = build_n8n_server(settings)
    LOGGER.info("server_starting", transport=args.transport, host_url=settings.host_url)

    if args.transport == "stdio":
        server.run()
    elif args.transport == "http":
        import uvicorn

        app = server.streamable_http_app()
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["mcp-session-id", "mcp-protocol-version"],
        )
        uvicorn.run(app, host=args.host, port=args.port)
    else:
        raise ValueError(f"Unsupported transport {args.transport}")


if __name__ == "__main__":  # pragma: no cover
    main()
