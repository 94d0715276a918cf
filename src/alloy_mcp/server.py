"""alloy MCP Server - curated alloy.rs type documentation exposed over MCP."""

import argparse
import logging
import sys

from fastmcp import FastMCP

from alloy_mcp import __version__, prompts, resources
from alloy_mcp.config import get_server_config
from alloy_mcp.knowledge import LookupService
from alloy_mcp.tools import (
    get_resource,
    lookup_type,
    resolve_type,
    search_resources,
)

mcp = FastMCP(
    "alloy MCP Server",
    instructions="Provides curated documentation for alloy.rs Ethereum library types.",
)

logger = logging.getLogger("alloy-mcp.server")

config = get_server_config()

# Built once; a malformed catalog aborts startup here
service = LookupService.from_resources(config.lookup)

# Register lookup tools
lookup_type.register(mcp, service)
resolve_type.register(mcp, service)

# Register guide tools
search_resources.register(mcp, service)
get_resource.register(mcp, service)

resources.register(mcp, service)
prompts.register(mcp)


def main():
    """Entry point for the alloy MCP server."""
    parser = argparse.ArgumentParser(
        prog="alloy-mcp",
        description="alloy MCP Server - curated alloy.rs type documentation over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"alloy-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Log level (default: {config.log_level}, env ALLOY_MCP_LOG_LEVEL)",
    )
    args = parser.parse_args()

    # stdout carries the stdio transport
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.info(
        "Starting alloy-mcp %s (%d entries, %d guides, transport=%s)",
        __version__,
        len(service.catalog),
        len(service.documents),
        args.transport,
    )

    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
