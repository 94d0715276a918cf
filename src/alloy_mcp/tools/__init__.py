"""alloy MCP tool implementations."""

from . import (
    get_resource,
    lookup_type,
    resolve_type,
    search_resources,
)

__all__ = [
    "get_resource",
    "lookup_type",
    "resolve_type",
    "search_resources",
]
