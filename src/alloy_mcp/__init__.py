"""alloy MCP server - curated alloy.rs type documentation over MCP."""

__version__ = "0.2.0"
