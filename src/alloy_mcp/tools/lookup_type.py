"""alloy Type Lookup Tool - Fuzzy lookup of curated type entries."""

import logging
from typing import Any

from fastmcp import FastMCP

from alloy_mcp.contracts import build_docs_data, build_error_from_exception, build_ok
from alloy_mcp.knowledge import InvalidInputError, LookupService
from alloy_mcp.utils import TypeLimit, TypeQuery

logger = logging.getLogger("alloy-mcp.tools")


def register(mcp: FastMCP, service: LookupService) -> None:
    """Register lookup_type tool with the MCP server."""

    @mcp.tool()
    def lookup_type(
        query: TypeQuery,
        limit: TypeLimit = None,
    ) -> dict[str, Any]:
        """Look up alloy type information by name (fuzzy, ranked).

        Returns matching catalog entries with a score in [0, 1], the field that
        matched (name, alias or tag) and a one-line summary. Use resolve_type
        with a returned id to read the full documentation section.

        When to use:
        - You know roughly which type you need but not its exact name or path
        - Example: "BlockId", "eip1559 tx", "blob gas filler", "privkey signer"

        Related tools:
        - resolve_type: Full documentation for a returned entry id
        - search_resources: Free-text search across all guide sections
        - get_resource: Fetch a whole guide by URI
        """
        try:
            results = service.lookup_type(query, limit)
        except InvalidInputError as exc:
            logger.debug("lookup_type rejected input: %s", exc)
            return build_error_from_exception(
                exc,
                details={"input": {"query": query, "limit": limit}},
            )

        payload: dict[str, Any] = build_docs_data(
            source="types",
            action="lookup",
            entries=[result.to_dict() for result in results],
            summary={
                "count": len(results),
                "query": query,
                "limit": min(
                    limit if limit is not None else service.config.default_limit,
                    service.config.max_limit,
                ),
            },
        )

        if not results:
            payload["summary"]["hints"] = [
                "Try a shorter or partial type name (for example: block, filler, signer).",
                "Use search_resources for concepts or error messages.",
            ]
            payload["summary"]["available_resources"] = service.documents.uris()

        return build_ok(payload)
