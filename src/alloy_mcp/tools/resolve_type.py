"""alloy Type Resolve Tool - Full documentation for a catalog entry."""

from typing import Any

from fastmcp import FastMCP

from alloy_mcp.contracts import build_docs_data, build_error_from_exception, build_ok
from alloy_mcp.knowledge import EntryNotFoundError, LookupService
from alloy_mcp.utils import EntryId


def register(mcp: FastMCP, service: LookupService) -> None:
    """Register resolve_type tool with the MCP server."""

    @mcp.tool()
    def resolve_type(entry_id: EntryId) -> dict[str, Any]:
        """Read the documentation section for an entry returned by lookup_type.

        Accepts a full id ("alloy://type/BlockId") or a bare type name
        ("BlockId") when it matches an entry exactly.

        Related tools:
        - lookup_type: Find entry ids by fuzzy name
        - get_resource: Fetch the whole guide the section belongs to
        """
        try:
            entry = service.get_entry(entry_id)
            doc = service.read_entry(entry.id)
        except EntryNotFoundError as exc:
            return build_error_from_exception(
                exc,
                details={
                    "input": {"entry_id": entry_id},
                    "available_ids": service.catalog.ids(),
                },
            )

        entry_payload = entry.to_dict()
        entry_payload["doc"] = doc

        return build_ok(
            build_docs_data(
                source="types",
                action="resolve",
                entries=[entry_payload],
                summary={"count": 1, "locator": entry.body_ref.locator},
            )
        )
