"""alloy Guide Fetch Tool - Read a whole guide by URI."""

from typing import Any

from fastmcp import FastMCP

from alloy_mcp.contracts import build_docs_data, build_error, build_ok
from alloy_mcp.knowledge import LookupService
from alloy_mcp.utils import ResourceUri

LIST_KEYWORD = "list"


def register(mcp: FastMCP, service: LookupService) -> None:
    """Register get_resource tool with the MCP server."""

    @mcp.tool()
    def get_resource(uri: ResourceUri) -> dict[str, Any]:
        """Fetch a specific alloy documentation guide by URI.

        Pass uri='list' to see all available guides.

        Related tools:
        - search_resources: Find the right guide by keywords
        - resolve_type: Read only the section for one type
        """
        if uri == LIST_KEYWORD:
            return build_ok(_list_guides(service))

        document = service.documents.get(uri)
        if document is None:
            return build_error(
                code="resource_not_found",
                message=f"Resource not found: '{uri}'",
                details={
                    "input": {"uri": uri},
                    "available_uris": service.documents.uris(),
                },
            )

        return build_ok(
            build_docs_data(
                source="guides",
                action="get",
                entries=[
                    {
                        "uri": document.uri,
                        "name": document.name,
                        "mime_type": document.mime_type,
                        "content": document.content,
                    }
                ],
                summary={"count": 1},
            )
        )


def _list_guides(service: LookupService) -> dict[str, Any]:
    entries = [
        {"uri": doc.uri, "name": doc.name, "description": doc.description}
        for doc in service.documents.all_documents()
    ]
    return build_docs_data(
        source="guides",
        action="list",
        entries=entries,
        summary={"count": len(entries)},
    )
