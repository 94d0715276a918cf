"""alloy Guide Search Tool - Free-text search over guide sections."""

from typing import Any

from fastmcp import FastMCP

from alloy_mcp.contracts import build_docs_data, build_ok
from alloy_mcp.knowledge import LookupService
from alloy_mcp.knowledge.sections import preview
from alloy_mcp.utils import DEFAULT_SEARCH_RESULTS, PREVIEW_MAX_LINES, DocsMaxResults, DocsQuery


def register(mcp: FastMCP, service: LookupService) -> None:
    """Register search_resources tool with the MCP server."""

    @mcp.tool()
    def search_resources(
        query: DocsQuery,
        max_results: DocsMaxResults = DEFAULT_SEARCH_RESULTS,
    ) -> dict[str, Any]:
        """Full-text search across all alloy documentation guides.

        Accepts type names, concepts, or error messages and returns matching
        guide sections with their text (long sections are previewed).

        Related tools:
        - lookup_type: Ranked lookup when you have a type name
        - get_resource: Fetch a whole guide by URI
        """
        hits = service.search_docs(query, max_results)
        entries = [
            {
                "heading": hit.section.title,
                "resource_name": hit.section.resource_name,
                "uri": hit.section.uri,
                "score": hit.score,
                "rank": hit.rank,
                "content": preview(hit.section, PREVIEW_MAX_LINES),
            }
            for hit in hits
        ]

        payload: dict[str, Any] = build_docs_data(
            source="guides",
            action="search",
            entries=entries,
            summary={"count": len(entries), "query": query},
        )

        if not entries:
            payload["summary"]["available_resources"] = [
                {"uri": doc.uri, "description": doc.description}
                for doc in service.documents.all_documents()
            ]

        return build_ok(payload)
