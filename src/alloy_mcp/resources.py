"""MCP resources: bundled guides and the per-type resource template."""

from collections.abc import Callable

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError

from alloy_mcp.knowledge import EntryNotFoundError, LookupService, StaticDocument
from alloy_mcp.knowledge.config import TYPE_URI_PREFIX
from alloy_mcp.knowledge.documents import MARKDOWN_MIME_TYPE

TYPE_TEMPLATE_URI = TYPE_URI_PREFIX + "{type_name}"


def _reader(document: StaticDocument) -> Callable[[], str]:
    def read() -> str:
        return document.content

    read.__name__ = "read_" + document.uri.removeprefix("alloy://").replace("/", "_").replace("-", "_")
    return read


def register(mcp: FastMCP, service: LookupService) -> None:
    """Register every guide as a resource plus the alloy://type/{type_name} template."""
    for document in service.documents.all_documents():
        mcp.resource(
            document.uri,
            name=document.name,
            description=document.description,
            mime_type=document.mime_type,
        )(_reader(document))

    @mcp.resource(
        TYPE_TEMPLATE_URI,
        name="Type Lookup",
        description="Look up a specific alloy type by name",
        mime_type=MARKDOWN_MIME_TYPE,
    )
    def read_type(type_name: str) -> str:
        try:
            return service.read_entry(TYPE_URI_PREFIX + type_name)
        except EntryNotFoundError as exc:
            raise ResourceError(f"Resource not found: {TYPE_URI_PREFIX}{type_name}") from exc
