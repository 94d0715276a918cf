"""Lookup service: the operations exposed to the MCP transport layer."""

from __future__ import annotations

from typing import Any

from alloy_mcp.config import LookupConfig, get_lookup_config
from alloy_mcp.knowledge.catalog import Catalog, load_catalog
from alloy_mcp.knowledge.config import TYPE_URI_PREFIX
from alloy_mcp.knowledge.documents import DocumentStore
from alloy_mcp.knowledge.errors import EntryNotFoundError, InvalidLimitError, InvalidQueryError
from alloy_mcp.knowledge.models import BodyRef, Entry, MatchResult
from alloy_mcp.knowledge.ranker import rank
from alloy_mcp.knowledge.sections import SectionHit, search_sections


class LookupService:
    """Type lookup over an immutable catalog.

    One instance is built at process start and shared by every tool. It holds
    no per-request state, so concurrent calls need no locking.

    Usage:
        >>> service = LookupService.from_resources()
        >>> [r.entry_id for r in service.lookup_type("BlockId", limit=1)]
        ['alloy://type/BlockId']
        >>> service.resolve("alloy://type/BlockId").uri
        'alloy://eips/block-identifiers'
    """

    def __init__(
        self,
        catalog: Catalog,
        documents: DocumentStore,
        config: LookupConfig | None = None,
    ):
        self.catalog = catalog
        self.documents = documents
        self.config = config or LookupConfig()

    @classmethod
    def from_resources(cls, config: LookupConfig | None = None) -> "LookupService":
        """Build the service from the guides and catalog bundled with the package.

        Raises:
            CatalogConstructionError: If bundled data is malformed
        """
        documents = DocumentStore.from_index()
        catalog = load_catalog(documents)
        return cls(catalog, documents, config or get_lookup_config())

    def lookup_type(self, query: Any, limit: Any = None) -> list[MatchResult]:
        """Resolve a free-text type query to ranked catalog entries.

        Args:
            query: Non-blank query text
            limit: Positive integer, or None for the configured default

        Returns:
            Ranked matches; an empty list means no entry matched

        Raises:
            InvalidQueryError: Missing or blank query
            InvalidLimitError: Limit that is not a positive integer
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidQueryError("query must be a non-blank string")
        if limit is None:
            limit = self.config.default_limit
        # bool is an int subclass but never a meaningful limit
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise InvalidLimitError(f"limit must be a positive integer, got {limit!r}")
        if limit < 1:
            raise InvalidLimitError(f"limit must be a positive integer, got {limit}")

        return rank(self.catalog, query, limit, self.config)

    def resolve(self, entry_id: str) -> BodyRef:
        """Reference to the full documentation of an entry.

        Raises:
            EntryNotFoundError: Unknown or retired id
        """
        return self.get_entry(entry_id).body_ref

    def get_entry(self, entry_id: str) -> Entry:
        entry = self.catalog.get(entry_id)
        if entry is None:
            # Accept a bare type name as shorthand for its alloy://type/ id
            entry = self.catalog.get(f"{TYPE_URI_PREFIX}{entry_id}")
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def read_entry(self, entry_id: str) -> str:
        """Documentation text for an entry: its guide section, or the whole guide.

        Raises:
            EntryNotFoundError: Unknown id, or the referenced guide is gone
        """
        ref = self.resolve(entry_id)
        if ref.section is not None:
            text = self.documents.section(ref.uri, ref.section)
        else:
            document = self.documents.get(ref.uri)
            text = document.content if document else None
        if text is None:
            raise EntryNotFoundError(entry_id)
        return text

    def search_docs(self, query: str, max_results: int) -> list[SectionHit]:
        """Free-text search over every guide section."""
        if not query.strip():
            raise InvalidQueryError("query must not be empty")
        if max_results < 1:
            raise InvalidLimitError(f"max_results must be a positive integer, got {max_results}")
        return search_sections(self.documents.all_sections(), query, max_results)
