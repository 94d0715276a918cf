"""alloy type knowledge base: catalog, matcher, ranker and lookup service."""

from alloy_mcp.knowledge.catalog import Catalog, load_catalog
from alloy_mcp.knowledge.documents import DocumentStore, StaticDocument
from alloy_mcp.knowledge.errors import (
    CatalogConstructionError,
    EntryNotFoundError,
    InvalidInputError,
    InvalidLimitError,
    InvalidQueryError,
    KnowledgeBaseError,
)
from alloy_mcp.knowledge.models import BodyRef, Entry, MatchField, MatchResult
from alloy_mcp.knowledge.service import LookupService

__all__ = [
    "BodyRef",
    "Catalog",
    "CatalogConstructionError",
    "DocumentStore",
    "Entry",
    "EntryNotFoundError",
    "InvalidInputError",
    "InvalidLimitError",
    "InvalidQueryError",
    "KnowledgeBaseError",
    "LookupService",
    "MatchField",
    "MatchResult",
    "StaticDocument",
    "load_catalog",
]
