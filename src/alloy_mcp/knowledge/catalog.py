"""Entry catalog: the immutable table of curated alloy type entries.

The catalog is built once at startup from the curated records in
``resources/catalog.json`` and is read-only afterwards. Iteration order is
the record order of the source file, which is also the tie-break order for
ranking.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from alloy_mcp.knowledge.config import CATALOG_PATH
from alloy_mcp.knowledge.documents import DocumentStore
from alloy_mcp.knowledge.errors import CatalogConstructionError
from alloy_mcp.knowledge.models import BodyRef, Entry

logger = logging.getLogger("alloy-mcp.knowledge")


class EntryRecord(BaseModel):
    """Schema of one raw catalog record."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    id: str = Field(min_length=1)
    primary_name: str = Field(min_length=1)
    aliases: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    summary: str = Field(min_length=1)
    resource: str = Field(min_length=1, description="Guide URI holding the entry's documentation")
    section: str | None = Field(default=None, description="Heading of the guide section")

    @field_validator("aliases", "tags")
    @classmethod
    def _no_blank_items(cls, values: list[str]) -> list[str]:
        cleaned = [value.strip() for value in values]
        if any(not value for value in cleaned):
            raise ValueError("must not contain empty strings")
        # Drop duplicates, keep curation order
        return list(dict.fromkeys(cleaned))

    def to_entry(self) -> Entry:
        return Entry(
            id=self.id,
            primary_name=self.primary_name,
            aliases=tuple(self.aliases),
            tags=tuple(self.tags),
            summary=self.summary,
            body_ref=BodyRef(uri=self.resource, section=self.section),
        )


class Catalog:
    """Immutable, insertion-ordered collection of entries.

    Usage:
        >>> catalog = Catalog.from_records([
        ...     {"id": "alloy://type/BlockId", "primary_name": "BlockId",
        ...      "summary": "Block by hash or number.",
        ...      "resource": "alloy://eips/block-identifiers", "section": "BlockId"},
        ... ])
        >>> catalog.get("alloy://type/BlockId").primary_name
        'BlockId'
        >>> catalog.get("alloy://type/Retired") is None
        True
    """

    def __init__(self, entries: Iterable[Entry]):
        by_id: dict[str, Entry] = {}
        for entry in entries:
            if entry.id in by_id:
                raise CatalogConstructionError(f"Duplicate entry id: {entry.id}")
            by_id[entry.id] = entry
        self._entries = tuple(by_id.values())
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "Catalog":
        """Validate raw records and build a catalog.

        Raises:
            CatalogConstructionError: On a malformed record or duplicate id
        """
        entries = []
        for position, record in enumerate(records):
            try:
                entries.append(EntryRecord.model_validate(record).to_entry())
            except ValidationError as exc:
                raise CatalogConstructionError(
                    f"Invalid catalog record #{position}: {exc}"
                ) from exc
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id

    def all_entries(self) -> tuple[Entry, ...]:
        """Every entry in insertion order."""
        return self._entries

    def get(self, entry_id: str) -> Entry | None:
        return self._by_id.get(entry_id)

    def ids(self) -> list[str]:
        return [entry.id for entry in self._entries]


def check_body_refs(catalog: Catalog, documents: DocumentStore) -> None:
    """Ensure every entry points at an existing guide and section.

    Raises:
        CatalogConstructionError: Listing every dangling reference
    """
    dangling = []
    for entry in catalog:
        ref = entry.body_ref
        if ref.uri not in documents:
            dangling.append(f"{entry.id} -> {ref.uri} (unknown guide)")
        elif ref.section is not None and documents.section(ref.uri, ref.section) is None:
            dangling.append(f"{entry.id} -> {ref.locator} (unknown section)")
    if dangling:
        raise CatalogConstructionError("Dangling catalog references: " + "; ".join(dangling))


def load_catalog(
    documents: DocumentStore | None = None,
    path: Path = CATALOG_PATH,
) -> Catalog:
    """Build the bundled catalog, optionally checking references against guides."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogConstructionError(f"Cannot read catalog {path}: {exc}") from exc

    records = data.get("entries") if isinstance(data, dict) else None
    if not isinstance(records, list):
        raise CatalogConstructionError(f"Catalog {path} must contain an 'entries' list")

    catalog = Catalog.from_records(records)
    if documents is not None:
        check_body_refs(catalog, documents)

    logger.info("Loaded %d catalog entries from %s", len(catalog), path)
    return catalog
