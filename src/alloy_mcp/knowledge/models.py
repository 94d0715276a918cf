"""Data models for the alloy type catalog and lookup results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MatchField(str, Enum):
    """Which kind of entry field produced a match score."""

    NAME = "name"
    ALIAS = "alias"
    TAG = "tag"
    NONE = "none"


@dataclass(frozen=True)
class BodyRef:
    """Pointer to the documentation body of an entry.

    The body itself is owned by the document store; the catalog keeps only
    this reference so matching never touches guide text.

    Attributes:
        uri: Guide URI (e.g., "alloy://eips/block-identifiers")
        section: Heading text of the "## " section inside the guide,
            or None to mean the whole guide
    """

    uri: str
    section: str | None = None

    @property
    def locator(self) -> str:
        return f"{self.uri}#{self.section}" if self.section else self.uri


@dataclass(frozen=True)
class Entry:
    """One curated knowledge base record for an alloy type or concept.

    Attributes:
        id: Stable unique identifier, e.g. "alloy://type/BlockId"
        primary_name: Canonical type name, e.g. "BlockId"
        aliases: Alternate spellings a user might type, in curation order
        tags: Coarse category labels (e.g., "consensus", "gas")
        summary: One-line description returned with every match
        body_ref: Where the full documentation lives

    Example:
        >>> entry = Entry(
        ...     id="alloy://type/BlockId",
        ...     primary_name="BlockId",
        ...     aliases=("block id",),
        ...     tags=("blocks",),
        ...     summary="Block identifier by hash or number/tag.",
        ...     body_ref=BodyRef("alloy://eips/block-identifiers", "BlockId"),
        ... )
        >>> entry.names
        ('BlockId', 'block id')
    """

    id: str
    primary_name: str
    aliases: tuple[str, ...]
    tags: tuple[str, ...]
    summary: str
    body_ref: BodyRef

    @property
    def names(self) -> tuple[str, ...]:
        """Primary name followed by all aliases."""
        return (self.primary_name, *self.aliases)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "primary_name": self.primary_name,
            "aliases": list(self.aliases),
            "tags": list(self.tags),
            "summary": self.summary,
            "resource": self.body_ref.uri,
            "section": self.body_ref.section,
        }


@dataclass(frozen=True)
class MatchResult:
    """One ranked lookup result.

    Produced fresh for every request and never written back to the catalog.

    Attributes:
        entry_id: Id of the matched entry
        score: Similarity in [0, 1], higher is better
        matched_field: Field kind that produced the best score
        summary: Entry summary, copied for display
        resource: Guide URI that documents the entry
    """

    entry_id: str
    score: float
    matched_field: MatchField
    summary: str
    resource: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.entry_id,
            "score": round(self.score, 4),
            "matched_field": self.matched_field.value,
            "summary": self.summary,
            "resource": self.resource,
        }
