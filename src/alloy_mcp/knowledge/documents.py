"""Static guide storage for alloy documentation.

Guides are markdown files bundled with the package and listed in
``resources/index.json``. They are read once when the store is built and are
never modified afterwards.

Responsibilities:
- Load the guide index and every guide body
- Serve guides by URI (resources, get_resource tool)
- Expose "## " sections for entry resolution and section search
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from alloy_mcp.knowledge.config import DOCUMENT_INDEX_PATH, GUIDES_ROOT
from alloy_mcp.knowledge.errors import CatalogConstructionError
from alloy_mcp.knowledge.sections import Section, parse_sections

logger = logging.getLogger("alloy-mcp.knowledge")

MARKDOWN_MIME_TYPE = "text/markdown"


@dataclass(frozen=True)
class StaticDocument:
    """A guide loaded at startup."""

    uri: str
    name: str
    description: str
    content: str
    mime_type: str = MARKDOWN_MIME_TYPE


class DocumentStore:
    """Immutable URI-addressed collection of guides.

    Usage:
        >>> store = DocumentStore.from_index()
        >>> store.get("alloy://eips/block-identifiers").name
        'Block Identifier Types'
        >>> store.section("alloy://eips/block-identifiers", "BlockId")[:10]
        '## BlockId'
    """

    def __init__(self, documents: Iterable[StaticDocument]):
        by_uri: dict[str, StaticDocument] = {}
        for document in documents:
            if document.uri in by_uri:
                raise CatalogConstructionError(f"Duplicate document URI: {document.uri}")
            by_uri[document.uri] = document
        self._documents = by_uri
        self._sections = {
            uri: tuple(parse_sections(uri, doc.name, doc.content)) for uri, doc in by_uri.items()
        }

    @classmethod
    def from_index(
        cls,
        index_path: Path = DOCUMENT_INDEX_PATH,
        root: Path = GUIDES_ROOT,
    ) -> "DocumentStore":
        """Load every guide listed in the index file.

        Raises:
            CatalogConstructionError: If the index is unreadable or a listed
                guide file is missing
        """
        try:
            with open(index_path, encoding="utf-8") as f:
                index: Any = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogConstructionError(f"Cannot read guide index {index_path}: {exc}") from exc

        items = index.get("documents") if isinstance(index, dict) else None
        if not isinstance(items, list):
            raise CatalogConstructionError(f"Guide index {index_path} must contain a 'documents' list")

        documents = []
        for item in items:
            if not isinstance(item, dict):
                raise CatalogConstructionError(f"Guide index record must be an object: {item!r}")
            try:
                uri, name, description, rel_path = (
                    item["uri"],
                    item["name"],
                    item["description"],
                    item["path"],
                )
            except KeyError as exc:
                raise CatalogConstructionError(f"Guide index record missing {exc}: {item!r}") from exc

            path = root / rel_path
            try:
                content = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise CatalogConstructionError(f"Cannot read guide {uri} at {path}: {exc}") from exc
            documents.append(StaticDocument(uri=uri, name=name, description=description, content=content))

        store = cls(documents)
        logger.info("Loaded %d guides from %s", len(store), index_path)
        return store

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, uri: object) -> bool:
        return uri in self._documents

    def get(self, uri: str) -> StaticDocument | None:
        return self._documents.get(uri)

    def all_documents(self) -> list[StaticDocument]:
        """All guides sorted by URI."""
        return [self._documents[uri] for uri in sorted(self._documents)]

    def uris(self) -> list[str]:
        return sorted(self._documents)

    def sections(self, uri: str) -> tuple[Section, ...]:
        return self._sections.get(uri, ())

    def all_sections(self) -> list[Section]:
        """Sections of every guide, guides in URI order."""
        return [section for uri in self.uris() for section in self._sections[uri]]

    def section(self, uri: str, heading: str) -> str | None:
        """Text of the section titled ``heading`` in guide ``uri``.

        ``heading`` is compared without the leading "## ".
        """
        for section in self.sections(uri):
            if section.title == heading:
                return section.content
        return None
