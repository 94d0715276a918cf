"""Error taxonomy for the alloy knowledge base.

Caller errors (invalid query, invalid limit, unknown id) are reported back
to the MCP client as error envelopes. ``CatalogConstructionError`` is the
only fatal error: it is raised while the server module is imported, before
any transport starts.
"""


class KnowledgeBaseError(Exception):
    """Base class for knowledge base errors."""


class InvalidInputError(KnowledgeBaseError, ValueError):
    """Caller supplied a malformed query or limit."""

    code = "invalid_input"


class InvalidQueryError(InvalidInputError):
    """Query is missing or blank after normalization."""

    code = "invalid_query"


class InvalidLimitError(InvalidInputError):
    """Limit is not a positive integer."""

    code = "invalid_limit"


class EntryNotFoundError(KnowledgeBaseError, KeyError):
    """No catalog entry carries the requested id.

    Not a fault: the entry may have been retired from the catalog.
    """

    code = "entry_not_found"

    def __init__(self, entry_id: str):
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"Entry not found: {self.entry_id}"


class CatalogConstructionError(KnowledgeBaseError):
    """Bundled catalog or guide data is malformed or ambiguous."""
