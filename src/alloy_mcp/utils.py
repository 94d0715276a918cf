"""Validation models and utilities for alloy MCP tools."""

from typing import Annotated, Any, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator


# Section search limits
DEFAULT_SEARCH_RESULTS = 5
MAX_SEARCH_RESULTS = 20

# Section previews longer than this are cut with a pointer to the full guide
PREVIEW_MAX_LINES = 40


def normalize_input(value: Optional[str], lowercase: bool = False) -> str:
    """Normalize user input: collapse whitespace, optionally case-fold."""
    if value is None:
        return ""
    normalized = " ".join(value.split())
    return normalized.casefold() if lowercase else normalized


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


# Type lookup query. Blank input is reported as an invalid_query envelope
# by the lookup service, so no validator here.
TypeQuery = Annotated[
    str,
    Field(
        description=(
            "Type name to search for (e.g., 'TxEip1559', 'BlockId', 'Address', "
            "'PrivateKeySigner'). Case-insensitive, tolerant of typos and partial names."
        ),
    ),
]

# Untyped so every bad limit reaches the lookup service and comes back as
# invalid_limit, rather than being coerced by pydantic.
TypeLimit = Annotated[
    Any,
    Field(
        default=None,
        description="Maximum number of matches (default 5, values above 50 are clamped).",
        json_schema_extra={"type": ["integer", "null"]},
    ),
]

EntryId = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(..., description="Entry id returned by lookup_type (e.g., 'alloy://type/BlockId')"),
]

# Free-text documentation search query
DocsQuery = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        min_length=1,
        description="Free-text query: type name, concept, or error message.",
    ),
]

DocsMaxResults = Annotated[
    int,
    Field(
        default=DEFAULT_SEARCH_RESULTS,
        ge=1,
        le=MAX_SEARCH_RESULTS,
        description=f"Maximum number of sections to return (1-{MAX_SEARCH_RESULTS}).",
    ),
]

ResourceUri = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        description=(
            "Resource URI to fetch (e.g., 'alloy://consensus/transactions'). "
            "Pass 'list' to see all available URIs."
        ),
    ),
]
