"""Whole-catalog ranking of a type query."""

from __future__ import annotations

import logging

from alloy_mcp.config import LookupConfig
from alloy_mcp.knowledge import matcher
from alloy_mcp.knowledge.catalog import Catalog
from alloy_mcp.knowledge.errors import InvalidLimitError, InvalidQueryError
from alloy_mcp.knowledge.models import MatchResult

logger = logging.getLogger("alloy-mcp.knowledge")


def clamp_limit(limit: int, max_limit: int) -> int:
    """Clamp a positive limit to the hard cap.

    Raises:
        InvalidLimitError: If limit is below 1
    """
    if limit < 1:
        raise InvalidLimitError(f"limit must be a positive integer, got {limit}")
    return min(limit, max_limit)


def rank(
    catalog: Catalog,
    query: str,
    limit: int,
    config: LookupConfig,
) -> list[MatchResult]:
    """Score every entry against the query and return the best matches.

    Entries scoring 0 are dropped. Ordering is by score, highest first; equal
    scores keep catalog order, so identical input always yields identical
    output.

    Args:
        catalog: Entries to rank
        query: Raw query text
        limit: Maximum number of results; values above the hard cap are clamped
        config: Limits and matcher tuning

    Returns:
        Ranked results; empty when nothing matched

    Raises:
        InvalidQueryError: If the query is blank after normalization
        InvalidLimitError: If limit is below 1
    """
    normalized = matcher.normalize(query)
    if not normalized:
        raise InvalidQueryError("query must not be empty")
    effective_limit = clamp_limit(limit, config.max_limit)

    scored: list[MatchResult] = []
    for entry in catalog.all_entries():
        value, field = matcher.score(normalized, entry, config.match)
        if value == 0.0:
            continue
        scored.append(
            MatchResult(
                entry_id=entry.id,
                score=value,
                matched_field=field,
                summary=entry.summary,
                resource=entry.body_ref.uri,
            )
        )

    # list.sort is stable: ties keep catalog order
    scored.sort(key=lambda result: result.score, reverse=True)

    logger.debug(
        "Ranked %r: %d of %d entries matched, returning %d",
        normalized,
        len(scored),
        len(catalog),
        min(len(scored), effective_limit),
    )
    return scored[:effective_limit]
