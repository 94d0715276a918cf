"""Deterministic fuzzy matching of a query against one catalog entry.

Every candidate string of an entry (primary name, aliases, tags) is compared
with the query and the best score wins. Score bands, highest first:

- Exact match (case-insensitive): 1.0
- Substring containment, either direction: (0.6, 1.0), scaled by how much
  of the longer string the shorter one covers
- Typo tolerance via Levenshtein similarity, kept only above a threshold
  (single-word queries against name and alias candidates only)
- Token overlap for multi-word queries: (0.3, 0.6), scaled by the fraction
  of query tokens found inside the entry's names or tags

Tag candidates are weighted down (0.5 by default) so that a precise type
name always outranks a topic-only hit.
"""

from __future__ import annotations

from alloy_mcp.config import MatchConfig
from alloy_mcp.knowledge.models import Entry, MatchField
from alloy_mcp.utils import normalize_input

DEFAULT_MATCH_CONFIG = MatchConfig()


def normalize(text: str) -> str:
    """Case-fold, trim and collapse internal whitespace.

    Examples:
        >>> normalize("  Block   Number\\tOrTag ")
        'block number ortag'
    """
    return normalize_input(text, lowercase=True)


def levenshtein(a: str, b: str) -> int:
    """Classic edit distance (insert, delete, substitute all cost 1).

    Examples:
        >>> levenshtein("blokid", "blockid")
        1
        >>> levenshtein("", "abc")
        3
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (char_a != char_b),  # substitution
                )
            )
        previous = current
    return previous[-1]


def edit_similarity(a: str, b: str) -> float:
    """Levenshtein distance normalized to a similarity in [0, 1]."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest


def _in_band(band: tuple[float, float], fraction: float) -> float:
    low, high = band
    return low + (high - low) * fraction


def candidate_score(
    query: str,
    candidate: str,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
    allow_edit: bool = True,
) -> float:
    """Score one normalized query against one normalized candidate string.

    Args:
        query: Normalized query text
        candidate: Normalized candidate text (name, alias or tag)
        config: Score bands and thresholds
        allow_edit: Whether the edit-distance fallback applies

    Returns:
        Unweighted score in [0, 1]

    Examples:
        >>> candidate_score("blockid", "blockid")
        1.0
        >>> round(candidate_score("block", "blockid"), 3)
        0.886
        >>> candidate_score("xyznotreal", "blockid")
        0.0
    """
    if not query or not candidate:
        return 0.0
    if query == candidate:
        return 1.0

    if query in candidate or candidate in query:
        shorter, longer = sorted((len(query), len(candidate)))
        return _in_band(config.substring_band, shorter / longer)

    if allow_edit:
        shorter, longer = sorted((len(query), len(candidate)))
        # Similarity never exceeds shorter/longer, so skip hopeless pairs
        if shorter / longer > config.edit_threshold:
            similarity = edit_similarity(query, candidate)
            if similarity > config.edit_threshold:
                return similarity

    return 0.0


def token_overlap_score(
    query: str,
    entry: Entry,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> tuple[float, MatchField]:
    """Score a multi-word query by how many of its tokens the entry contains.

    A token counts fully when it is a substring of the primary name or an
    alias, and by ``config.tag_weight`` when only a tag contains it. Tokens
    shorter than ``config.min_token_length`` never count but still belong to
    the denominator.

    Returns:
        (score, field) where field is the name/alias containing the most
        tokens, or TAG when only tags matched.
    """
    tokens = query.split(" ")
    usable = [token for token in tokens if len(token) >= config.min_token_length]
    if not usable:
        return 0.0, MatchField.NONE

    names = [normalize(name) for name in entry.names]
    tags = [normalize(tag) for tag in entry.tags]

    name_hits = [0] * len(names)
    weight = 0.0
    for token in usable:
        hit = False
        for index, name in enumerate(names):
            if token in name:
                name_hits[index] += 1
                hit = True
        if hit:
            weight += 1.0
        elif any(token in tag for tag in tags):
            weight += config.tag_weight

    if weight == 0.0:
        return 0.0, MatchField.NONE

    # +1 keeps a complete overlap strictly below the band ceiling
    score = _in_band(config.token_band, weight / (len(tokens) + 1))

    best_hits = max(name_hits)
    if best_hits == 0:
        return score, MatchField.TAG
    best_index = name_hits.index(best_hits)
    return score, MatchField.NAME if best_index == 0 else MatchField.ALIAS


def score(
    query: str,
    entry: Entry,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> tuple[float, MatchField]:
    """Score a query against every field of an entry and keep the best.

    Candidates are checked in order: primary name, aliases, tags. On equal
    scores the earliest candidate wins, so the reported field is stable.

    Args:
        query: Raw or normalized query text
        entry: Catalog entry to score
        config: Score bands and thresholds

    Returns:
        (score, field); (0.0, MatchField.NONE) when nothing matched

    Examples:
        >>> score("BlockId", block_id_entry)
        (1.0, <MatchField.NAME: 'name'>)
    """
    normalized = normalize(query)
    if not normalized:
        return 0.0, MatchField.NONE

    best_score = 0.0
    best_field = MatchField.NONE
    # A multi-word query is never a misspelled type name
    allow_edit = " " not in normalized

    for index, name in enumerate(entry.names):
        value = candidate_score(normalized, normalize(name), config, allow_edit=allow_edit)
        if value > best_score:
            best_score = value
            best_field = MatchField.NAME if index == 0 else MatchField.ALIAS
            if best_score == 1.0:
                return best_score, best_field

    for tag in entry.tags:
        value = candidate_score(normalized, normalize(tag), config, allow_edit=False)
        value *= config.tag_weight
        if value > best_score:
            best_score = value
            best_field = MatchField.TAG

    overlap, overlap_field = token_overlap_score(normalized, entry, config)
    if overlap > best_score:
        best_score = overlap
        best_field = overlap_field

    return best_score, best_field
