"""Markdown section splitting and free-text section search.

Guides are split on level-two headings ("## ") so that a search hit can
return just the relevant part of a guide. Scoring is a fixed, explainable
heuristic, not a statistical ranking:

- Heading contains the whole query: 100
- Content contains the query wrapped in back-ticks: 80
- Content contains the query: 50 + number of mentions (capped at 30)

``search_sections`` adds per-term bonuses on top (+10 heading, +5 content)
so multi-word queries still find sections mentioning only some of the words.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

INTRO_HEADING = "(intro)"

HEADING_SCORE = 100
BACKTICK_SCORE = 80
CONTENT_BASE_SCORE = 50
MAX_MENTION_BONUS = 30
TERM_HEADING_BONUS = 10
TERM_CONTENT_BONUS = 5


@dataclass(frozen=True)
class Section:
    """A "## " section of one guide.

    Attributes:
        uri: Guide URI the section belongs to
        resource_name: Display name of the guide
        heading: Heading line as written (e.g., "## PrivateKeySigner"),
            or "(intro)" for text before the first heading
        content: Section text including the heading line
    """

    uri: str
    resource_name: str
    heading: str
    content: str

    @property
    def title(self) -> str:
        """Heading without the leading hashes."""
        return self.heading.lstrip("#").strip()


@dataclass(frozen=True)
class SectionHit:
    section: Section
    score: int
    rank: int


def parse_sections(uri: str, resource_name: str, content: str) -> list[Section]:
    """Split markdown into sections on "## " headings.

    Text before the first heading becomes an "(intro)" section. Sections
    whose text is empty after trimming are dropped.

    Example:
        >>> parts = parse_sections("alloy://x", "X", "# X\\nintro\\n## A\\nbody")
        >>> [s.heading for s in parts]
        ['(intro)', '## A']
    """
    sections: list[Section] = []
    heading = ""
    lines: list[str] = []

    def flush() -> None:
        text = "\n".join(lines).strip()
        if text:
            sections.append(
                Section(
                    uri=uri,
                    resource_name=resource_name,
                    heading=heading or INTRO_HEADING,
                    content=text,
                )
            )

    for line in content.splitlines():
        if line.startswith("## "):
            flush()
            heading = line.rstrip()
            lines = [line]
        else:
            lines.append(line)
    flush()

    return sections


def score_section(section: Section, query: str) -> int:
    """Score how well a section matches a whole query. 0 means no match."""
    query_lower = query.lower()
    if not query_lower:
        return 0
    heading_lower = section.heading.lower()
    content_lower = section.content.lower()

    if query_lower in heading_lower:
        return HEADING_SCORE

    if f"`{query_lower}`" in content_lower:
        return BACKTICK_SCORE

    if query_lower in content_lower:
        mentions = content_lower.count(query_lower)
        return CONTENT_BASE_SCORE + min(mentions, MAX_MENTION_BONUS)

    return 0


def search_sections(sections: Iterable[Section], query: str, max_results: int) -> list[SectionHit]:
    """Rank sections for a free-text query.

    Args:
        sections: Sections to search, in a stable order (ties keep it)
        query: Free-text query
        max_results: Maximum number of hits to return

    Returns:
        Hits sorted by score (highest first), ranks starting at 1
    """
    terms = query.lower().split()
    scored: list[tuple[int, Section]] = []

    for section in sections:
        heading_lower = section.heading.lower()
        content_lower = section.content.lower()

        total = score_section(section, query)
        for term in terms:
            if term in heading_lower:
                total += TERM_HEADING_BONUS
            if term in content_lower:
                total += TERM_CONTENT_BONUS

        if total > 0:
            scored.append((total, section))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [
        SectionHit(section=section, score=total, rank=rank)
        for rank, (total, section) in enumerate(scored[:max_results], start=1)
    ]


def preview(section: Section, max_lines: int) -> str:
    """Section text cut to ``max_lines`` with a pointer to the full guide."""
    lines = section.content.splitlines()
    if len(lines) <= max_lines:
        return section.content
    remaining = len(lines) - max_lines
    return "\n".join(lines[:max_lines]) + (
        f"\n\n... ({remaining} more lines, fetch full resource: {section.uri})"
    )
