"""Tests for markdown section parsing, section search and the guide store."""

import json

import pytest

from alloy_mcp.knowledge import CatalogConstructionError, DocumentStore, StaticDocument
from alloy_mcp.knowledge.sections import (
    Section,
    parse_sections,
    preview,
    score_section,
    search_sections,
)

GUIDE = """# Signers

Intro text.

## PrivateKeySigner

Local key. Use `PrivateKeySigner::random()` in tests.

## Empty

## EthereumWallet

Wraps a `PrivateKeySigner` for a provider.
"""


def _section(heading: str, content: str) -> Section:
    return Section(uri="alloy://signers/signing-guide", resource_name="Signers", heading=heading, content=content)


class TestParseSections:
    def test_splits_on_level_two_headings(self):
        sections = parse_sections("alloy://signers/signing-guide", "Signers", GUIDE)
        assert [s.heading for s in sections] == [
            "(intro)",
            "## PrivateKeySigner",
            "## Empty",
            "## EthereumWallet",
        ]

    def test_intro_keeps_title_line(self):
        intro = parse_sections("u", "n", GUIDE)[0]
        assert intro.content == "# Signers\n\nIntro text."

    def test_section_includes_heading_line(self):
        section = parse_sections("u", "n", GUIDE)[1]
        assert section.content.startswith("## PrivateKeySigner\n")
        assert section.title == "PrivateKeySigner"

    def test_blank_sections_are_dropped(self):
        assert parse_sections("u", "n", "\n\n   \n") == []

    def test_no_intro_when_guide_starts_with_heading(self):
        sections = parse_sections("u", "n", "## Only\nbody")
        assert [s.heading for s in sections] == ["## Only"]


class TestScoreSection:
    def test_heading_match(self):
        assert score_section(_section("## PrivateKeySigner", "## PrivateKeySigner\n..."), "privatekeysigner") == 100

    def test_backtick_match(self):
        section = _section("## EthereumWallet", "## EthereumWallet\nWraps a `PrivateKeySigner`.")
        assert score_section(section, "PrivateKeySigner") == 80

    def test_content_mentions(self):
        section = _section("## Notes", "## Notes\nsigner signer signer")
        assert score_section(section, "signer") == 53

    def test_mention_bonus_is_capped(self):
        section = _section("## Notes", "## Notes\n" + "gas " * 100)
        assert score_section(section, "gas") == 80

    def test_no_match(self):
        assert score_section(_section("## Notes", "## Notes\nnothing"), "blob") == 0


def test_search_sections_adds_term_bonuses() -> None:
    sections = parse_sections("alloy://signers/signing-guide", "Signers", GUIDE)

    hits = search_sections(sections, "ethereum wallet provider", max_results=5)

    assert hits[0].section.title == "EthereumWallet"
    # terms "ethereum" and "wallet" in heading (+10 each) and content (+5 each), "provider" in content (+5)
    assert hits[0].score == 35
    assert [hit.rank for hit in hits] == list(range(1, len(hits) + 1))


def test_search_sections_truncates_and_drops_misses() -> None:
    sections = parse_sections("u", "n", GUIDE)
    assert search_sections(sections, "xyznotreal", max_results=5) == []
    assert len(search_sections(sections, "signer", max_results=1)) == 1


def test_preview_truncates_long_sections() -> None:
    section = _section("## Long", "\n".join(f"line {i}" for i in range(50)))

    text = preview(section, max_lines=40)

    assert text.splitlines()[39] == "line 39"
    assert text.endswith("... (10 more lines, fetch full resource: alloy://signers/signing-guide)")
    assert preview(section, max_lines=50) == section.content


class TestDocumentStore:
    def test_bundled_guides(self):
        store = DocumentStore.from_index()

        assert len(store) == 13
        guide = store.get("alloy://eips/block-identifiers")
        assert guide.name == "Block Identifier Types"
        assert guide.mime_type == "text/markdown"
        assert store.section("alloy://eips/block-identifiers", "BlockId").startswith("## BlockId")
        assert store.section("alloy://eips/block-identifiers", "Nope") is None
        assert store.get("alloy://nope") is None
        assert store.uris() == sorted(store.uris())

    def test_duplicate_uris_fail(self):
        doc = StaticDocument(uri="alloy://a", name="A", description="", content="")
        with pytest.raises(CatalogConstructionError, match="Duplicate document URI"):
            DocumentStore([doc, doc])

    def test_missing_guide_file_fails(self, tmp_path):
        index = tmp_path / "index.json"
        index.write_text(
            json.dumps(
                {"documents": [{"uri": "alloy://a", "name": "A", "description": "", "path": "missing.md"}]}
            ),
            encoding="utf-8",
        )
        with pytest.raises(CatalogConstructionError, match="Cannot read guide alloy://a"):
            DocumentStore.from_index(index_path=index, root=tmp_path)

    def test_incomplete_index_record_fails(self, tmp_path):
        index = tmp_path / "index.json"
        index.write_text(json.dumps({"documents": [{"uri": "alloy://a"}]}), encoding="utf-8")
        with pytest.raises(CatalogConstructionError, match="missing"):
            DocumentStore.from_index(index_path=index, root=tmp_path)

    @pytest.mark.parametrize("index_body", [[], {"documents": {}}, {"guides": []}, ["alloy://a"]])
    def test_index_without_documents_list_fails(self, tmp_path, index_body):
        index = tmp_path / "index.json"
        index.write_text(json.dumps(index_body), encoding="utf-8")
        with pytest.raises(CatalogConstructionError, match="'documents' list"):
            DocumentStore.from_index(index_path=index, root=tmp_path)

    def test_non_object_index_record_fails(self, tmp_path):
        index = tmp_path / "index.json"
        index.write_text(json.dumps({"documents": ["alloy://a"]}), encoding="utf-8")
        with pytest.raises(CatalogConstructionError, match="Guide index record"):
            DocumentStore.from_index(index_path=index, root=tmp_path)

    def test_loads_custom_index(self, tmp_path):
        (tmp_path / "a.md").write_text("# A\n\n## Thing\nbody\n", encoding="utf-8")
        index = tmp_path / "index.json"
        index.write_text(
            json.dumps({"documents": [{"uri": "alloy://a", "name": "A", "description": "d", "path": "a.md"}]}),
            encoding="utf-8",
        )

        store = DocumentStore.from_index(index_path=index, root=tmp_path)

        assert [s.title for s in store.all_sections()] == ["(intro)", "Thing"]
