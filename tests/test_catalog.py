"""Tests for catalog construction and the bundled catalog."""

import dataclasses
import json

import pytest

from alloy_mcp.knowledge import (
    BodyRef,
    Catalog,
    CatalogConstructionError,
    DocumentStore,
    StaticDocument,
    load_catalog,
)
from alloy_mcp.knowledge.catalog import check_body_refs

from conftest import make_entry


def _record(**overrides) -> dict:
    record = {
        "id": "alloy://type/BlockId",
        "primary_name": "BlockId",
        "aliases": ["block id"],
        "tags": ["blocks"],
        "summary": "Block by hash or number.",
        "resource": "alloy://eips/block-identifiers",
        "section": "BlockId",
    }
    record.update(overrides)
    return record


class TestFromRecords:
    def test_builds_entries_in_order(self):
        catalog = Catalog.from_records(
            [
                _record(),
                _record(id="alloy://type/HashOrNumber", primary_name="HashOrNumber", section=None),
            ]
        )

        assert catalog.ids() == ["alloy://type/BlockId", "alloy://type/HashOrNumber"]
        entry = catalog.get("alloy://type/BlockId")
        assert entry.aliases == ("block id",)
        assert entry.tags == ("blocks",)
        assert entry.body_ref == BodyRef("alloy://eips/block-identifiers", "BlockId")
        assert catalog.get("alloy://type/HashOrNumber").body_ref.section is None

    def test_unknown_id_returns_none(self):
        catalog = Catalog.from_records([_record()])
        assert catalog.get("alloy://type/Retired") is None
        assert "alloy://type/Retired" not in catalog

    def test_duplicate_ids_fail(self):
        with pytest.raises(CatalogConstructionError, match="Duplicate entry id"):
            Catalog.from_records([_record(), _record(primary_name="Other")])

    def test_duplicate_primary_names_are_allowed(self):
        catalog = Catalog.from_records([_record(), _record(id="alloy://type/BlockId2")])
        assert len(catalog) == 2

    @pytest.mark.parametrize(
        "overrides",
        [
            {"primary_name": "   "},
            {"aliases": ["block id", ""]},
            {"tags": [" "]},
            {"summary": ""},
            {"unexpected": "field"},
        ],
    )
    def test_malformed_records_fail(self, overrides):
        with pytest.raises(CatalogConstructionError, match="Invalid catalog record #0"):
            Catalog.from_records([_record(**overrides)])

    def test_missing_field_fails(self):
        record = _record()
        del record["resource"]
        with pytest.raises(CatalogConstructionError):
            Catalog.from_records([record])

    def test_duplicate_tags_are_collapsed(self):
        catalog = Catalog.from_records([_record(tags=["blocks", "rpc", "blocks"])])
        assert catalog.get("alloy://type/BlockId").tags == ("blocks", "rpc")


def test_catalog_is_read_only() -> None:
    catalog = Catalog([make_entry("BlockId")])

    assert isinstance(catalog.all_entries(), tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.all_entries()[0].summary = "changed"


def test_check_body_refs_reports_dangling_references() -> None:
    documents = DocumentStore(
        [StaticDocument(uri="alloy://test/guide", name="Guide", description="", content="## BlockId\ntext")]
    )
    catalog = Catalog(
        [
            make_entry("BlockId"),
            make_entry("Missing"),
        ]
    )

    with pytest.raises(CatalogConstructionError, match="alloy://type/Missing"):
        check_body_refs(catalog, documents)


def test_load_catalog_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogConstructionError, match="Cannot read catalog"):
        load_catalog(path=path)


def test_load_catalog_requires_entries_list(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"entries": {}}), encoding="utf-8")

    with pytest.raises(CatalogConstructionError, match="'entries' list"):
        load_catalog(path=path)


def test_bundled_catalog_resolves_against_bundled_guides() -> None:
    documents = DocumentStore.from_index()
    catalog = load_catalog(documents)

    assert len(catalog) >= 50
    for entry in catalog:
        assert entry.body_ref.uri in documents
        assert documents.section(entry.body_ref.uri, entry.body_ref.section) is not None
