"""Shared fixtures for alloy-mcp tests."""

import pytest

from alloy_mcp.config import LookupConfig
from alloy_mcp.knowledge import BodyRef, Catalog, Entry, LookupService


def make_entry(
    name: str,
    aliases: tuple[str, ...] = (),
    tags: tuple[str, ...] = (),
    entry_id: str | None = None,
    summary: str | None = None,
) -> Entry:
    return Entry(
        id=entry_id or f"alloy://type/{name}",
        primary_name=name,
        aliases=aliases,
        tags=tags,
        summary=summary or f"Summary of {name}.",
        body_ref=BodyRef(uri="alloy://test/guide", section=name),
    )


@pytest.fixture
def small_catalog() -> Catalog:
    return Catalog(
        [
            make_entry("BlockNumberOrTag", aliases=("block number", "block tag"), tags=("blocks",)),
            make_entry("BlockId", aliases=("block id",), tags=("blocks", "rpc")),
            make_entry("TxEip1559", aliases=("eip1559",), tags=("transactions", "gas")),
            make_entry("FillerStack", aliases=("BlobGasFiller",), tags=("gas",)),
            make_entry("GasFiller", aliases=("gas filler",), tags=("fillers", "gas")),
        ]
    )


@pytest.fixture(scope="session")
def bundled_service() -> LookupService:
    return LookupService.from_resources(LookupConfig())
