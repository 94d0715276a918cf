"""Tests for environment-driven configuration."""

import pytest

from alloy_mcp.config import (
    LookupConfig,
    MatchConfig,
    get_lookup_config,
    get_match_config,
    get_server_config,
)

ENV_VARS = (
    "ALLOY_MCP_DEFAULT_LIMIT",
    "ALLOY_MCP_MAX_LIMIT",
    "ALLOY_MCP_EDIT_THRESHOLD",
    "ALLOY_MCP_TAG_WEIGHT",
    "ALLOY_MCP_MIN_TOKEN_LENGTH",
    "ALLOY_MCP_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    config = get_server_config()

    assert config.log_level == "INFO"
    assert config.lookup == LookupConfig()
    assert config.lookup.match == MatchConfig()


def test_valid_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ALLOY_MCP_DEFAULT_LIMIT", "8")
    monkeypatch.setenv("ALLOY_MCP_MAX_LIMIT", "20")
    monkeypatch.setenv("ALLOY_MCP_EDIT_THRESHOLD", "0.7")
    monkeypatch.setenv("ALLOY_MCP_TAG_WEIGHT", "0.25")
    monkeypatch.setenv("ALLOY_MCP_MIN_TOKEN_LENGTH", "3")
    monkeypatch.setenv("ALLOY_MCP_LOG_LEVEL", " debug ")

    config = get_server_config()

    assert config.log_level == "DEBUG"
    assert config.lookup.default_limit == 8
    assert config.lookup.max_limit == 20
    assert config.lookup.match.edit_threshold == 0.7
    assert config.lookup.match.tag_weight == 0.25
    assert config.lookup.match.min_token_length == 3


@pytest.mark.parametrize(
    "name",
    [
        "ALLOY_MCP_DEFAULT_LIMIT",
        "ALLOY_MCP_MAX_LIMIT",
        "ALLOY_MCP_EDIT_THRESHOLD",
        "ALLOY_MCP_TAG_WEIGHT",
        "ALLOY_MCP_MIN_TOKEN_LENGTH",
    ],
)
def test_garbage_values_fall_back_to_defaults(monkeypatch, name) -> None:
    monkeypatch.setenv(name, "not-a-number")

    assert get_lookup_config() == LookupConfig()


def test_blank_log_level_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("ALLOY_MCP_LOG_LEVEL", "   ")
    assert get_server_config().log_level == "INFO"


class TestMatchConfigRanges:
    @pytest.mark.parametrize("value", ["-0.1", "1.5", "nan"])
    def test_threshold_outside_unit_interval_uses_default(self, monkeypatch, value):
        monkeypatch.setenv("ALLOY_MCP_EDIT_THRESHOLD", value)
        assert get_match_config().edit_threshold == 0.5

    @pytest.mark.parametrize("value", ["-1", "2", "inf"])
    def test_tag_weight_outside_unit_interval_uses_default(self, monkeypatch, value):
        monkeypatch.setenv("ALLOY_MCP_TAG_WEIGHT", value)
        assert get_match_config().tag_weight == 0.5

    @pytest.mark.parametrize("value", ["0", "1"])
    def test_unit_interval_bounds_are_accepted(self, monkeypatch, value):
        monkeypatch.setenv("ALLOY_MCP_EDIT_THRESHOLD", value)
        monkeypatch.setenv("ALLOY_MCP_TAG_WEIGHT", value)
        config = get_match_config()
        assert config.edit_threshold == float(value)
        assert config.tag_weight == float(value)

    @pytest.mark.parametrize("value", ["0", "-4"])
    def test_min_token_length_is_at_least_one(self, monkeypatch, value):
        monkeypatch.setenv("ALLOY_MCP_MIN_TOKEN_LENGTH", value)
        assert get_match_config().min_token_length == 1


class TestLookupLimits:
    def test_default_limit_is_clamped_to_max(self, monkeypatch):
        monkeypatch.setenv("ALLOY_MCP_DEFAULT_LIMIT", "80")
        monkeypatch.setenv("ALLOY_MCP_MAX_LIMIT", "10")
        config = get_lookup_config()
        assert config.default_limit == 10
        assert config.max_limit == 10

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_non_positive_limits_become_one(self, monkeypatch, value):
        monkeypatch.setenv("ALLOY_MCP_DEFAULT_LIMIT", value)
        monkeypatch.setenv("ALLOY_MCP_MAX_LIMIT", value)
        config = get_lookup_config()
        assert config.default_limit == 1
        assert config.max_limit == 1

    def test_float_limit_is_garbage(self, monkeypatch):
        monkeypatch.setenv("ALLOY_MCP_MAX_LIMIT", "12.5")
        assert get_lookup_config().max_limit == 50
