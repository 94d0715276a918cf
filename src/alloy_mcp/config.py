"""Runtime configuration for alloy MCP server."""

from dataclasses import dataclass, field
import os


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class MatchConfig:
    """Score bands and thresholds used by the matcher.

    Bands are (low, high) pairs; a match in a band scores strictly above
    ``low`` and strictly below ``high``.
    """

    substring_band: tuple[float, float] = (0.6, 1.0)
    token_band: tuple[float, float] = (0.3, 0.6)
    edit_threshold: float = 0.5
    tag_weight: float = 0.5
    min_token_length: int = 2


@dataclass(frozen=True)
class LookupConfig:
    default_limit: int = 5
    max_limit: int = 50
    match: MatchConfig = field(default_factory=MatchConfig)


@dataclass(frozen=True)
class ServerConfig:
    log_level: str
    lookup: LookupConfig


def _clamp_unit(value: float, default: float) -> float:
    return value if 0.0 <= value <= 1.0 else default


def get_match_config() -> MatchConfig:
    """Load matcher tuning from environment variables."""
    defaults = MatchConfig()
    return MatchConfig(
        edit_threshold=_clamp_unit(
            _env_float("ALLOY_MCP_EDIT_THRESHOLD", defaults.edit_threshold),
            defaults.edit_threshold,
        ),
        tag_weight=_clamp_unit(
            _env_float("ALLOY_MCP_TAG_WEIGHT", defaults.tag_weight),
            defaults.tag_weight,
        ),
        min_token_length=max(1, _env_int("ALLOY_MCP_MIN_TOKEN_LENGTH", defaults.min_token_length)),
    )


def get_lookup_config() -> LookupConfig:
    """Load lookup limits from environment variables."""
    max_limit = max(1, _env_int("ALLOY_MCP_MAX_LIMIT", 50))
    default_limit = min(max(1, _env_int("ALLOY_MCP_DEFAULT_LIMIT", 5)), max_limit)
    return LookupConfig(
        default_limit=default_limit,
        max_limit=max_limit,
        match=get_match_config(),
    )


def get_server_config() -> ServerConfig:
    return ServerConfig(
        log_level=_env_str("ALLOY_MCP_LOG_LEVEL", "INFO").upper(),
        lookup=get_lookup_config(),
    )
