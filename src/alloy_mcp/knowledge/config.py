"""Knowledge base path configuration.

Defines paths for the static documentation bundled with alloy-mcp.
All paths are resolved relative to this package's resources/ directory.
"""

from pathlib import Path

# Base path for all documentation resources
_RESOURCES_DIR = Path(__file__).parent / "resources"

# Guide index (version-controlled, JSON format)
# Lists every markdown guide with its alloy:// URI, name and description
DOCUMENT_INDEX_PATH = _RESOURCES_DIR / "index.json"

# Curated type catalog (version-controlled, JSON format)
# Each record points at a "## <Type>" section of one guide
CATALOG_PATH = _RESOURCES_DIR / "catalog.json"

# Root directory for guide markdown files referenced by the index
GUIDES_ROOT = _RESOURCES_DIR

# URI scheme prefix for catalog entry ids
TYPE_URI_PREFIX = "alloy://type/"
