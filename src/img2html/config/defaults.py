"""Package-level default configuration values."""

from __future__ import annotations

from pathlib import Path
from typing import Any

# Resize bounds (None = keep source size)
DEFAULT_MAX_WIDTH: int | None = None
DEFAULT_MAX_HEIGHT: int | None = None

# Cache settings
DEFAULT_CACHE_LIFETIME = 24 * 60 * 60
DEFAULT_BASE_DIR = Path.home() / ".img2html"
CACHE_SUBDIR_NAME = "image_to_html_cache"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "max_width": DEFAULT_MAX_WIDTH,
        "max_height": DEFAULT_MAX_HEIGHT,
        "cache_dir": None,
        "cache_lifetime": DEFAULT_CACHE_LIFETIME,
        "base_dir": None,
        "log_level": DEFAULT_LOG_LEVEL,
    }
