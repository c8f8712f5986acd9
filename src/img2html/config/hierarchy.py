"""Configuration hierarchy: merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.img2html/config.yaml)
  3. Project config   (./img2html.yaml)
  4. Environment variables (IMG2HTML_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from img2html.config.defaults import DEFAULT_BASE_DIR, get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = DEFAULT_BASE_DIR / "config.yaml"
_PROJECT_CONFIG_NAME = "img2html.yaml"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "IMG2HTML_MAX_WIDTH": "max_width",
    "IMG2HTML_MAX_HEIGHT": "max_height",
    "IMG2HTML_CACHE_DIR": "cache_dir",
    "IMG2HTML_CACHE_LIFETIME": "cache_lifetime",
    "IMG2HTML_BASE_DIR": "base_dir",
    "IMG2HTML_LOG_LEVEL": "log_level",
}

# Keys that should be parsed as specific types
_TYPE_MAP: dict[str, type] = {
    "max_width": int,
    "max_height": int,
    "cache_lifetime": int,
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    Returns a merged dict with the final resolved values.
    """
    config = get_defaults()

    global_cfg = _load_yaml_config(_GLOBAL_CONFIG_PATH)
    if global_cfg:
        config.update(global_cfg)

    project_path = _find_project_config()
    if project_path:
        project_cfg = _load_yaml_config(project_path)
        if project_cfg:
            config.update(project_cfg)

    config.update(_load_env_vars())

    # Only override when explicitly set
    for key, value in runtime_overrides.items():
        if value is not None:
            config[key] = value

    return config


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Parse a YAML mapping from ``path``.

    Missing, unreadable and non-mapping files yield None.
    """
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning(
            "Ignoring config %s: top level is %s, not a mapping", path, type(data).__name__
        )
        return None
    return data


def _find_project_config(start: Path | None = None) -> Path | None:
    """Nearest img2html.yaml at or above ``start`` (the working directory by default)."""
    here = (start or Path.cwd()).absolute()
    candidates = (d / _PROJECT_CONFIG_NAME for d in (here, *here.parents))
    return next((c for c in candidates if c.is_file()), None)


def _load_env_vars() -> dict[str, Any]:
    """Read IMG2HTML_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None or value == "":
            continue
        result[config_key] = _coerce_env_value(config_key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    """Coerce an environment variable string to the appropriate type."""
    target_type = _TYPE_MAP.get(key)
    if target_type:
        try:
            return target_type(value)
        except (ValueError, TypeError):
            logger.warning(
                "Cannot convert env var for '%s' to %s: %s", key, target_type.__name__, value
            )
            return value
    return value
