"""Configuration: defaults, YAML/env hierarchy and the validated schema."""

from img2html.config.hierarchy import load_config_hierarchy
from img2html.config.schema import ConverterConfig

__all__ = ["ConverterConfig", "load_config_hierarchy"]
