"""
ontodag.config - Configuration loading and defaults
"""

from ontodag.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from ontodag.config.loader import (
    apply_env_overrides,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
    validate_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "apply_env_overrides",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
    "validate_config",
]
