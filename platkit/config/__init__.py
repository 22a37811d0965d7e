# platkit Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from platkit.config.defaults import DEFAULT_CONFIG, generate_default_config, get_default_config
from platkit.config.loader import (
    ensure_config_exists,
    get_config_path,
    load_config,
    load_config_or_default,
    load_sdk_info,
    save_config,
    validate_config_file,
)
from platkit.config.schema import OutputConfig, PlatkitConfig, SdkConfig, SdkSettingsFile

__all__ = [
    # Schema
    "PlatkitConfig",
    "OutputConfig",
    "SdkConfig",
    "SdkSettingsFile",
    # Loader
    "load_config",
    "load_config_or_default",
    "save_config",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    "load_sdk_info",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
    "get_default_config",
]
