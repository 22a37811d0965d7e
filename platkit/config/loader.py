# platkit Configuration Loader
# Load, save, and validate YAML configuration and SDK settings files

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from platkit.config.defaults import generate_default_config, get_default_config
from platkit.config.schema import PlatkitConfig, SdkSettingsFile
from platkit.version.remap import SDKInfo


def get_config_dir() -> Path:
    """Get the platkit configuration directory."""
    return Path.home() / ".config" / "platkit"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("PLATKIT_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> PlatkitConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        PlatkitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config file is invalid.
        ValueError: If config file is not a mapping.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\nRun 'platkit config init' to create one."
        )

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping: {config_path}")

    return PlatkitConfig.model_validate(_merge_with_defaults(data))


def load_config_or_default(config_path: Optional[Path] = None) -> PlatkitConfig:
    """Load configuration, falling back to the defaults when there is no file."""
    if config_path is None:
        config_path = get_config_path()
    if not config_path.exists():
        return PlatkitConfig.model_validate(get_default_config())
    return load_config(config_path)


def save_config(config: PlatkitConfig, config_path: Optional[Path] = None) -> Path:
    """
    Save configuration to YAML file.

    Returns:
        Path: Path where config was saved.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(exclude_none=True, mode="json")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return config_path


def ensure_config_exists(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Ensure configuration file exists, creating default if needed.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file without loading it.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    if not isinstance(data, dict):
        return False, ["Configuration must be a mapping"]

    try:
        config = PlatkitConfig.model_validate(data)
    except ValidationError as e:
        return False, _format_errors(e)

    if not config.targets:
        return False, ["No targets defined"]

    return True, []


def load_sdk_info(settings_path: Path) -> SDKInfo:
    """
    Read the version data of an SDK settings file.

    SDKSettings.json is plain JSON, which the YAML loader reads as is.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a mapping or its versions are invalid.
    """
    if not settings_path.exists():
        raise FileNotFoundError(f"SDK settings file not found: {settings_path}")

    with open(settings_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"SDK settings must be a mapping: {settings_path}")

    try:
        settings = SdkSettingsFile.model_validate(data)
        return settings.to_sdk_info()
    except ValidationError as e:
        raise ValueError(f"Invalid SDK settings in {settings_path}: {'; '.join(_format_errors(e))}") from e


def _format_errors(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        loc = " -> ".join(str(part) for part in item["loc"])
        messages.append(f"{loc}: {item['msg']}")
    return messages


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = get_default_config()

    if "targets" in data:
        result["targets"] = data["targets"]

    # Non-mapping sections are passed through for the schema to reject.
    for section in ("sdk", "output"):
        if section not in data:
            continue
        value = data[section] or {}
        result[section] = {**result[section], **value} if isinstance(value, dict) else value

    return result
