# platkit Test Fixtures
# Pytest fixtures for platkit tests

import json
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory and point the config path into it."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("PLATKIT_CONFIG", str(home / ".config" / "platkit" / "config.yaml"))
    return home


@pytest.fixture
def sdk_settings_data() -> dict:
    """SDKSettings.json content of a macOS 10.15 SDK."""
    return {
        "CanonicalName": "macosx10.15",
        "Version": "10.15",
        "VersionMap": {
            "macOS_iOSMac": {"10.15": "13.1", "10.15.1": "13.2", "11": "14.2"},
            "iOSMac_macOS": {"13.1": "10.15", "13.2": "10.15.1"},
        },
    }


@pytest.fixture
def sdk_settings_file(temp_dir: Path, sdk_settings_data: dict) -> Path:
    """Write SDKSettings.json."""
    path = temp_dir / "SDKSettings.json"
    path.write_text(json.dumps(sdk_settings_data), encoding="utf-8")
    return path


@pytest.fixture
def sample_config(sdk_settings_file: Path) -> dict:
    """Create sample configuration dict."""
    return {
        "targets": [
            "x86_64-apple-macosx10.15",
            "aarch64-unknown-linux-android21",
        ],
        "sdk": {"settings_path": str(sdk_settings_file)},
        "output": {"verbose": False, "colored": False},
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file at the PLATKIT_CONFIG location."""
    config_dir = temp_home / ".config" / "platkit"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path
