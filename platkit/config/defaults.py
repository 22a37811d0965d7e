# platkit Default Configuration
# Full default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "targets": [
        # Apple
        "x86_64-apple-macosx10.15",
        "arm64-apple-macos11",
        "arm64e-apple-ios14.0",
        "arm64-apple-ios14.0-simulator",
        "x86_64-apple-ios13.1-macabi",
        "arm64-apple-tvos14.0",
        "armv7k-apple-watchos6.0",
        # Elsewhere
        "x86_64-unknown-linux-gnu",
        "armv7-unknown-linux-gnueabihf",
        "aarch64-unknown-linux-android21",
        "x86_64-unknown-windows-msvc",
        "wasm32-unknown-wasi",
    ],
    "sdk": {
        "settings_path": None,
    },
    "output": {
        "verbose": False,
        "colored": True,
    },
}


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# platkit - Target Platform Classification Configuration
#
# targets:  triples listed by 'platkit report'
#           (arch-vendor-os[-environment], e.g. x86_64-apple-macosx10.15)
# sdk:      settings_path points at an SDKSettings.json used by
#           'platkit sdk-version' when --sdk-settings is not given
# output:   verbose adds the module, unversioned and rpath columns

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)


def get_default_config() -> dict[str, Any]:
    """Return a copy of the defaults that callers may modify."""
    return copy.deepcopy(DEFAULT_CONFIG)
