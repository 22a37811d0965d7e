# platkit Version Module
# Version numbers and SDK version remapping

from platkit.version.remap import (
    CATALYST_FALLBACK_VERSION,
    SDKInfo,
    VersionMap,
    freeze_version_map,
    remap_version,
    target_sdk_version,
)
from platkit.version.versions import VersionTuple

__all__ = [
    "VersionTuple",
    "VersionMap",
    "SDKInfo",
    "CATALYST_FALLBACK_VERSION",
    "freeze_version_map",
    "remap_version",
    "target_sdk_version",
]
