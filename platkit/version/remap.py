# platkit SDK Version Remapping
# Translate SDK versions between platform families through a version map

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

from platkit.version.versions import VersionTuple

if TYPE_CHECKING:
    from platkit.triple.model import Triple

# Build-less version string -> version in the related platform family.
VersionMap = Mapping[str, VersionTuple]

# Key of the macOS -> Mac Catalyst map inside SDKSettings.json.
MACOS_TO_CATALYST_KEY = "macOS_iOSMac"

CATALYST_FALLBACK_VERSION = VersionTuple(0, 0, 0)


def freeze_version_map(entries: Mapping[str, Any]) -> VersionMap:
    """
    Build a read-only version map.

    Values may be VersionTuple instances or dotted strings. Keys are
    re-rendered through VersionTuple and lose any build component.
    """
    frozen: dict[str, VersionTuple] = {}
    for key, value in entries.items():
        if not isinstance(value, VersionTuple):
            value = VersionTuple.parse(str(value))
        frozen[VersionTuple.parse(str(key)).without_build().as_string()] = value
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class SDKInfo:
    """Version data of an SDK as reported by its settings file."""

    version: VersionTuple
    macos_to_catalyst: VersionMap = field(default_factory=lambda: MappingProxyType({}))


def remap_version(version_map: VersionMap, version: VersionTuple) -> Optional[VersionTuple]:
    """
    Remap a version through the map, dropping trailing ".0" components.

    The build component is never part of the lookup. A zero subminor may be
    dropped to retry with major.minor, and a zero minor to retry with major
    alone. Fallback starts only from a full major.minor.subminor version,
    and a non-zero component stops the search.

    Returns:
        The mapped version, or None if there is no mapping.
    """
    version = version.without_build()

    known = version_map.get(version.as_string())
    if known is not None:
        return known

    # Only an explicit ".0" subminor is dropped; "11.0" does not fall back to "11".
    if version.subminor is None or version.subminor != 0:
        return None
    version = VersionTuple(version.major, version.minor)
    known = version_map.get(version.as_string())
    if known is not None:
        return known

    if version.minor != 0:
        return None
    version = VersionTuple(version.major)
    return version_map.get(version.as_string())


def target_sdk_version(sdk_info: SDKInfo, triple: "Triple") -> VersionTuple:
    """
    The SDK version to hand to the linker for a target.

    A Mac Catalyst target builds against the macOS SDK, so its version is
    mapped to the iOS-under-Catalyst numbering; without a mapping the result
    is 0.0.0. Every other target uses the SDK version as reported.
    """
    from platkit.classify.predicates import is_mac_catalyst

    if is_mac_catalyst(triple):
        remapped = remap_version(sdk_info.macos_to_catalyst, sdk_info.version)
        return remapped if remapped is not None else CATALYST_FALLBACK_VERSION
    return sdk_info.version
