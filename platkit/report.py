# platkit Platform Report
# Every classification of a single triple, gathered for display

from dataclasses import dataclass
from typing import Optional

from platkit.classify import (
    DarwinPlatformKind,
    classify_darwin_platform,
    infers_simulator_environment,
    is_darwin,
    is_mac_catalyst,
    major_architecture_name,
    normalized_module_triple,
    platform_name_for_triple,
    requires_runtime_rpath,
    runtime_compatibility_version,
    unversioned_triple,
)
from platkit.triple.model import Triple
from platkit.version.versions import VersionTuple


@dataclass(frozen=True)
class PlatformReport:
    """Classification results for one triple."""

    triple: Triple
    platform_name: str
    darwin_kind: Optional[DarwinPlatformKind]
    major_architecture: str
    module_triple: Triple
    unversioned_triple: Triple
    runtime_version: Optional[VersionTuple]
    requires_rpath: bool
    infers_simulator: bool
    mac_catalyst: bool

    @property
    def has_platform(self) -> bool:
        """False for recognized operating systems without a platform name."""
        return bool(self.platform_name)


def build_report(triple: Triple) -> PlatformReport:
    """
    Classify a triple in every way platkit knows.

    Raises:
        PreconditionError: If the triple cannot be named (unknown OS,
            unsupported Windows environment).
    """
    return PlatformReport(
        triple=triple,
        platform_name=platform_name_for_triple(triple),
        darwin_kind=classify_darwin_platform(triple) if is_darwin(triple) else None,
        major_architecture=major_architecture_name(triple),
        module_triple=normalized_module_triple(triple),
        unversioned_triple=unversioned_triple(triple),
        runtime_version=runtime_compatibility_version(triple),
        requires_rpath=requires_runtime_rpath(triple),
        infers_simulator=infers_simulator_environment(triple),
        mac_catalyst=is_mac_catalyst(triple),
    )
