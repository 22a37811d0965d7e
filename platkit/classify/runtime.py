# platkit Runtime Compatibility
# Minimum runtime ABI version and OS runtime availability per target

from typing import Optional

from platkit.classify.predicates import is_mac_catalyst, is_macos, is_simulator_suffixed
from platkit.triple.model import OSType, Triple
from platkit.version.versions import VersionTuple


def runtime_compatibility_version(triple: Triple) -> Optional[VersionTuple]:
    """
    Get the oldest runtime ABI a binary for this target must work with.

    Returns:
        The compatibility version, or None when the target OS is new
        enough that no older runtime needs to be supported.
    """
    # arm64e only ever shipped with the 5.3 runtime.
    if triple.arch_name == "arm64e":
        return VersionTuple(5, 3)

    if is_macos(triple):
        major, minor, micro = triple.macos_version()
        if major == 10:
            if triple.is_aarch64 and minor <= 16:
                return VersionTuple(5, 3)
            if minor <= 14:
                return VersionTuple(5, 0)
            if minor == 15:
                if micro <= 3:
                    return VersionTuple(5, 1)
                return VersionTuple(5, 2)
        elif major == 11:
            return VersionTuple(5, 3)
        return None

    if triple.os in (OSType.IOS, OSType.TVOS):
        major, minor, micro = triple.ios_version()

        # arm64 simulators and Mac Catalyst arrived with iOS 14 / tvOS 14.
        if (
            triple.is_aarch64
            and major <= 14
            and (is_simulator_suffixed(triple) or is_mac_catalyst(triple))
        ):
            return VersionTuple(5, 3)

        if major <= 12:
            return VersionTuple(5, 0)
        if major == 13:
            if minor <= 3:
                return VersionTuple(5, 1)
            return VersionTuple(5, 2)
        return None

    if triple.os is OSType.WATCHOS:
        major, minor, micro = triple.watchos_version()
        if major <= 5:
            return VersionTuple(5, 0)
        if major == 6:
            if minor <= 1:
                return VersionTuple(5, 1)
            return VersionTuple(5, 2)
        return None

    return None


def requires_runtime_rpath(triple: Triple) -> bool:
    """
    Check if binaries need an rpath to a bundled runtime.

    Only iOS before 12.2 and watchOS before 5.2 lack a runtime in the OS.
    macOS binaries always use the toolchain runtime without an OS rpath.
    """
    if is_macos(triple):
        return False
    if triple.os in (OSType.IOS, OSType.TVOS):
        return triple.is_os_version_lt(12, 2)
    if triple.os is OSType.WATCHOS:
        return triple.is_os_version_lt(5, 2)
    return False
