# platkit Darwin Platform Classifier
# Map an Apple triple to one of the seven SDK platform kinds

from enum import Enum

from platkit.classify.predicates import is_ios_simulator, is_tvos_simulator, is_watchos_simulator
from platkit.errors import PreconditionError
from platkit.triple.model import OSType, Triple


class DarwinPlatformKind(str, Enum):
    """Apple SDK platform a triple builds against."""

    MACOS = "macOS"
    IPHONEOS = "iPhoneOS"
    IPHONEOS_SIMULATOR = "iPhoneOSSimulator"
    TVOS = "tvOS"
    TVOS_SIMULATOR = "tvOSSimulator"
    WATCHOS = "watchOS"
    WATCHOS_SIMULATOR = "watchOSSimulator"


def classify_darwin_platform(triple: Triple) -> DarwinPlatformKind:
    """
    Classify an Apple triple.

    Mac Catalyst triples classify as iPhoneOS; they are never simulators.

    Raises:
        PreconditionError: If the triple does not target an Apple OS.
    """
    match triple.os:
        case OSType.TVOS:
            if is_tvos_simulator(triple):
                return DarwinPlatformKind.TVOS_SIMULATOR
            return DarwinPlatformKind.TVOS
        case OSType.IOS:
            if is_ios_simulator(triple):
                return DarwinPlatformKind.IPHONEOS_SIMULATOR
            return DarwinPlatformKind.IPHONEOS
        case OSType.WATCHOS:
            if is_watchos_simulator(triple):
                return DarwinPlatformKind.WATCHOS_SIMULATOR
            return DarwinPlatformKind.WATCHOS
        case OSType.MACOS | OSType.DARWIN:
            return DarwinPlatformKind.MACOS
        case _:
            raise PreconditionError("Unsupported Darwin platform", triple)
