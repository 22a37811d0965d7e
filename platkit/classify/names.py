# platkit Platform Names
# Canonical platform and architecture names used in toolchain paths

from types import MappingProxyType
from typing import Mapping

from platkit.classify.darwin import DarwinPlatformKind, classify_darwin_platform
from platkit.errors import PreconditionError
from platkit.triple.model import EnvironmentType, OSType, SubArch, Triple

DARWIN_PLATFORM_NAMES: Mapping[DarwinPlatformKind, str] = MappingProxyType(
    {
        DarwinPlatformKind.MACOS: "macosx",
        DarwinPlatformKind.IPHONEOS: "iphoneos",
        DarwinPlatformKind.IPHONEOS_SIMULATOR: "iphonesimulator",
        DarwinPlatformKind.TVOS: "appletvos",
        DarwinPlatformKind.TVOS_SIMULATOR: "appletvsimulator",
        DarwinPlatformKind.WATCHOS: "watchos",
        DarwinPlatformKind.WATCHOS_SIMULATOR: "watchsimulator",
    }
)

# Recognized operating systems that have no toolchain platform name.
PLATFORMLESS_OS_TYPES = frozenset(
    {
        OSType.ANANAS,
        OSType.CLOUDABI,
        OSType.DRAGONFLY,
        OSType.EMSCRIPTEN,
        OSType.FUCHSIA,
        OSType.KFREEBSD,
        OSType.LV2,
        OSType.NETBSD,
        OSType.SOLARIS,
        OSType.MINIX,
        OSType.RTEMS,
        OSType.NACL,
        OSType.CNK,
        OSType.AIX,
        OSType.CUDA,
        OSType.NVCL,
        OSType.AMDHSA,
        OSType.ELFIAMCU,
        OSType.MESA3D,
        OSType.CONTIKI,
        OSType.AMDPAL,
        OSType.HERMITCORE,
        OSType.HURD,
    }
)


def platform_name(kind: DarwinPlatformKind) -> str:
    return DARWIN_PLATFORM_NAMES[kind]


def platform_name_for_triple(triple: Triple) -> str:
    """
    Get the platform name used for a triple's toolchain directories.

    Returns:
        The platform name, or "" for a recognized OS without one.

    Raises:
        PreconditionError: For an unknown OS, or a Windows environment
            that has no platform.
    """
    os_type = triple.os
    if os_type in PLATFORMLESS_OS_TYPES:
        return ""

    match os_type:
        case OSType.DARWIN | OSType.MACOS | OSType.IOS | OSType.TVOS | OSType.WATCHOS:
            return platform_name(classify_darwin_platform(triple))
        case OSType.LINUX:
            return "android" if triple.is_android else "linux"
        case OSType.FREEBSD:
            return "freebsd"
        case OSType.OPENBSD:
            return "openbsd"
        case OSType.WIN32:
            match triple.environment:
                case EnvironmentType.CYGNUS:
                    return "cygwin"
                case EnvironmentType.GNU:
                    return "mingw"
                case EnvironmentType.MSVC | EnvironmentType.ITANIUM:
                    return "windows"
                case _:
                    raise PreconditionError("Unsupported Windows environment", triple)
        case OSType.PS4:
            return "ps4"
        case OSType.HAIKU:
            return "haiku"
        case OSType.WASI:
            return "wasi"
        case _:
            raise PreconditionError("Unsupported OS", triple)


def major_architecture_name(triple: Triple) -> str:
    """
    Get the architecture directory name for a triple.

    On Linux, 32-bit ARM triples are grouped by ISA revision ("armv7l"
    becomes "armv7"). Everything else keeps its architecture name.
    """
    if triple.os is OSType.LINUX:
        match triple.sub_arch:
            case SubArch.ARM_V7:
                return "armv7"
            case SubArch.ARM_V6:
                return "armv6"
    return triple.arch_name
