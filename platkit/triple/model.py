# platkit Triple Model
# Target triple value with tagged views derived from its raw components

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from platkit.errors import PreconditionError
from platkit.version.versions import VersionTuple


class ArchType(str, Enum):
    """Architecture family of a triple."""

    X86 = "x86"
    X86_64 = "x86_64"
    AARCH64 = "aarch64"
    AARCH64_32 = "aarch64_32"
    ARM = "arm"
    PPC64LE = "powerpc64le"
    S390X = "s390x"
    RISCV64 = "riscv64"
    WASM32 = "wasm32"
    UNKNOWN = "unknown"


class SubArch(str, Enum):
    """Refinement of the architecture family."""

    NONE = "none"
    ARM_V6 = "armv6"
    ARM_V7 = "armv7"
    ARM_V7S = "armv7s"
    ARM_V7K = "armv7k"
    ARM64E = "arm64e"


class OSType(str, Enum):
    """
    Operating system family.

    Every Apple OS family has its own member; tvOS is not a flavour of iOS.
    """

    # Apple
    DARWIN = "darwin"
    MACOS = "macos"
    IOS = "ios"
    TVOS = "tvos"
    WATCHOS = "watchos"

    # Supported elsewhere
    LINUX = "linux"
    FREEBSD = "freebsd"
    OPENBSD = "openbsd"
    WIN32 = "windows"
    PS4 = "ps4"
    HAIKU = "haiku"
    WASI = "wasi"

    # Known, but without a platform name
    ANANAS = "ananas"
    CLOUDABI = "cloudabi"
    DRAGONFLY = "dragonfly"
    EMSCRIPTEN = "emscripten"
    FUCHSIA = "fuchsia"
    KFREEBSD = "kfreebsd"
    LV2 = "lv2"
    NETBSD = "netbsd"
    SOLARIS = "solaris"
    MINIX = "minix"
    RTEMS = "rtems"
    NACL = "nacl"
    CNK = "cnk"
    AIX = "aix"
    CUDA = "cuda"
    NVCL = "nvcl"
    AMDHSA = "amdhsa"
    ELFIAMCU = "elfiamcu"
    MESA3D = "mesa3d"
    CONTIKI = "contiki"
    AMDPAL = "amdpal"
    HERMITCORE = "hermit"
    HURD = "hurd"

    UNKNOWN = "unknown"


class EnvironmentType(str, Enum):
    """ABI or runtime flavour of a triple."""

    NONE = "none"
    SIMULATOR = "simulator"
    MACABI = "macabi"
    GNU = "gnu"
    MSVC = "msvc"
    CYGNUS = "cygnus"
    ITANIUM = "itanium"
    ANDROID = "android"
    OTHER = "other"


ARCH_TYPES: Mapping[str, ArchType] = MappingProxyType(
    {
        "x86": ArchType.X86,
        "i386": ArchType.X86,
        "i486": ArchType.X86,
        "i586": ArchType.X86,
        "i686": ArchType.X86,
        "i786": ArchType.X86,
        "i886": ArchType.X86,
        "i986": ArchType.X86,
        "x86_64": ArchType.X86_64,
        "x86_64h": ArchType.X86_64,
        "amd64": ArchType.X86_64,
        "arm64": ArchType.AARCH64,
        "arm64e": ArchType.AARCH64,
        "aarch64": ArchType.AARCH64,
        "arm64_32": ArchType.AARCH64_32,
        "aarch64_32": ArchType.AARCH64_32,
        "powerpc64le": ArchType.PPC64LE,
        "ppc64le": ArchType.PPC64LE,
        "s390x": ArchType.S390X,
        "riscv64": ArchType.RISCV64,
        "wasm32": ArchType.WASM32,
    }
)

SUB_ARCHES: Mapping[str, SubArch] = MappingProxyType(
    {
        "armv6": SubArch.ARM_V6,
        "armv6j": SubArch.ARM_V6,
        "armv6l": SubArch.ARM_V6,
        "armv7": SubArch.ARM_V7,
        "armv7a": SubArch.ARM_V7,
        "armv7l": SubArch.ARM_V7,
        "armv7hl": SubArch.ARM_V7,
        "armv7-a": SubArch.ARM_V7,
        "armv7s": SubArch.ARM_V7S,
        "armv7k": SubArch.ARM_V7K,
        "arm64e": SubArch.ARM64E,
    }
)

# Matched by prefix, so "macosx10.15" is MACOS and "android21" is ANDROID.
OS_PREFIXES: tuple[tuple[str, OSType], ...] = (
    ("darwin", OSType.DARWIN),
    ("macos", OSType.MACOS),
    ("ios", OSType.IOS),
    ("tvos", OSType.TVOS),
    ("watchos", OSType.WATCHOS),
    ("linux", OSType.LINUX),
    ("freebsd", OSType.FREEBSD),
    ("openbsd", OSType.OPENBSD),
    ("windows", OSType.WIN32),
    ("win32", OSType.WIN32),
    ("mingw32", OSType.WIN32),
    ("cygwin", OSType.WIN32),
    ("ps4", OSType.PS4),
    ("haiku", OSType.HAIKU),
    ("wasi", OSType.WASI),
    ("ananas", OSType.ANANAS),
    ("cloudabi", OSType.CLOUDABI),
    ("dragonfly", OSType.DRAGONFLY),
    ("emscripten", OSType.EMSCRIPTEN),
    ("fuchsia", OSType.FUCHSIA),
    ("kfreebsd", OSType.KFREEBSD),
    ("lv2", OSType.LV2),
    ("netbsd", OSType.NETBSD),
    ("solaris", OSType.SOLARIS),
    ("minix", OSType.MINIX),
    ("rtems", OSType.RTEMS),
    ("nacl", OSType.NACL),
    ("cnk", OSType.CNK),
    ("aix", OSType.AIX),
    ("cuda", OSType.CUDA),
    ("nvcl", OSType.NVCL),
    ("amdhsa", OSType.AMDHSA),
    ("elfiamcu", OSType.ELFIAMCU),
    ("mesa3d", OSType.MESA3D),
    ("contiki", OSType.CONTIKI),
    ("amdpal", OSType.AMDPAL),
    ("hermit", OSType.HERMITCORE),
    ("hurd", OSType.HURD),
)

ENVIRONMENT_PREFIXES: tuple[tuple[str, EnvironmentType], ...] = (
    ("simulator", EnvironmentType.SIMULATOR),
    ("macabi", EnvironmentType.MACABI),
    ("gnu", EnvironmentType.GNU),
    ("msvc", EnvironmentType.MSVC),
    ("cygnus", EnvironmentType.CYGNUS),
    ("itanium", EnvironmentType.ITANIUM),
    ("android", EnvironmentType.ANDROID),
)

_DIGITS = re.compile(r"\d+(?:\.\d+)*")


def _match_prefix(name: str, table: tuple[tuple[str, Enum], ...], default: Enum) -> Enum:
    for prefix, value in table:
        if name.startswith(prefix):
            return value
    return default


def _embedded_numbers(name: str) -> Optional[list[int]]:
    """Return the dotted number embedded in a component name, if any."""
    match = _DIGITS.search(name)
    if match is None:
        return None
    return [int(p) for p in match.group(0).split(".")]


@dataclass(frozen=True)
class Triple:
    """
    A target triple: arch-vendor-os[-environment].

    The raw component strings are kept as given; the tagged views
    (``arch``, ``os``, ``environment`` ...) are derived from them.
    """

    arch_name: str
    vendor: str
    os_name: str
    environment_name: str = ""

    @classmethod
    def parse(cls, text: str) -> "Triple":
        """
        Split a dash-separated triple string into its components.

        No normalization happens here; "x86_64-apple-macosx10.15" keeps
        every component verbatim.

        Raises:
            ValueError: If there are fewer than three components or no architecture.
        """
        parts = text.strip().split("-", 3)
        if len(parts) < 3 or not parts[0]:
            raise ValueError(f"Invalid target triple: {text!r} (expected arch-vendor-os[-environment])")
        return cls(*parts)

    def __str__(self) -> str:
        parts = [self.arch_name, self.vendor, self.os_name]
        if self.environment_name:
            parts.append(self.environment_name)
        return "-".join(parts)

    # -- architecture ---------------------------------------------------------

    @property
    def arch(self) -> ArchType:
        arch = ARCH_TYPES.get(self.arch_name)
        if arch is not None:
            return arch
        if self.arch_name.startswith("arm"):
            return ArchType.ARM
        return ArchType.UNKNOWN

    @property
    def sub_arch(self) -> SubArch:
        return SUB_ARCHES.get(self.arch_name, SubArch.NONE)

    @property
    def is_aarch64(self) -> bool:
        """True for every 64-bit ARM flavour, including arm64_32."""
        return self.arch in (ArchType.AARCH64, ArchType.AARCH64_32)

    # -- operating system -----------------------------------------------------

    @property
    def os(self) -> OSType:
        return _match_prefix(self.os_name, OS_PREFIXES, OSType.UNKNOWN)

    @property
    def os_version(self) -> Optional[VersionTuple]:
        numbers = _embedded_numbers(self.os_name)
        if numbers is None:
            return None
        return VersionTuple(*numbers[:3])

    def _os_version_parts(self) -> tuple[int, int, int]:
        version = self.os_version
        if version is None:
            return 0, 0, 0
        return version.major, version.minor or 0, version.subminor or 0

    def macos_version(self) -> tuple[int, int, int]:
        """
        The macOS version this triple targets.

        Darwin kernel versions are translated (darwin19 is 10.15, darwin20
        is 11.0); a missing version means 10.4.
        """
        major, minor, micro = self._os_version_parts()
        if self.os is OSType.DARWIN:
            if major == 0:
                major = 8
            if major < 4:
                return 10, 0, 0
            if major <= 19:
                return 10, major - 4, 0
            return 11 + major - 20, 0, 0
        if self.os is OSType.MACOS:
            if major == 0:
                return 10, 4, 0
            return major, minor, micro
        raise PreconditionError("macOS version requested for a non-macOS triple", self)

    def ios_version(self) -> tuple[int, int, int]:
        """The iOS (or tvOS) version; defaults to 5.0, or 7.0 for arm64."""
        if self.os not in (OSType.IOS, OSType.TVOS):
            raise PreconditionError("iOS version requested for a non-iOS triple", self)
        major, minor, micro = self._os_version_parts()
        if major == 0:
            major = 7 if self.arch is ArchType.AARCH64 else 5
        return major, minor, micro

    def watchos_version(self) -> tuple[int, int, int]:
        """The watchOS version; defaults to 2.0."""
        if self.os is not OSType.WATCHOS:
            raise PreconditionError("watchOS version requested for a non-watchOS triple", self)
        major, minor, micro = self._os_version_parts()
        if major == 0:
            major = 2
        return major, minor, micro

    def is_os_version_lt(self, major: int, minor: int = 0, micro: int = 0) -> bool:
        """Compare the version embedded in the OS name (absent parts are 0)."""
        return self._os_version_parts() < (major, minor, micro)

    # -- environment ----------------------------------------------------------

    @property
    def has_environment(self) -> bool:
        return self.environment is not EnvironmentType.NONE

    @property
    def environment(self) -> EnvironmentType:
        name = self.environment_name
        if not name or name == "unknown":
            # mingw32 and cygwin carry their environment in the OS name.
            if self.os_name.startswith("mingw32"):
                return EnvironmentType.GNU
            if self.os_name.startswith("cygwin"):
                return EnvironmentType.CYGNUS
            return EnvironmentType.NONE
        return _match_prefix(name, ENVIRONMENT_PREFIXES, EnvironmentType.OTHER)

    @property
    def is_android(self) -> bool:
        return self.environment is EnvironmentType.ANDROID

    @property
    def android_api_level(self) -> Optional[int]:
        if not self.is_android:
            return None
        numbers = _embedded_numbers(self.environment_name)
        return numbers[0] if numbers else None
