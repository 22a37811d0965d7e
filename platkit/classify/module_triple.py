# platkit Module Triples
# Normalize triples into the form used to name target-specific module files
#
# Two triples with incompatible ABIs, or that conditional compilation can
# tell apart, must normalize to different values. Synonyms and details that
# do not matter to a compiled module (OS version, vendor spelling) collapse.

import re
from types import MappingProxyType
from typing import Mapping, Optional

from platkit.classify.predicates import is_darwin
from platkit.errors import PreconditionError
from platkit.triple.model import EnvironmentType, Triple

# Names not listed pass through unchanged (armv7, armv7s, armv7k, arm64e ...).
ARCH_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "arm64": "arm64",
        "aarch64": "arm64",
        "x86_64": "x86_64",
        "amd64": "x86_64",
        "i386": "i386",
        "i486": "i386",
        "i586": "i386",
        "i686": "i386",
        "i786": "i386",
        "i886": "i386",
        "i986": "i386",
        "unknown": "unknown",
        "": "unknown",
    }
)

# Applied after the version is cut off. ios, tvos and watchos pass through.
OS_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "macos": "macos",
        "macosx": "macos",
        "darwin": "macos",
        "unknown": "unknown",
        "": "unknown",
    }
)

# None drops the component. simulator and macabi pass through.
ENVIRONMENT_ALIASES: Mapping[str, Optional[str]] = MappingProxyType(
    {
        "unknown": None,
        "": None,
    }
)

APPLE_VENDOR = "apple"

_FIRST_DIGIT = re.compile(r"[0-9]")


def _strip_version(name: str) -> str:
    """Cut a component name before its first ASCII digit."""
    match = _FIRST_DIGIT.search(name)
    return name[: match.start()] if match else name


def module_arch_name(triple: Triple) -> str:
    return ARCH_ALIASES.get(triple.arch_name, triple.arch_name)


def module_vendor_name(triple: Triple) -> str:
    """
    Always "apple".

    Build systems often omit the vendor or write "unknown" for Apple
    targets, and most of the compiler ignores it.

    Raises:
        PreconditionError: If the triple is not an Apple triple.
    """
    if not is_darwin(triple):
        raise PreconditionError("Refusing to normalize a non-Darwin triple to 'apple'", triple)
    return APPLE_VENDOR


def module_os_name(triple: Triple) -> str:
    name = _strip_version(triple.os_name)
    return OS_ALIASES.get(name, name)


def module_environment_name(triple: Triple) -> Optional[str]:
    name = triple.environment_name
    return ENVIRONMENT_ALIASES.get(name, name)


def normalized_module_triple(triple: Triple) -> Triple:
    """
    Normalize a triple for naming module files.

    Apple triples are rebuilt from normalized components; Android triples
    lose their API level; every other triple is returned as is.
    """
    if is_darwin(triple):
        environment = module_environment_name(triple)
        return Triple(
            module_arch_name(triple),
            module_vendor_name(triple),
            module_os_name(triple),
            environment or "",
        )

    # API availability is handled by the importer, not the module name.
    if triple.is_android:
        return Triple(
            triple.arch_name,
            triple.vendor,
            triple.os_name,
            EnvironmentType.ANDROID.value,
        )

    return triple


def unversioned_triple(triple: Triple) -> Triple:
    """Drop the version numbers from the OS and environment components."""
    os_name = _strip_version(triple.os_name)
    if triple.has_environment:
        return Triple(triple.arch_name, triple.vendor, os_name, _strip_version(triple.environment_name))
    return Triple(triple.arch_name, triple.vendor, os_name)
