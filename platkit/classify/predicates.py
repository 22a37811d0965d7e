# platkit Environment Predicates
# Boolean tests on a triple's OS and environment

from platkit.triple.model import ArchType, EnvironmentType, OSType, Triple

DARWIN_OS_TYPES = frozenset({OSType.DARWIN, OSType.MACOS, OSType.IOS, OSType.TVOS, OSType.WATCHOS})

# OS families whose x86 triples historically meant "simulator".
_SIMULATOR_INFERRING_OS_TYPES = frozenset({OSType.IOS, OSType.TVOS, OSType.WATCHOS})


def is_darwin(triple: Triple) -> bool:
    """Check if the triple targets any Apple OS."""
    return triple.os in DARWIN_OS_TYPES


def is_macos(triple: Triple) -> bool:
    """Check if the triple targets macOS (spelled macos, macosx or darwin)."""
    return triple.os in (OSType.MACOS, OSType.DARWIN)


def is_simulator_suffixed(triple: Triple) -> bool:
    return triple.environment is EnvironmentType.SIMULATOR


def is_mac_catalyst(triple: Triple) -> bool:
    """Check if the triple is an iOS triple built for the Mac (ios-macabi)."""
    return triple.os is OSType.IOS and triple.environment is EnvironmentType.MACABI


def is_ios_simulator(triple: Triple) -> bool:
    return triple.os is OSType.IOS and not is_mac_catalyst(triple) and is_simulator_suffixed(triple)


def is_tvos_simulator(triple: Triple) -> bool:
    return triple.os is OSType.TVOS and is_simulator_suffixed(triple)


def is_watchos_simulator(triple: Triple) -> bool:
    return triple.os is OSType.WATCHOS and is_simulator_suffixed(triple)


def infers_simulator_environment(triple: Triple) -> bool:
    """
    Check if the triple means a simulator without saying so.

    Older iOS, tvOS and watchOS triples for x86 hosts left out the
    "simulator" environment.
    """
    if triple.os not in _SIMULATOR_INFERRING_OS_TYPES:
        return False
    return (
        not triple.has_environment
        and triple.arch in (ArchType.X86, ArchType.X86_64)
        and not is_mac_catalyst(triple)
    )


def is_zipper_compatible(target: Triple, target_variant: Triple) -> bool:
    """
    Check if two triples can be zippered into one binary.

    The architecture and vendor must match, and one side must be macOS
    while the other is Mac Catalyst, in either order.
    """
    if (
        target.arch_name != target_variant.arch_name
        or target.arch is not target_variant.arch
        or target.sub_arch is not target_variant.sub_arch
        or target.vendor != target_variant.vendor
    ):
        return False

    # A library that started out on macOS
    if is_macos(target) and is_mac_catalyst(target_variant):
        return True

    # A library that started out on iOS
    if is_macos(target_variant) and is_mac_catalyst(target):
        return True

    return False


triples_valid_for_zippering = is_zipper_compatible
