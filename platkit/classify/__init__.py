# platkit Classification Module
# Platform kinds, names, module triples and runtime versions for a triple

from platkit.classify.darwin import DarwinPlatformKind, classify_darwin_platform
from platkit.classify.module_triple import (
    ARCH_ALIASES,
    ENVIRONMENT_ALIASES,
    OS_ALIASES,
    normalized_module_triple,
    unversioned_triple,
)
from platkit.classify.names import (
    PLATFORMLESS_OS_TYPES,
    major_architecture_name,
    platform_name,
    platform_name_for_triple,
)
from platkit.classify.predicates import (
    infers_simulator_environment,
    is_darwin,
    is_ios_simulator,
    is_mac_catalyst,
    is_macos,
    is_simulator_suffixed,
    is_tvos_simulator,
    is_watchos_simulator,
    is_zipper_compatible,
    triples_valid_for_zippering,
)
from platkit.classify.runtime import requires_runtime_rpath, runtime_compatibility_version

__all__ = [
    # Predicates
    "is_darwin",
    "is_macos",
    "is_simulator_suffixed",
    "is_mac_catalyst",
    "is_ios_simulator",
    "is_tvos_simulator",
    "is_watchos_simulator",
    "infers_simulator_environment",
    "is_zipper_compatible",
    "triples_valid_for_zippering",
    # Darwin
    "DarwinPlatformKind",
    "classify_darwin_platform",
    # Names
    "PLATFORMLESS_OS_TYPES",
    "platform_name",
    "platform_name_for_triple",
    "major_architecture_name",
    # Module triples
    "ARCH_ALIASES",
    "OS_ALIASES",
    "ENVIRONMENT_ALIASES",
    "normalized_module_triple",
    "unversioned_triple",
    # Runtime
    "runtime_compatibility_version",
    "requires_runtime_rpath",
]
