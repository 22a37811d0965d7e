"""platkit - Target platform classification for compiler toolchains.

Maps target triples (arch-vendor-os[-environment]) to canonical platform
names, module-file triples and minimum runtime compatibility versions,
and remaps SDK versions for Mac Catalyst builds.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Triple",
    "VersionTuple",
    "SDKInfo",
    "DarwinPlatformKind",
    "PreconditionError",
    "classify_darwin_platform",
    "platform_name_for_triple",
    "major_architecture_name",
    "normalized_module_triple",
    "is_zipper_compatible",
    "requires_runtime_rpath",
    "runtime_compatibility_version",
    "remap_version",
    "target_sdk_version",
]


def __getattr__(name: str):
    """Lazy import so 'import platkit' stays cheap."""
    if name == "Triple":
        from platkit.triple.model import Triple

        return Triple
    if name == "PreconditionError":
        from platkit.errors import PreconditionError

        return PreconditionError
    if name in ("VersionTuple", "SDKInfo", "remap_version", "target_sdk_version"):
        from platkit import version

        return getattr(version, name)
    if name in (
        "DarwinPlatformKind",
        "classify_darwin_platform",
        "platform_name_for_triple",
        "major_architecture_name",
        "normalized_module_triple",
        "is_zipper_compatible",
        "requires_runtime_rpath",
        "runtime_compatibility_version",
    ):
        from platkit import classify

        return getattr(classify, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
