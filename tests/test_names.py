# platkit Platform Name Tests

import pytest

from platkit.classify.darwin import DarwinPlatformKind, classify_darwin_platform
from platkit.classify.names import (
    DARWIN_PLATFORM_NAMES,
    PLATFORMLESS_OS_TYPES,
    major_architecture_name,
    platform_name,
    platform_name_for_triple,
)
from platkit.errors import PreconditionError
from platkit.triple.model import OSType, Triple


class TestPlatformName:
    """Tests for platform_name()."""

    def test_names(self):
        assert platform_name(DarwinPlatformKind.MACOS) == "macosx"
        assert platform_name(DarwinPlatformKind.IPHONEOS) == "iphoneos"
        assert platform_name(DarwinPlatformKind.IPHONEOS_SIMULATOR) == "iphonesimulator"
        assert platform_name(DarwinPlatformKind.TVOS) == "appletvos"
        assert platform_name(DarwinPlatformKind.TVOS_SIMULATOR) == "appletvsimulator"
        assert platform_name(DarwinPlatformKind.WATCHOS) == "watchos"
        assert platform_name(DarwinPlatformKind.WATCHOS_SIMULATOR) == "watchsimulator"

    def test_total_and_injective(self):
        names = [platform_name(kind) for kind in DarwinPlatformKind]
        assert len(set(names)) == len(DarwinPlatformKind)
        assert set(DARWIN_PLATFORM_NAMES) == set(DarwinPlatformKind)


class TestPlatformNameForTriple:
    """Tests for platform_name_for_triple()."""

    def test_darwin(self):
        assert platform_name_for_triple(Triple.parse("x86_64-apple-macosx10.15")) == "macosx"
        assert platform_name_for_triple(Triple.parse("arm64-apple-ios14.0-simulator")) == "iphonesimulator"
        assert platform_name_for_triple(Triple.parse("x86_64-apple-ios13.1-macabi")) == "iphoneos"
        assert platform_name_for_triple(Triple.parse("arm64-apple-tvos14.0")) == "appletvos"
        assert platform_name_for_triple(Triple.parse("i386-apple-watchos6.0-simulator")) == "watchsimulator"

    def test_darwin_round_trip(self):
        for text in (
            "x86_64-apple-darwin19",
            "arm64-apple-macos11",
            "arm64-apple-ios",
            "x86_64-apple-ios13.0",
            "x86_64-apple-tvos14.0-simulator",
            "armv7k-apple-watchos6.0",
        ):
            t = Triple.parse(text)
            assert platform_name(classify_darwin_platform(t)) == platform_name_for_triple(t)

    def test_linux(self):
        assert platform_name_for_triple(Triple.parse("x86_64-unknown-linux-gnu")) == "linux"
        assert platform_name_for_triple(Triple.parse("aarch64-unknown-linux-android21")) == "android"

    def test_other_supported(self):
        assert platform_name_for_triple(Triple.parse("x86_64-unknown-freebsd12")) == "freebsd"
        assert platform_name_for_triple(Triple.parse("x86_64-unknown-openbsd6.8")) == "openbsd"
        assert platform_name_for_triple(Triple.parse("x86_64-unknown-haiku")) == "haiku"
        assert platform_name_for_triple(Triple.parse("wasm32-unknown-wasi")) == "wasi"
        assert platform_name_for_triple(Triple.parse("x86_64-scei-ps4")) == "ps4"

    def test_windows(self):
        assert platform_name_for_triple(Triple.parse("x86_64-pc-windows-msvc")) == "windows"
        assert platform_name_for_triple(Triple.parse("x86_64-pc-windows-itanium")) == "windows"
        assert platform_name_for_triple(Triple.parse("x86_64-pc-windows-gnu")) == "mingw"
        assert platform_name_for_triple(Triple.parse("x86_64-w64-mingw32")) == "mingw"
        assert platform_name_for_triple(Triple.parse("x86_64-pc-windows-cygnus")) == "cygwin"
        assert platform_name_for_triple(Triple.parse("x86_64-pc-cygwin")) == "cygwin"

    def test_windows_unsupported_environment(self):
        for text in ("x86_64-pc-windows", "x86_64-pc-windows-simulator", "x86_64-pc-windows-android"):
            with pytest.raises(PreconditionError, match="Unsupported Windows environment"):
                platform_name_for_triple(Triple.parse(text))

    def test_platformless_os_is_empty(self):
        for os_type in PLATFORMLESS_OS_TYPES:
            t = Triple("x86_64", "unknown", os_type.value)
            assert t.os is os_type
            assert platform_name_for_triple(t) == ""

    def test_unknown_os_raises(self):
        with pytest.raises(PreconditionError, match="Unsupported OS"):
            platform_name_for_triple(Triple.parse("x86_64-unknown-bogus"))

    def test_every_known_os_is_handled(self):
        """Every OS except UNKNOWN resolves without raising."""
        for os_type in OSType:
            if os_type is OSType.UNKNOWN:
                continue
            t = Triple("x86_64", "unknown", os_type.value, "msvc")
            assert isinstance(platform_name_for_triple(t), str)


class TestMajorArchitectureName:
    """Tests for major_architecture_name()."""

    def test_linux_arm(self):
        assert major_architecture_name(Triple.parse("armv7-unknown-linux-gnueabihf")) == "armv7"
        assert major_architecture_name(Triple.parse("armv7l-unknown-linux-gnueabihf")) == "armv7"
        assert major_architecture_name(Triple.parse("armv6-unknown-linux-gnueabihf")) == "armv6"

    def test_linux_arm_synonyms(self):
        assert major_architecture_name(Triple.parse("armv7hl-unknown-linux-gnueabihf")) == "armv7"
        assert major_architecture_name(Triple.parse("armv6j-unknown-linux-gnueabihf")) == "armv6"
        assert major_architecture_name(Triple("armv7-a", "unknown", "linux", "gnueabihf")) == "armv7"

    def test_linux_other(self):
        assert major_architecture_name(Triple.parse("x86_64-unknown-linux-gnu")) == "x86_64"
        assert major_architecture_name(Triple.parse("aarch64-unknown-linux-android21")) == "aarch64"

    def test_non_linux_keeps_arch_name(self):
        assert major_architecture_name(Triple.parse("armv7s-apple-ios10.0")) == "armv7s"
        assert major_architecture_name(Triple.parse("armv7l-unknown-freebsd12")) == "armv7l"
        assert major_architecture_name(Triple.parse("amd64-unknown-freebsd12")) == "amd64"
