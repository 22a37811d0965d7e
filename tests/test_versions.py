# platkit Version Tuple Tests

import pytest

from platkit.version.versions import VersionTuple


class TestParse:
    """Tests for VersionTuple.parse()."""

    def test_full_version(self):
        assert VersionTuple.parse("10.15.4") == VersionTuple(10, 15, 4)

    def test_major_only(self):
        v = VersionTuple.parse("11")
        assert v.major == 11
        assert v.minor is None
        assert v.subminor is None

    def test_with_build(self):
        assert VersionTuple.parse("13.1.0.7").build == 7

    def test_invalid_strings(self):
        for text in ("", "a.b", "1..2", "1.2.3.4.5", "-1", "10.15-beta"):
            with pytest.raises(ValueError):
                VersionTuple.parse(text)


class TestInvariants:
    """Tests for construction rules."""

    def test_gap_rejected(self):
        with pytest.raises(ValueError):
            VersionTuple(1, None, 3)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            VersionTuple(10, -1)

    def test_absent_is_not_zero(self):
        assert VersionTuple(10, 15) != VersionTuple(10, 15, 0)
        assert VersionTuple(5) != VersionTuple(5, 0)


class TestOrdering:
    """Tests for comparison operators."""

    def test_lexicographic(self):
        assert VersionTuple(10, 14) < VersionTuple(10, 15)
        assert VersionTuple(10, 15) < VersionTuple(10, 15, 1)
        assert VersionTuple(11) > VersionTuple(10, 99, 99)

    def test_absent_orders_as_zero(self):
        assert VersionTuple(10, 15) <= VersionTuple(10, 15, 0)
        assert VersionTuple(10, 15) >= VersionTuple(10, 15, 0)
        assert not VersionTuple(10, 15) < VersionTuple(10, 15, 0)

    def test_sorting(self):
        versions = [VersionTuple(13, 4), VersionTuple(5), VersionTuple(13, 1, 2)]
        assert sorted(versions) == [VersionTuple(5), VersionTuple(13, 1, 2), VersionTuple(13, 4)]


class TestRendering:
    """Tests for string and tuple views."""

    def test_as_string(self):
        assert VersionTuple(10, 15).as_string() == "10.15"
        assert str(VersionTuple(5, 3)) == "5.3"
        assert str(VersionTuple(0, 0, 0)) == "0.0.0"

    def test_as_tuple(self):
        assert VersionTuple(13, 1).as_tuple() == (13, 1)

    def test_without_build(self):
        assert VersionTuple(10, 15, 0, 12).without_build() == VersionTuple(10, 15, 0)
        assert VersionTuple(10).without_build() == VersionTuple(10)
