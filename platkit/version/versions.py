# platkit Version Numbers
# major[.minor[.subminor[.build]]] with absent fields kept distinct from zero

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class VersionTuple:
    """
    A dotted version number of up to four components.

    Absent components are ``None`` and are not equal to ``0``:
    ``VersionTuple(10, 15)`` and ``VersionTuple(10, 15, 0)`` are different
    values, which matters when remapping SDK versions. Ordering treats
    absent components as zero.
    """

    major: int
    minor: Optional[int] = None
    subminor: Optional[int] = None
    build: Optional[int] = None

    def __post_init__(self) -> None:
        parts = (self.major, self.minor, self.subminor, self.build)
        seen_absent = False
        for part in parts:
            if part is None:
                seen_absent = True
                continue
            if seen_absent:
                raise ValueError(f"Version component set after an absent one: {parts}")
            if part < 0:
                raise ValueError(f"Version components must be non-negative: {parts}")

    @classmethod
    def parse(cls, text: str) -> "VersionTuple":
        """
        Parse a dotted version string such as ``"10.15.4"``.

        Raises:
            ValueError: If the string is not 1-4 dot-separated non-negative integers.
        """
        pieces = text.strip().split(".")
        if not 1 <= len(pieces) <= 4 or not all(p.isdigit() for p in pieces):
            raise ValueError(f"Invalid version string: {text!r}")
        return cls(*(int(p) for p in pieces))

    def as_tuple(self) -> tuple[int, ...]:
        """Return only the defined components."""
        return tuple(p for p in (self.major, self.minor, self.subminor, self.build) if p is not None)

    def as_string(self) -> str:
        return ".".join(str(p) for p in self.as_tuple())

    def without_build(self) -> "VersionTuple":
        return VersionTuple(self.major, self.minor, self.subminor)

    def _key(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor or 0, self.subminor or 0, self.build or 0)

    def __lt__(self, other: "VersionTuple") -> bool:
        if not isinstance(other, VersionTuple):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: "VersionTuple") -> bool:
        if not isinstance(other, VersionTuple):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: "VersionTuple") -> bool:
        if not isinstance(other, VersionTuple):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: "VersionTuple") -> bool:
        if not isinstance(other, VersionTuple):
            return NotImplemented
        return self._key() >= other._key()

    def __str__(self) -> str:
        return self.as_string()
