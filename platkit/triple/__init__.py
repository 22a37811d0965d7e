# platkit Triple Module
# Target triple value and its tagged component views

from platkit.triple.model import (
    ArchType,
    EnvironmentType,
    OSType,
    SubArch,
    Triple,
)

__all__ = [
    "Triple",
    "ArchType",
    "SubArch",
    "OSType",
    "EnvironmentType",
]
