# platkit Configuration Schema
# Pydantic models for YAML configuration and SDK settings validation

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from platkit.triple.model import Triple
from platkit.version.remap import MACOS_TO_CATALYST_KEY, SDKInfo, freeze_version_map
from platkit.version.versions import VersionTuple


class OutputConfig(BaseModel):
    """Output configuration."""

    verbose: bool = Field(default=False, description="Show every classification column")
    colored: bool = Field(default=True, description="Enable colored output")


class SdkConfig(BaseModel):
    """Where to find SDK version data."""

    settings_path: str | None = Field(
        default=None,
        description="Path to an SDKSettings.json (or YAML with the same keys)",
    )

    @field_validator("settings_path")
    @classmethod
    def expand_settings_path(cls, v: str | None) -> str | None:
        """Expand ~ in path."""
        if v is None:
            return None
        return str(Path(v).expanduser())


class PlatkitConfig(BaseModel):
    """Root configuration model for platkit."""

    targets: list[str] = Field(default_factory=list, description="Target triples shown by 'platkit report'")
    sdk: SdkConfig = Field(default_factory=SdkConfig, description="SDK settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")

    @field_validator("targets")
    @classmethod
    def check_targets(cls, v: list[str]) -> list[str]:
        """Every target must split into arch-vendor-os[-environment]."""
        for target in v:
            Triple.parse(target)
        return v

    def get_triples(self) -> list[Triple]:
        """Return the configured targets as triples."""
        return [Triple.parse(target) for target in self.targets]


class SdkSettingsFile(BaseModel):
    """The version fields of an SDKSettings.json file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: str = Field(alias="Version", description="SDK version, e.g. 10.15")
    version_map: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        alias="VersionMap",
        description="Named version maps, e.g. macOS_iOSMac",
    )

    @field_validator("version")
    @classmethod
    def check_version(cls, v: str) -> str:
        """Version must be dotted integers."""
        VersionTuple.parse(v)
        return v

    def to_sdk_info(self) -> SDKInfo:
        return SDKInfo(
            version=VersionTuple.parse(self.version),
            macos_to_catalyst=freeze_version_map(self.version_map.get(MACOS_TO_CATALYST_KEY, {})),
        )
