"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from swiftup import __version__
from swiftup.domain import ToolchainVersion
from swiftup.errors import ConfigError
from swiftup.infrastructure.config import YAMLConfigLoader

MIRROR_ENV_VAR = "SWIFTUP_MIRROR"


class Config(BaseModel):
    """Persisted swiftup state."""

    version: str = __version__
    in_use: str | None = None
    installed_toolchains: list[str] = Field(default_factory=list)
    mirror: str | None = None

    @field_validator("installed_toolchains")
    @classmethod
    def validate_toolchain_names(cls, v: list[str]) -> list[str]:
        """Every installed toolchain must be a valid, unique version name."""
        names = []
        for name in v:
            canonical = ToolchainVersion.parse(name).name
            if canonical not in names:
                names.append(canonical)
        return names

    @field_validator("in_use")
    @classmethod
    def validate_in_use(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return ToolchainVersion.parse(v).name

    @model_validator(mode="after")
    def validate_in_use_installed(self) -> "Config":
        """The toolchain in use must be one of the installed toolchains."""
        if self.in_use is not None and self.in_use not in self.installed_toolchains:
            raise ValueError(f"in_use toolchain {self.in_use} is not installed")
        return self

    def installed(self) -> list[ToolchainVersion]:
        """Installed toolchains, sorted oldest first."""
        return sorted(ToolchainVersion.parse(name) for name in self.installed_toolchains)

    def in_use_version(self) -> ToolchainVersion | None:
        return ToolchainVersion.parse(self.in_use) if self.in_use else None

    def mirror_path(self) -> Path | None:
        """Mirror directory, with $SWIFTUP_MIRROR taking precedence."""
        mirror = os.environ.get(MIRROR_ENV_VAR) or self.mirror
        return Path(mirror).expanduser() if mirror else None


def load_config(config_path: Path | str) -> Config:
    """Load configuration from YAML file.

    A missing file yields the default configuration.

    Raises:
        ConfigError: If the file cannot be parsed or fails validation.
    """
    data = YAMLConfigLoader(config_path).load()
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def save_config(config: Config, config_path: Path | str) -> None:
    """Persist configuration to YAML file."""
    YAMLConfigLoader(config_path).save(config.model_dump(mode="json"))
