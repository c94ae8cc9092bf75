"""YAML configuration loader."""

import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from swiftup.errors import ConfigError


class YAMLConfigLoader:
    """Load and save configuration data as YAML."""

    def __init__(self, config_path: Path | str) -> None:
        self._config_path = Path(config_path)

    def load(self) -> dict[str, Any]:
        """Load raw configuration data from YAML.

        Returns:
            Configuration dictionary, empty dict if file not found.

        Raises:
            ConfigError: If the file is unreadable, not valid YAML, or not a mapping.
        """
        if not self._config_path.exists():
            return {}

        try:
            with open(self._config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{self._config_path} is not valid YAML: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {self._config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self._config_path} must contain a mapping at the top level")
        return data

    def save(self, data: dict[str, Any]) -> None:
        """Write configuration data, replacing the file atomically."""
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=".config-", suffix=".yaml", dir=self._config_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, sort_keys=False)
            os.replace(tmp_name, self._config_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @property
    def path(self) -> Path:
        """Get configuration file path."""
        return self._config_path
