"""Location of swiftup's home directory and the files inside it."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

HOME_ENV_VAR = "SWIFTUP_HOME_DIR"
CONFIG_FILE_NAME = "config.yaml"
ENV_SCRIPT_NAME = "env"


@dataclass(frozen=True)
class SwiftupHome:
    """swiftup's data directory.

    Layout::

        <root>/config.yaml
        <root>/env
        <root>/bin/
        <root>/toolchains/<version>/
    """

    root: Path

    @classmethod
    def resolve(
        cls,
        environ: Mapping[str, str] | None = None,
        user_home: Path | None = None,
    ) -> "SwiftupHome":
        """Resolve the home directory from the environment.

        Order: $SWIFTUP_HOME_DIR, $XDG_DATA_HOME/swiftup, ~/.local/share/swiftup.
        Relative paths are made absolute against the current directory.
        """
        env = os.environ if environ is None else environ
        if explicit := env.get(HOME_ENV_VAR):
            return cls(Path(explicit).expanduser().resolve())
        if xdg := env.get("XDG_DATA_HOME"):
            return cls((Path(xdg).expanduser() / "swiftup").resolve())
        base = user_home if user_home is not None else Path.home()
        return cls(base / ".local" / "share" / "swiftup")

    @property
    def config_file(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    @property
    def env_file(self) -> Path:
        return self.root / ENV_SCRIPT_NAME

    @property
    def bin_dir(self) -> Path:
        return self.root / "bin"

    @property
    def toolchains_dir(self) -> Path:
        return self.root / "toolchains"
