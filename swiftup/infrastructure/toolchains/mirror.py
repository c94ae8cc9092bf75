"""Local mirror of pre-extracted toolchains."""

import logging
import shutil
from pathlib import Path

from swiftup.domain import ToolchainVersion
from swiftup.errors import ToolchainError

logger = logging.getLogger(__name__)


class LocalMirrorSource:
    """Serve toolchains from a directory with one sub-directory per version.

    Sub-directories whose names are not valid toolchain versions are ignored.
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def available(self) -> list[ToolchainVersion]:
        if not self._root.is_dir():
            raise ToolchainError(f"Toolchain mirror not found: {self._root}")

        versions = []
        for entry in self._root.iterdir():
            if not entry.is_dir():
                continue
            try:
                versions.append(ToolchainVersion.parse(entry.name))
            except ValueError:
                logger.debug("Skipping non-toolchain mirror entry %s", entry)
        return sorted(versions)

    def fetch(self, version: ToolchainVersion, destination: Path) -> None:
        source = self._root / version.name
        if not source.is_dir():
            raise ToolchainError(f"Toolchain {version} is not available in {self._root}")
        logger.info("Copying toolchain %s from %s", version, source)
        try:
            shutil.copytree(source, destination, symlinks=True)
        except OSError as e:
            raise ToolchainError(f"Failed to copy toolchain {version}: {e}") from e
