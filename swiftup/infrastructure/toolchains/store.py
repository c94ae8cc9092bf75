"""On-disk store of installed toolchains and the bin/ link farm."""

import logging
import os
import shutil
from pathlib import Path

from swiftup.domain import ToolchainSource, ToolchainVersion
from swiftup.errors import ToolchainError
from swiftup.infrastructure.config.home import SwiftupHome

logger = logging.getLogger(__name__)

# Where executables live inside a toolchain, relative to its root
TOOLCHAIN_BIN = Path("usr") / "bin"


class ToolchainStore:
    """Manage ``<home>/toolchains`` and the symlinks in ``<home>/bin``."""

    def __init__(self, home: SwiftupHome) -> None:
        self._home = home

    def path_for(self, version: ToolchainVersion) -> Path:
        return self._home.toolchains_dir / version.name

    def contains(self, version: ToolchainVersion) -> bool:
        return self.path_for(version).is_dir()

    def add(self, version: ToolchainVersion, source: ToolchainSource) -> Path:
        """Fetch a toolchain into the store.

        The toolchain is fetched into a staging directory first so a failed
        copy never leaves a half-installed toolchain behind.
        """
        target = self.path_for(version)
        staging = target.with_name(f".{version.name}.partial")
        if staging.exists():
            shutil.rmtree(staging)
        self._home.toolchains_dir.mkdir(parents=True, exist_ok=True)

        try:
            source.fetch(version, staging)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        if target.exists():
            shutil.rmtree(target)
        staging.rename(target)
        return target

    def remove(self, version: ToolchainVersion) -> None:
        target = self.path_for(version)
        if not target.exists():
            logger.warning("Toolchain directory already missing: %s", target)
            return
        try:
            shutil.rmtree(target)
        except OSError as e:
            raise ToolchainError(f"Failed to remove toolchain {version}: {e}") from e

    def link(self, version: ToolchainVersion) -> list[Path]:
        """Point ``bin/`` at the given toolchain's executables.

        Returns:
            Links created.
        """
        toolchain_bin = self.path_for(version) / TOOLCHAIN_BIN
        if not toolchain_bin.is_dir():
            raise ToolchainError(f"Toolchain {version} has no {TOOLCHAIN_BIN} directory")

        self.unlink()
        bin_dir = self._home.bin_dir
        bin_dir.mkdir(parents=True, exist_ok=True)

        links = []
        for executable in sorted(toolchain_bin.iterdir()):
            if not executable.is_file() or not os.access(executable, os.X_OK):
                continue
            link = bin_dir / executable.name
            if link.exists() or link.is_symlink():
                logger.warning("Not overwriting existing file %s", link)
                continue
            link.symlink_to(executable)
            links.append(link)
        logger.debug("Linked %d executables for %s", len(links), version)
        return links

    def unlink(self) -> None:
        """Remove links in ``bin/`` that point into the toolchains directory."""
        bin_dir = self._home.bin_dir
        if not bin_dir.is_dir():
            return
        toolchains = str(self._home.toolchains_dir) + os.sep
        for entry in bin_dir.iterdir():
            if entry.is_symlink() and os.readlink(entry).startswith(toolchains):
                entry.unlink()
