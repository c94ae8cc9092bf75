"""Toolchain service - install, switch, update and remove toolchains."""

import logging
from dataclasses import dataclass
from pathlib import Path

from swiftup.config import MIRROR_ENV_VAR, Config, save_config
from swiftup.domain import (
    SelectorKind,
    ToolchainSelector,
    ToolchainSource,
    ToolchainVersion,
)
from swiftup.errors import ToolchainError
from swiftup.infrastructure.toolchains import ToolchainStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Outcome of an install request."""

    version: ToolchainVersion
    newly_installed: bool
    in_use: bool


@dataclass(frozen=True, slots=True)
class UpdateResult:
    """A toolchain replaced by a newer one."""

    old: ToolchainVersion
    new: ToolchainVersion


class ToolchainService:
    """Use cases over installed toolchains and the configured source.

    Every state change is persisted to the config file immediately.
    """

    def __init__(
        self,
        config: Config,
        config_path: Path,
        store: ToolchainStore,
        source: ToolchainSource | None = None,
    ) -> None:
        self._config = config
        self._config_path = config_path
        self._store = store
        self._source = source

    @property
    def config(self) -> Config:
        return self._config

    def _require_source(self) -> ToolchainSource:
        if self._source is None:
            raise ToolchainError(
                "No toolchain mirror configured. Set 'mirror' in "
                f"{self._config_path} or the {MIRROR_ENV_VAR} environment variable."
            )
        return self._source

    def _save(self) -> None:
        save_config(self._config, self._config_path)

    # ---------- Queries ----------

    def in_use(self) -> ToolchainVersion | None:
        return self._config.in_use_version()

    def list_installed(self, selector: ToolchainSelector | None = None) -> list[ToolchainVersion]:
        installed = self._config.installed()
        if selector is None:
            return installed
        return [v for v in installed if selector.matches(v)]

    def list_available(self, selector: ToolchainSelector | None = None) -> list[ToolchainVersion]:
        available = sorted(self._require_source().available())
        if selector is None:
            return available
        return [v for v in available if selector.matches(v)]

    def is_installed(self, version: ToolchainVersion) -> bool:
        return version.name in self._config.installed_toolchains

    # ---------- Commands ----------

    def install(self, selector: ToolchainSelector, use: bool = False) -> InstallResult:
        """Install the newest available toolchain matching the selector.

        Raises:
            ToolchainError: If no available toolchain matches.
        """
        candidates = self.list_available(selector)
        if not candidates:
            raise ToolchainError(f"No toolchain matching {selector} is available")
        version = candidates[-1]

        newly_installed = False
        if self.is_installed(version):
            logger.info("Toolchain %s is already installed", version)
        else:
            self._store.add(version, self._require_source())
            self._config.installed_toolchains.append(version.name)
            newly_installed = True
            logger.info("Installed toolchain %s", version)

        if use or self._config.in_use is None:
            self._activate(version)
        self._save()

        return InstallResult(
            version=version,
            newly_installed=newly_installed,
            in_use=self._config.in_use == version.name,
        )

    def use(self, selector: ToolchainSelector) -> tuple[ToolchainVersion | None, ToolchainVersion]:
        """Switch to the newest installed toolchain matching the selector.

        Returns:
            Tuple of (previously in use, now in use).

        Raises:
            ToolchainError: If no installed toolchain matches.
        """
        matches = self.list_installed(selector)
        if not matches:
            raise ToolchainError(f"No installed toolchain matches {selector}")

        previous = self.in_use()
        version = matches[-1]
        if previous != version:
            self._activate(version)
            self._save()
        return previous, version

    def uninstall(self, selector: ToolchainSelector | None) -> list[ToolchainVersion]:
        """Remove installed toolchains.

        Args:
            selector: Toolchains to remove, or None for all of them.

        Returns:
            Toolchains that were removed.
        """
        targets = self.list_installed(selector)
        if not targets:
            return []

        in_use = self.in_use()
        for version in targets:
            self._store.remove(version)
            self._config.installed_toolchains.remove(version.name)
            logger.info("Uninstalled toolchain %s", version)

        if in_use in targets:
            replacement = self._pick_replacement()
            if replacement is None:
                self._store.unlink()
                self._config.in_use = None
            else:
                self._activate(replacement)
        self._save()
        return targets

    def update(self, selector: ToolchainSelector | None = None) -> UpdateResult | None:
        """Replace an installed toolchain with the newest one in its family.

        With no selector, the toolchain in use is updated. A major-only
        selector allows minor upgrades, otherwise only patch upgrades are
        considered. Snapshots move to newer snapshots of the same branch.

        Returns:
            The replacement, or None if already up to date.
        """
        if selector is None:
            old = self.in_use()
            if old is None:
                raise ToolchainError("No toolchain is in use; specify which one to update")
        else:
            matches = self.list_installed(selector)
            if not matches:
                raise ToolchainError(f"No installed toolchain matches {selector}")
            old = matches[-1]

        family = self._update_family(old, selector)
        newer = [v for v in self.list_available(family) if v > old]
        if not newer:
            logger.info("Toolchain %s is up to date", old)
            return None

        new = newer[-1]
        was_in_use = self.in_use() == old
        if not self.is_installed(new):
            self._store.add(new, self._require_source())
            self._config.installed_toolchains.append(new.name)
        if was_in_use:
            self._activate(new)

        self._store.remove(old)
        self._config.installed_toolchains.remove(old.name)
        self._save()
        logger.info("Updated toolchain %s -> %s", old, new)
        return UpdateResult(old=old, new=new)

    # ---------- Helpers ----------

    def _activate(self, version: ToolchainVersion) -> None:
        self._store.link(version)
        self._config.in_use = version.name
        logger.info("Now using toolchain %s", version)

    def _pick_replacement(self) -> ToolchainVersion | None:
        remaining = self._config.installed()
        if not remaining:
            return None
        stable = [v for v in remaining if not v.is_snapshot]
        return (stable or remaining)[-1]

    @staticmethod
    def _update_family(
        version: ToolchainVersion, selector: ToolchainSelector | None
    ) -> ToolchainSelector:
        if version.is_snapshot:
            return ToolchainSelector(kind=SelectorKind.SNAPSHOT, branch=version.branch)
        if selector is not None and selector.kind is SelectorKind.LATEST:
            return selector
        if selector is not None and selector.is_major_only:
            return ToolchainSelector(kind=SelectorKind.STABLE, major=version.major)
        return ToolchainSelector(kind=SelectorKind.STABLE, major=version.major, minor=version.minor)
