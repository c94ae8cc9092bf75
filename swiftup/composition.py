"""Composition root - the ONLY place where dependencies are wired."""

import logging

from swiftup.application.services import ToolchainService
from swiftup.config import Config, load_config
from swiftup.container import Container
from swiftup.domain import ToolchainSource
from swiftup.infrastructure.config import ShellDetector, SwiftupHome
from swiftup.infrastructure.shells import ShellProfileWriter
from swiftup.infrastructure.toolchains import LocalMirrorSource, ToolchainStore

logger = logging.getLogger(__name__)


def create_source(config: Config) -> ToolchainSource | None:
    """Create the toolchain source, or None if no mirror is configured."""
    mirror = config.mirror_path()
    if mirror is None:
        return None
    return LocalMirrorSource(mirror)


def create_container(home: SwiftupHome | None = None, config: Config | None = None) -> Container:
    """Create the dependency container with all wired dependencies.

    Args:
        home: swiftup home directory. Resolved from the environment if omitted.
        config: Already-loaded configuration. Loaded from the home if omitted.

    Returns:
        Fully wired dependency container.

    Raises:
        ConfigError: If the configuration must be loaded and is invalid.
    """
    home = home or SwiftupHome.resolve()
    if config is None:
        config = load_config(home.config_file)
    logger.debug("Using swiftup home %s", home.root)

    service = ToolchainService(
        config=config,
        config_path=home.config_file,
        store=ToolchainStore(home),
        source=create_source(config),
    )

    return Container(
        toolchain_service=service,
        shell_detector=ShellDetector(swiftup_home=home),
        profile_writer=ShellProfileWriter(home),
        home=home,
        config=config,
    )
