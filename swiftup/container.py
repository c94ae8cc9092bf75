"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from swiftup.application.services import ToolchainService
from swiftup.config import Config
from swiftup.infrastructure.config import ShellDetector, SwiftupHome
from swiftup.infrastructure.shells import ShellProfileWriter


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired once per command invocation.
    """

    # Services
    toolchain_service: ToolchainService

    # Shell integration
    shell_detector: ShellDetector
    profile_writer: ShellProfileWriter

    # Configuration
    home: SwiftupHome
    config: Config
