"""Error hierarchy for user-facing failures."""


class SwiftupError(Exception):
    """Base error. The message is shown to the user as-is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(SwiftupError):
    """The configuration file could not be read or validated."""


class ShellError(SwiftupError):
    """Shell integration could not be set up."""


class ZshSetupError(ShellError):
    """The zsh dotfile directory could not be determined."""

    def __init__(self, message: str = "Could not determine the zsh dotfile directory") -> None:
        super().__init__(message)


class ToolchainError(SwiftupError):
    """A toolchain operation failed."""
