"""Pure domain layer - no infrastructure dependencies."""

# Ports
from .ports import (
    ToolchainSource,
    UnixShell,
)

# Value Objects
from .values import (
    MAIN_BRANCH,
    SelectorKind,
    ShellKind,
    ShellScript,
    ToolchainSelector,
    ToolchainVersion,
)

__all__ = [
    # Values
    "ToolchainVersion",
    "MAIN_BRANCH",
    "ToolchainSelector",
    "SelectorKind",
    "ShellKind",
    "ShellScript",
    # Ports
    "UnixShell",
    "ToolchainSource",
]
