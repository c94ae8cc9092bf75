"""Domain value objects - immutable data structures."""

from .shell_script import ShellKind, ShellScript
from .toolchain_selector import SelectorKind, ToolchainSelector
from .toolchain_version import MAIN_BRANCH, ToolchainVersion

__all__ = [
    "ToolchainVersion",
    "MAIN_BRANCH",
    "ToolchainSelector",
    "SelectorKind",
    "ShellKind",
    "ShellScript",
]
