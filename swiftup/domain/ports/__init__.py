"""Domain ports - interfaces for infrastructure to implement."""

from .unix_shell import UnixShell
from .toolchain_source import ToolchainSource

__all__ = [
    "UnixShell",
    "ToolchainSource",
]
