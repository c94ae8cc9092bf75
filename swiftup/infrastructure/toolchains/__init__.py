"""Toolchain storage and sources."""

from .mirror import LocalMirrorSource
from .store import ToolchainStore

__all__ = [
    "LocalMirrorSource",
    "ToolchainStore",
]
