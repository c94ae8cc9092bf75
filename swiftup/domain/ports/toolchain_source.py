"""Toolchain source port - where installable toolchains come from."""

from pathlib import Path
from typing import Protocol

from ..values import ToolchainVersion


class ToolchainSource(Protocol):
    """Protocol for a provider of installable toolchains."""

    def available(self) -> list[ToolchainVersion]:
        """List every toolchain this source can provide."""
        ...

    def fetch(self, version: ToolchainVersion, destination: Path) -> None:
        """Materialize a toolchain into the given (non-existent) directory."""
        ...
