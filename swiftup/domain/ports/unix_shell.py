"""Unix shell port - what swiftup needs to know about a user's shell."""

from pathlib import Path
from typing import Protocol

from ..values import ShellKind, ShellScript


class UnixShell(Protocol):
    """Protocol for a shell whose startup files swiftup may edit."""

    kind: ShellKind

    def does_exist(self) -> bool:
        """Whether the shell is present.

        Users often have several shells, so any trace of the shell counts.
        """
        ...

    def rc_files(self) -> list[Path]:
        """All rc files of this shell that swiftup is concerned with."""
        ...

    def update_rcs(self) -> list[Path]:
        """rc files that should be written to."""
        ...

    def env_script(self) -> ShellScript:
        """The environment script sourced from the rc files."""
        ...

    def source_string(self) -> str:
        """Line that sources the environment script."""
        ...
