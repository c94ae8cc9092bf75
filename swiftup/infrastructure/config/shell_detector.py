"""Shell detection for available shells on the system."""

import os
from collections.abc import Mapping
from pathlib import Path

from swiftup.domain import UnixShell
from swiftup.infrastructure.shells.unix import Bash, Posix, Zsh

from .home import SwiftupHome


class ShellDetector:
    """Detect which supported shells the user has."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        user_home: Path | None = None,
        swiftup_home: SwiftupHome | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._user_home = user_home if user_home is not None else Path.home()
        self._swiftup_home = swiftup_home or SwiftupHome.resolve(self._environ, self._user_home)

    def all_shells(self) -> list[UnixShell]:
        """Every supported shell, present or not."""
        return [
            shell_type(self._environ, self._user_home, self._swiftup_home)
            for shell_type in (Posix, Bash, Zsh)
        ]

    def detect_shells(self) -> list[UnixShell]:
        """Shells considered present.

        Errs toward false positives: any trace of a shell counts.

        Returns:
            Present shells, always starting with POSIX sh.
        """
        return [shell for shell in self.all_shells() if shell.does_exist()]
