"""Write the env script and hook it into shell rc files."""

import logging
from pathlib import Path

from swiftup.domain import UnixShell
from swiftup.errors import ShellError
from swiftup.infrastructure.config.home import SwiftupHome

logger = logging.getLogger(__name__)

PROFILE_MARKER = "# Added by swiftup"


class ShellProfileWriter:
    """Install the env script and source it from every detected shell."""

    def __init__(self, home: SwiftupHome) -> None:
        self._home = home

    def write_env_script(self, shell: UnixShell) -> Path:
        script = shell.env_script()
        target = self._home.root / script.name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(script.content, encoding="utf-8")
        return target

    def setup(self, shells: list[UnixShell]) -> list[Path]:
        """Write the env script and append the source line to rc files.

        Returns:
            rc files that were modified.
        """
        if not shells:
            return []

        self.write_env_script(shells[0])

        modified: list[Path] = []
        for shell in shells:
            line = shell.source_string()
            for rc in shell.update_rcs():
                if rc in modified:
                    continue
                if self._append_line(rc, line):
                    logger.info("Updated %s rc file %s", shell.kind.value, rc)
                    modified.append(rc)
        return modified

    def _append_line(self, rc: Path, line: str) -> bool:
        try:
            existing = rc.read_text(encoding="utf-8") if rc.exists() else ""
        except OSError as e:
            raise ShellError(f"Cannot read {rc}: {e}") from e
        if line in existing.splitlines():
            return False

        prefix = "" if not existing or existing.endswith("\n") else "\n"
        try:
            rc.parent.mkdir(parents=True, exist_ok=True)
            with open(rc, "a", encoding="utf-8") as f:
                f.write(f"{prefix}{PROFILE_MARKER}\n{line}\n")
        except OSError as e:
            raise ShellError(f"Cannot update {rc}: {e}") from e
        return True
