"""POSIX sh, bash and zsh implementations of the UnixShell port."""

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping
from pathlib import Path

from swiftup.domain import ShellKind, ShellScript
from swiftup.errors import ShellError, ZshSetupError
from swiftup.infrastructure.config.home import ENV_SCRIPT_NAME, SwiftupHome

logger = logging.getLogger(__name__)

ENV_TEMPLATE = Path(__file__).parent / "env.sh"
HOME_PLACEHOLDER = "@SWIFTUP_HOME_DIR@"
ZSH_FALLBACK_PATH = "/bin/zsh"
ZSH_QUERY_TIMEOUT = 5  # seconds


def find_command(name: str, environ: Mapping[str, str]) -> str | None:
    """Find an executable on the PATH of the given environment."""
    search_path = environ.get("PATH")
    if not search_path:
        return None
    return shutil.which(name, path=search_path)


def _unique(paths: list[Path]) -> list[Path]:
    seen: list[Path] = []
    for path in paths:
        if path not in seen:
            seen.append(path)
    return seen


class _ShellBase:
    """Shared state and the default env script behaviour."""

    kind: ShellKind

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        user_home: Path | None = None,
        swiftup_home: SwiftupHome | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._user_home = user_home if user_home is not None else Path.home()
        self._swiftup_home = swiftup_home or SwiftupHome.resolve(self._environ, self._user_home)

    def env_script(self) -> ShellScript:
        try:
            template = ENV_TEMPLATE.read_text(encoding="utf-8")
        except OSError as e:
            raise ShellError(f"Environment script template unavailable: {e}") from e
        content = template.replace(HOME_PLACEHOLDER, str(self._swiftup_home.root))
        return ShellScript(name=ENV_SCRIPT_NAME, content=content)

    def source_string(self) -> str:
        return f'. "{self._swiftup_home.env_file}"'

    def __repr__(self) -> str:
        return f"{type(self).__name__}(home={self._user_home})"


class Posix(_ShellBase):
    """POSIX sh - always present, configured through ~/.profile."""

    kind = ShellKind.POSIX

    def does_exist(self) -> bool:
        return True

    def rc_files(self) -> list[Path]:
        return [self._user_home / ".profile"]

    def update_rcs(self) -> list[Path]:
        # .profile is the only rc file POSIX defines, so write it even if missing
        return self.rc_files()


class Bash(_ShellBase):
    """GNU bash - present when any of its rc files exist."""

    kind = ShellKind.BASH

    RC_NAMES = (".bash_profile", ".bash_login", ".bashrc")

    def does_exist(self) -> bool:
        return bool(self.update_rcs())

    def rc_files(self) -> list[Path]:
        return [self._user_home / name for name in self.RC_NAMES]

    def update_rcs(self) -> list[Path]:
        return [path for path in self.rc_files() if path.is_file()]


class Zsh(_ShellBase):
    """zsh - present when it is the login shell or installed on PATH."""

    kind = ShellKind.ZSH

    def zdotdir(self) -> Path:
        """Resolve the directory zsh reads its startup files from.

        Uses $ZDOTDIR when set, otherwise asks zsh itself.

        Raises:
            ZshSetupError: If $ZDOTDIR is unset and zsh cannot report it.
        """
        if explicit := self._environ.get("ZDOTDIR"):
            return Path(explicit)

        zsh = find_command("zsh", self._environ) or ZSH_FALLBACK_PATH
        try:
            result = subprocess.run(
                [zsh, "-c", "echo $ZDOTDIR"],
                capture_output=True,
                text=True,
                timeout=ZSH_QUERY_TIMEOUT,
                check=True,
                env=dict(self._environ),
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("zsh ZDOTDIR query failed zsh=%s: %s", zsh, e)
            raise ZshSetupError() from e

        output = result.stdout.strip()
        if not output:
            raise ZshSetupError()
        return Path(output)

    def does_exist(self) -> bool:
        if "zsh" in self._environ.get("SHELL", ""):
            return True
        return find_command("zsh", self._environ) is not None

    def rc_files(self) -> list[Path]:
        dirs = []
        try:
            dirs.append(self.zdotdir())
        except ZshSetupError:
            logger.debug("ZDOTDIR unavailable, using home directory only")
        dirs.append(self._user_home)
        return _unique([d / ".zshenv" for d in dirs])

    def update_rcs(self) -> list[Path]:
        existing = [path for path in self.rc_files() if path.is_file()]
        return _unique([*existing, self._user_home / ".zshenv"])
