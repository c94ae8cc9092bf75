"""Shell integration - rc file discovery and environment setup."""

from .profile import ShellProfileWriter
from .unix import Bash, Posix, Zsh, find_command

__all__ = [
    "Posix",
    "Bash",
    "Zsh",
    "find_command",
    "ShellProfileWriter",
]
