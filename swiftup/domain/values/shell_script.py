"""Shell script and shell kind value objects."""

from dataclasses import dataclass
from enum import Enum


class ShellKind(str, Enum):
    """Supported Unix shells."""

    POSIX = "posix"
    BASH = "bash"
    ZSH = "zsh"


@dataclass(frozen=True, slots=True)
class ShellScript:
    """A named script to be written to disk and sourced by shells."""

    name: str
    content: str

    def __post_init__(self) -> None:
        if not self.name or "/" in self.name:
            raise ValueError(f"Invalid script name: {self.name!r}")
