"""Toolchain selector value object."""

import datetime
import re
from dataclasses import dataclass
from enum import Enum

from .toolchain_version import ToolchainVersion

_STABLE = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?$")
_SNAPSHOT = re.compile(r"^(main|\d+\.\d+)-snapshot(?:-(\d{4}-\d{2}-\d{2}))?$")


class SelectorKind(str, Enum):
    """What family of toolchains a selector refers to."""

    LATEST = "latest"
    STABLE = "stable"
    SNAPSHOT = "snapshot"


@dataclass(frozen=True, slots=True)
class ToolchainSelector:
    """A partial toolchain description matched against concrete versions.

    Examples: ``latest``, ``5``, ``5.9``, ``5.9.1``, ``main-snapshot``,
    ``5.9-snapshot-2023-10-01``.
    """

    kind: SelectorKind
    major: int | None = None
    minor: int | None = None
    patch: int | None = None
    branch: str | None = None
    date: str | None = None

    @classmethod
    def parse(cls, text: str) -> "ToolchainSelector":
        """Parse a selector string.

        Raises:
            ValueError: If the text is not a recognised selector.
        """
        value = text.strip()
        if value == "latest":
            return cls(kind=SelectorKind.LATEST)
        if match := _STABLE.match(value):
            major, minor, patch = (int(g) if g is not None else None for g in match.groups())
            return cls(kind=SelectorKind.STABLE, major=major, minor=minor, patch=patch)
        if match := _SNAPSHOT.match(value):
            branch, date = match.groups()
            if date is not None:
                datetime.date.fromisoformat(date)
            return cls(kind=SelectorKind.SNAPSHOT, branch=branch, date=date)
        raise ValueError(f"Invalid toolchain selector: {text!r}")

    @property
    def is_major_only(self) -> bool:
        return self.kind is SelectorKind.STABLE and self.minor is None

    def matches(self, version: ToolchainVersion) -> bool:
        if self.kind is SelectorKind.LATEST:
            return not version.is_snapshot
        if self.kind is SelectorKind.SNAPSHOT:
            if not version.is_snapshot or version.branch != self.branch:
                return False
            return self.date is None or version.date == self.date

        if version.is_snapshot or version.major != self.major:
            return False
        if self.minor is not None and version.minor != self.minor:
            return False
        return self.patch is None or version.patch == self.patch

    def __str__(self) -> str:
        if self.kind is SelectorKind.LATEST:
            return "latest"
        if self.kind is SelectorKind.SNAPSHOT:
            suffix = f"-{self.date}" if self.date else ""
            return f"{self.branch}-snapshot{suffix}"
        parts = [p for p in (self.major, self.minor, self.patch) if p is not None]
        return ".".join(str(p) for p in parts)
