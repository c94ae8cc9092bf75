"""Toolchain version value object."""

import datetime
import re
from dataclasses import dataclass
from functools import total_ordering

MAIN_BRANCH = "main"

_STABLE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?$")
_SNAPSHOT = re.compile(r"^(main|\d+\.\d+)-snapshot-(\d{4}-\d{2}-\d{2})$")


@total_ordering
@dataclass(frozen=True, slots=True)
class ToolchainVersion:
    """A stable release (5.9.1) or a snapshot (main-snapshot-2023-10-01).

    Stable releases set major/minor/patch. Snapshots set branch and date,
    where branch is either "main" or a release branch like "5.9".
    """

    major: int | None = None
    minor: int | None = None
    patch: int | None = None
    branch: str | None = None
    date: str | None = None

    def __post_init__(self) -> None:
        if self.date is None:
            if self.major is None or self.minor is None or self.patch is None:
                raise ValueError("Stable release requires major, minor and patch")
            if min(self.major, self.minor, self.patch) < 0:
                raise ValueError("Version components must be non-negative")
        elif self.branch is None:
            raise ValueError("Snapshot requires a branch")
        else:
            try:
                datetime.date.fromisoformat(self.date)
            except ValueError as e:
                raise ValueError(f"Invalid snapshot date: {self.date!r}") from e

    @classmethod
    def stable(cls, major: int, minor: int, patch: int = 0) -> "ToolchainVersion":
        return cls(major=major, minor=minor, patch=patch)

    @classmethod
    def snapshot(cls, branch: str, date: str) -> "ToolchainVersion":
        return cls(branch=branch, date=date)

    @classmethod
    def parse(cls, name: str) -> "ToolchainVersion":
        """Parse a canonical toolchain name.

        Raises:
            ValueError: If the name is not a stable release or snapshot.
        """
        text = name.strip()
        if match := _STABLE.match(text):
            major, minor, patch = match.groups()
            return cls.stable(int(major), int(minor), int(patch or 0))
        if match := _SNAPSHOT.match(text):
            branch, date = match.groups()
            return cls.snapshot(branch, date)
        raise ValueError(f"Invalid toolchain version: {name!r}")

    @property
    def is_snapshot(self) -> bool:
        return self.date is not None

    @property
    def name(self) -> str:
        """Canonical name, also used as the install directory name."""
        if self.is_snapshot:
            return f"{self.branch}-snapshot-{self.date}"
        return f"{self.major}.{self.minor}.{self.patch}"

    def _branch_key(self) -> tuple[int, int]:
        # main sorts after every release branch
        if self.branch == MAIN_BRANCH:
            return (10**9, 0)
        major, minor = (self.branch or "0.0").split(".")
        return (int(major), int(minor))

    def sort_key(self) -> tuple:
        if self.is_snapshot:
            return (1, *self._branch_key(), 0, self.date)
        return (0, self.major, self.minor, self.patch, "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ToolchainVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.name
