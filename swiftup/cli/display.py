"""Rendering helpers for command output."""

from rich.table import Table

from swiftup.domain import ToolchainVersion


def toolchain_table(
    versions: list[ToolchainVersion],
    in_use: ToolchainVersion | None = None,
    installed: set[ToolchainVersion] | None = None,
    title: str | None = None,
) -> Table:
    """Build a table of toolchains, stable releases before snapshots.

    Args:
        versions: Toolchains to show.
        in_use: Toolchain to mark as active.
        installed: If given, adds an "Installed" column.
        title: Optional table title.
    """
    table = Table(title=title, box=None, pad_edge=False)
    table.add_column("", width=1)
    table.add_column("Toolchain", style="bold")
    table.add_column("Kind", style="dim")
    if installed is not None:
        table.add_column("Installed")

    for version in sorted(versions):
        marker = "[green]*[/green]" if version == in_use else ""
        kind = "snapshot" if version.is_snapshot else "stable"
        row = [marker, version.name, kind]
        if installed is not None:
            row.append("[green]yes[/green]" if version in installed else "")
        table.add_row(*row)
    return table
