"""Command line argument parsing."""

import argparse

from swiftup import __version__
from swiftup.domain import ToolchainSelector

SUBCOMMANDS = (
    "install",
    "use",
    "uninstall",
    "update",
    "list",
    "list-available",
    "self-update",
)


def toolchain_selector(value: str) -> ToolchainSelector:
    """argparse type for toolchain selectors."""
    try:
        return ToolchainSelector.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def uninstall_target(value: str) -> ToolchainSelector | None:
    """argparse type accepting a selector or "all" (returned as None)."""
    if value == "all":
        return None
    return toolchain_selector(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swiftup",
        description="swiftup - install and manage Swift toolchains",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Toolchain selectors: latest, 5, 5.9, 5.9.1, main-snapshot,\n"
            "5.9-snapshot, main-snapshot-2023-10-01"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed logs",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    install = subparsers.add_parser("install", help="Install a toolchain")
    install.add_argument(
        "selector",
        type=toolchain_selector,
        help="Toolchain to install; the newest match is chosen",
    )
    install.add_argument(
        "--use",
        action="store_true",
        help="Use the toolchain after installing it",
    )
    install.add_argument(
        "--no-modify-profile",
        action="store_true",
        help="Do not add swiftup's environment script to shell rc files",
    )

    use = subparsers.add_parser("use", help="Set the active toolchain")
    use.add_argument(
        "selector",
        nargs="?",
        type=toolchain_selector,
        default=None,
        help="Installed toolchain to use (default: show the active one)",
    )

    uninstall = subparsers.add_parser("uninstall", help="Remove installed toolchains")
    uninstall.add_argument(
        "selector",
        type=uninstall_target,
        help='Toolchains to remove, or "all"',
    )
    uninstall.add_argument(
        "-y",
        "--assume-yes",
        action="store_true",
        help="Do not ask for confirmation",
    )

    update = subparsers.add_parser("update", help="Update an installed toolchain")
    update.add_argument(
        "selector",
        nargs="?",
        type=toolchain_selector,
        default=None,
        help="Installed toolchain to update (default: the active one)",
    )

    list_cmd = subparsers.add_parser("list", help="List installed toolchains")
    list_cmd.add_argument(
        "selector",
        nargs="?",
        type=toolchain_selector,
        default=None,
        help="Only show toolchains matching this selector",
    )

    list_available = subparsers.add_parser(
        "list-available", help="List toolchains available to install"
    )
    list_available.add_argument(
        "selector",
        nargs="?",
        type=toolchain_selector,
        default=None,
        help="Only show toolchains matching this selector",
    )

    self_update = subparsers.add_parser("self-update", help="Update swiftup itself")
    self_update.add_argument(
        "--check",
        action="store_true",
        help="Only check whether a newer version is available",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - command: One of SUBCOMMANDS
        - selector: ToolchainSelector (or None where optional)
        - verbose: Whether to show detailed logs
    """
    return build_parser().parse_args(argv)
