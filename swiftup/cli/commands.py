"""Subcommand handlers.

Each handler takes the parsed arguments, the wired container and a console,
and returns the process exit code.
"""

import argparse
import logging
from collections.abc import Callable

from rich.console import Console
from rich.prompt import Confirm

from swiftup import __version__
from swiftup.container import Container
from swiftup.updater import check_for_updates, print_update_notice, update_package

from .display import toolchain_table

logger = logging.getLogger(__name__)

Handler = Callable[[argparse.Namespace, Container, Console], int]


def run_install(args: argparse.Namespace, container: Container, console: Console) -> int:
    first_run = not container.home.env_file.exists()
    result = container.toolchain_service.install(args.selector, use=args.use)

    if result.newly_installed:
        console.print(f"Installed toolchain [bold]{result.version}[/bold]")
    else:
        console.print(f"Toolchain [bold]{result.version}[/bold] is already installed")
    if result.in_use:
        console.print(f"Now using [bold]{result.version}[/bold]")

    if first_run and not args.no_modify_profile:
        shells = container.shell_detector.detect_shells()
        modified = container.profile_writer.setup(shells)
        for rc in modified:
            console.print(f"Updated [cyan]{rc}[/cyan]")
        if modified:
            console.print(
                "Restart your shell, or run the following to use the toolchain now:\n"
                f"  [cyan]{shells[0].source_string()}[/cyan]"
            )
    return 0


def run_use(args: argparse.Namespace, container: Container, console: Console) -> int:
    service = container.toolchain_service
    if args.selector is None:
        current = service.in_use()
        if current is None:
            console.print("No toolchain is in use")
        else:
            console.print(f"{current} (in use)")
        return 0

    previous, current = service.use(args.selector)
    if previous == current:
        console.print(f"Toolchain [bold]{current}[/bold] is already in use")
    elif previous is None:
        console.print(f"Now using [bold]{current}[/bold]")
    else:
        console.print(f"Switched from {previous} to [bold]{current}[/bold]")
    return 0


def run_uninstall(args: argparse.Namespace, container: Container, console: Console) -> int:
    service = container.toolchain_service
    targets = service.list_installed(args.selector)
    if not targets:
        console.print("No installed toolchains match")
        return 0

    console.print("The following toolchains will be uninstalled:")
    for version in targets:
        console.print(f"  {version}")
    if not args.assume_yes and not Confirm.ask("Proceed?", console=console, default=False):
        console.print("Aborted")
        return 1

    removed = service.uninstall(args.selector)
    console.print(f"Uninstalled {len(removed)} toolchain(s)")
    current = service.in_use()
    if current is not None:
        console.print(f"Now using [bold]{current}[/bold]")
    return 0


def run_update(args: argparse.Namespace, container: Container, console: Console) -> int:
    result = container.toolchain_service.update(args.selector)
    if result is None:
        console.print("Already up to date")
    else:
        console.print(f"Updated [bold]{result.old}[/bold] → [bold green]{result.new}[/bold green]")
    return 0


def run_list(args: argparse.Namespace, container: Container, console: Console) -> int:
    service = container.toolchain_service
    versions = service.list_installed(args.selector)
    if not versions:
        console.print("No toolchains installed")
        return 0
    console.print(toolchain_table(versions, in_use=service.in_use(), title="Installed toolchains"))
    return 0


def run_list_available(args: argparse.Namespace, container: Container, console: Console) -> int:
    service = container.toolchain_service
    versions = service.list_available(args.selector)
    if not versions:
        console.print("No matching toolchains available")
        return 0
    console.print(
        toolchain_table(
            versions,
            in_use=service.in_use(),
            installed=set(service.list_installed()),
            title="Available toolchains",
        )
    )
    return 0


def run_self_update(args: argparse.Namespace, container: Container, console: Console) -> int:
    if args.check:
        has_update, latest = check_for_updates(use_cache=False)
        if has_update and latest:
            print_update_notice(console, latest)
        elif latest:
            console.print(f"Already at latest version ({__version__})")
        else:
            console.print("Could not check for updates (network error)")
            return 1
        return 0
    return 0 if update_package(console) else 1


COMMANDS: dict[str, Handler] = {
    "install": run_install,
    "use": run_use,
    "uninstall": run_uninstall,
    "update": run_update,
    "list": run_list,
    "list-available": run_list_available,
    "self-update": run_self_update,
}
