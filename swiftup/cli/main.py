"""Command line entry point."""

import logging

from rich.console import Console
from rich.markup import escape

from swiftup.composition import create_container
from swiftup.config import Config, load_config
from swiftup.errors import ConfigError, SwiftupError
from swiftup.infrastructure.config import SwiftupHome
from swiftup.logging_setup import setup_logging

from .args import parse_args
from .commands import COMMANDS

logger = logging.getLogger(__name__)


def load_configuration(home: SwiftupHome) -> Config:
    """Load the configuration before any subcommand runs.

    Raises:
        SwiftupError: With instructions for the user if loading fails.
    """
    try:
        return load_config(home.config_file)
    except ConfigError as e:
        raise SwiftupError(
            f'Could not load swiftup\'s configuration file due to error: "{e.message}".\n'
            "To use swiftup, modify the configuration file to fix the issue "
            "or perform a clean installation."
        ) from e


def main(argv: list[str] | None = None) -> int:
    """Run swiftup and return the exit code."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    console = Console()
    error_console = Console(stderr=True, soft_wrap=True)

    try:
        home = SwiftupHome.resolve()
        config = load_configuration(home)
        container = create_container(home=home, config=config)
        return COMMANDS[args.command](args, container, console)
    except SwiftupError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        error_console.print(f"[bold red]error:[/bold red] {escape(e.message)}")
        return 1
    except KeyboardInterrupt:
        error_console.print("Interrupted")
        return 130
