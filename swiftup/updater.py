"""Self-update functionality for swiftup."""

import json
import logging
import shutil
import subprocess
import sys
import time
from pathlib import Path
from urllib.error import URLError
from urllib.request import Request, urlopen

from rich.console import Console
from rich.panel import Panel

from swiftup import __version__

logger = logging.getLogger(__name__)

PACKAGE_NAME = "swiftup"
PYPI_URL = f"https://pypi.org/pypi/{PACKAGE_NAME}/json"
CACHE_DIR = Path.home() / ".cache" / "swiftup"
CACHE_FILE = CACHE_DIR / "update_check.json"
CACHE_TTL = 86400  # 24 hours
UPGRADE_TIMEOUT = 120  # seconds


def parse_version(version: str) -> tuple[int, ...]:
    """Parse version string into comparable tuple.

    Handles PEP 440 versions like "0.1.0", "1.0.0a1", "2.0.0.post1".

    Args:
        version: Version string.

    Returns:
        Tuple of integers for comparison (ignores pre/post/dev).
    """
    version = version.lstrip("v")
    # Extract just the release numbers (before any pre/post/dev markers)
    base = version.split("a")[0].split("b")[0].split("rc")[0]
    base = base.split(".dev")[0].split(".post")[0].split("+")[0]
    parts = []
    for p in base.split("."):
        try:
            parts.append(int(p))
        except ValueError:
            break
    return tuple(parts) if parts else (0,)


def _is_newer(latest: str, current: str) -> bool:
    """Return True if latest is a higher release than current."""
    return parse_version(latest) > parse_version(current)


def get_latest_version() -> str | None:
    """Fetch the latest version from PyPI.

    Returns:
        Latest version string or None if fetch failed.
    """
    try:
        request = Request(PYPI_URL, headers={"User-Agent": f"{PACKAGE_NAME}/{__version__}"})
        with urlopen(request, timeout=5) as response:
            data = json.loads(response.read().decode())
            return data["info"]["version"]
    except (URLError, json.JSONDecodeError, KeyError, TimeoutError) as e:
        logger.debug("PyPI version lookup failed: %s", e)
        return None


def get_cached_version() -> str | None:
    """Get cached latest version if still valid."""
    if not CACHE_FILE.exists():
        return None
    try:
        data = json.loads(CACHE_FILE.read_text())
        if time.time() - data.get("timestamp", 0) < CACHE_TTL:
            return data.get("version")
    except (json.JSONDecodeError, OSError, AttributeError):
        logger.debug("Ignoring unreadable update cache %s", CACHE_FILE)
    return None


def cache_version(version: str) -> None:
    """Cache the latest version."""
    try:
        CACHE_DIR.mkdir(parents=True, exist_ok=True)
        CACHE_FILE.write_text(json.dumps({"version": version, "timestamp": time.time()}))
    except OSError as e:
        logger.debug("Could not write update cache: %s", e)


def check_for_updates(use_cache: bool = True) -> tuple[bool, str | None]:
    """Check if a newer version is available.

    Args:
        use_cache: Whether to use cached version check.

    Returns:
        Tuple of (update_available, latest_version).
    """
    if use_cache:
        latest = get_cached_version()
        if latest:
            return _is_newer(latest, __version__), latest

    latest = get_latest_version()
    if latest is None:
        return False, None

    cache_version(latest)
    return _is_newer(latest, __version__), latest


def _detect_install_method() -> str:
    """Detect how swiftup was installed.

    Returns:
        One of: 'uv', 'pipx', 'pip'
    """
    executable = sys.executable
    file_path = str(Path(__file__).resolve())

    uv_patterns = [
        "/.local/share/uv/tools/",
        "/uv/tools/",
        "\\uv\\tools\\",
        "/.cache/uv/",
    ]
    for pattern in uv_patterns:
        if pattern in executable or pattern in file_path:
            return "uv"

    pipx_patterns = [
        "/pipx/venvs/",
        "/.local/share/pipx/",
        "/.local/pipx/",
        "\\pipx\\venvs\\",
    ]
    for pattern in pipx_patterns:
        if pattern in executable or pattern in file_path:
            return "pipx"

    return "pip"


def get_upgrade_command() -> str:
    """Get the appropriate upgrade command for the installation method."""
    commands = {
        "uv": f"uv tool upgrade {PACKAGE_NAME}",
        "pipx": f"pipx upgrade {PACKAGE_NAME}",
        "pip": f"pip install --upgrade {PACKAGE_NAME}",
    }
    return commands.get(_detect_install_method(), commands["pip"])


def _build_upgrade_argv(method: str) -> list[str]:
    if method == "uv" and shutil.which("uv"):
        return ["uv", "tool", "upgrade", PACKAGE_NAME]
    if method == "pipx" and shutil.which("pipx"):
        return ["pipx", "upgrade", PACKAGE_NAME]
    if method != "pip":
        logger.warning("%s not found, falling back to pip", method)
    return [sys.executable, "-m", "pip", "install", "--upgrade", PACKAGE_NAME]


def update_package(console: Console) -> bool:
    """Update swiftup to the latest version.

    Returns:
        True if swiftup is up to date afterwards, False otherwise.
    """
    has_update, latest = check_for_updates(use_cache=False)
    if not has_update:
        if latest:
            console.print(f"Already at latest version ({__version__})")
        else:
            console.print("Could not check for updates (network error)")
        return latest is not None

    console.print(f"Updating {PACKAGE_NAME} {__version__} → {latest}")
    cmd = _build_upgrade_argv(_detect_install_method())

    try:
        result = subprocess.run(cmd, timeout=UPGRADE_TIMEOUT)
    except subprocess.TimeoutExpired:
        console.print("[red]Update timed out[/red]")
        console.print(f"Try manually: {get_upgrade_command()}")
        return False
    except FileNotFoundError as e:
        console.print(f"[red]Command not found:[/red] {e}")
        console.print(f"Try manually: {get_upgrade_command()}")
        return False

    if result.returncode != 0:
        console.print(f"[red]Update failed (exit code {result.returncode})[/red]")
        console.print(f"Try manually: {get_upgrade_command()}")
        return False

    console.print(f"[green]Successfully updated to {latest}[/green]")
    return True


def print_update_notice(console: Console, latest: str) -> None:
    """Print a styled update notice."""
    console.print(
        Panel(
            f"[yellow]Update available:[/yellow] {__version__} → [green]{latest}[/green]\n"
            f"[dim]Run:[/dim] [cyan]swiftup self-update[/cyan] "
            f"[dim]or[/dim] [cyan]{get_upgrade_command()}[/cyan]",
            title="[bold]swiftup[/bold]",
            border_style="yellow",
            padding=(0, 2),
        )
    )
