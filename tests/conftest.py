"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

from swiftup.application.services import ToolchainService
from swiftup.config import Config
from swiftup.domain import ToolchainSelector, ToolchainVersion
from swiftup.infrastructure.config import SwiftupHome
from swiftup.infrastructure.toolchains import LocalMirrorSource, ToolchainStore

MIRROR_TOOLCHAINS = [
    "5.8.1",
    "5.9.0",
    "5.9.1",
    "5.9.2",
    "5.10.0",
    "6.0.0",
    "main-snapshot-2023-10-01",
    "main-snapshot-2023-11-15",
    "5.10-snapshot-2023-10-01",
]


def make_toolchain(root: Path, name: str, executables: tuple[str, ...] = ("swift", "swiftc")) -> Path:
    """Create a fake extracted toolchain directory."""
    bin_dir = root / name / "usr" / "bin"
    bin_dir.mkdir(parents=True)
    for exe in executables:
        path = bin_dir / exe
        path.write_text(f"#!/bin/sh\necho {name}\n")
        path.chmod(0o755)
    return root / name


# ============= Environment Fixtures =============


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the developer's swiftup settings out of tests."""
    for var in ("SWIFTUP_HOME_DIR", "SWIFTUP_MIRROR", "SWIFTUP_LOG_LEVEL", "ZDOTDIR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def user_home(tmp_path):
    """Empty user home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def swiftup_home(tmp_path):
    """swiftup home directory (not yet created on disk)."""
    return SwiftupHome(tmp_path / "swiftup")


@pytest.fixture
def bin_path(tmp_path):
    """Directory usable as PATH, empty by default."""
    path = tmp_path / "path-bin"
    path.mkdir()
    return path


@pytest.fixture
def add_executable():
    """Create an executable file in a directory."""

    def create(directory: Path, name: str) -> Path:
        path = directory / name
        path.write_text("#!/bin/sh\n")
        path.chmod(0o755)
        return path

    return create


# ============= Toolchain Fixtures =============

@pytest.fixture
def toolchain_builder():
    """Build fake toolchains: toolchain_builder(root, name, executables=...)."""
    return make_toolchain



@pytest.fixture
def mirror_dir(tmp_path):
    """Mirror populated with MIRROR_TOOLCHAINS."""
    root = tmp_path / "mirror"
    root.mkdir()
    for name in MIRROR_TOOLCHAINS:
        make_toolchain(root, name)
    return root


@pytest.fixture
def mirror(mirror_dir):
    return LocalMirrorSource(mirror_dir)


@pytest.fixture
def store(swiftup_home):
    return ToolchainStore(swiftup_home)


@pytest.fixture
def config(mirror_dir):
    return Config(mirror=str(mirror_dir))


@pytest.fixture
def service(config, swiftup_home, store, mirror):
    return ToolchainService(
        config=config,
        config_path=swiftup_home.config_file,
        store=store,
        source=mirror,
    )


@pytest.fixture
def version():
    """Parse helper."""
    return ToolchainVersion.parse


@pytest.fixture
def selector():
    """Parse helper."""
    return ToolchainSelector.parse
