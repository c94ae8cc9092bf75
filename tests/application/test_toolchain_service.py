"""Tests for ToolchainService."""

import pytest

from swiftup.application.services import ToolchainService
from swiftup.config import Config, load_config
from swiftup.domain import ToolchainSelector, ToolchainVersion
from swiftup.errors import ToolchainError

sel = ToolchainSelector.parse
ver = ToolchainVersion.parse


def names(versions):
    return [v.name for v in versions]


class TestInstall:
    """Tests for installing toolchains."""

    def test_installs_newest_match(self, service, store):
        result = service.install(sel("5.9"))

        assert result.version == ver("5.9.2")
        assert result.newly_installed is True
        assert store.contains(ver("5.9.2"))

    def test_latest(self, service):
        assert service.install(sel("latest")).version == ver("6.0.0")

    def test_first_install_is_used(self, service, swiftup_home):
        result = service.install(sel("5.9.1"))

        assert result.in_use is True
        assert service.in_use() == ver("5.9.1")
        assert (swiftup_home.bin_dir / "swift").is_symlink()

    def test_second_install_not_used_by_default(self, service):
        service.install(sel("5.9.1"))

        result = service.install(sel("6"))

        assert result.in_use is False
        assert service.in_use() == ver("5.9.1")

    def test_use_flag(self, service):
        service.install(sel("5.9.1"))

        result = service.install(sel("6"), use=True)

        assert result.in_use is True
        assert service.in_use() == ver("6.0.0")

    def test_already_installed(self, service):
        service.install(sel("5.9.1"))

        result = service.install(sel("5.9.1"))

        assert result.newly_installed is False
        assert service.config.installed_toolchains == ["5.9.1"]

    def test_snapshot(self, service):
        result = service.install(sel("main-snapshot"))
        assert result.version == ver("main-snapshot-2023-11-15")

    def test_no_match(self, service):
        with pytest.raises(ToolchainError, match="No toolchain matching 4"):
            service.install(sel("4"))

    def test_persists_config(self, service, swiftup_home):
        service.install(sel("5.9.1"))

        saved = load_config(swiftup_home.config_file)
        assert saved.installed_toolchains == ["5.9.1"]
        assert saved.in_use == "5.9.1"

    def test_no_mirror_configured(self, swiftup_home, store):
        service = ToolchainService(Config(), swiftup_home.config_file, store, source=None)

        with pytest.raises(ToolchainError, match="No toolchain mirror configured"):
            service.install(sel("5.9"))


class TestUse:
    """Tests for switching toolchains."""

    def test_switches(self, service, swiftup_home):
        service.install(sel("5.9.1"))
        service.install(sel("6.0"))

        previous, current = service.use(sel("6"))

        assert previous == ver("5.9.1")
        assert current == ver("6.0.0")
        assert "6.0.0" in str((swiftup_home.bin_dir / "swift").readlink())
        assert load_config(swiftup_home.config_file).in_use == "6.0.0"

    def test_picks_newest_installed_match(self, service):
        for name in ("5.9.0", "5.9.1", "6.0.0"):
            service.install(sel(name))

        _, current = service.use(sel("5.9"))

        assert current == ver("5.9.1")

    def test_not_installed(self, service):
        service.install(sel("5.9.1"))

        with pytest.raises(ToolchainError, match="No installed toolchain matches 6"):
            service.use(sel("6"))

    def test_use_does_not_need_mirror(self, service, swiftup_home, store):
        service.install(sel("5.9.1"))
        service.install(sel("6.0"))
        offline = ToolchainService(
            load_config(swiftup_home.config_file), swiftup_home.config_file, store, source=None
        )

        _, current = offline.use(sel("6"))

        assert current == ver("6.0.0")


class TestUninstall:
    """Tests for removing toolchains."""

    def test_removes_matches(self, service, store):
        for name in ("5.9.0", "5.9.1", "6.0.0"):
            service.install(sel(name))

        removed = service.uninstall(sel("5.9"))

        assert names(removed) == ["5.9.0", "5.9.1"]
        assert names(service.list_installed()) == ["6.0.0"]
        assert not store.contains(ver("5.9.0"))

    def test_in_use_falls_back_to_newest_stable(self, service):
        for name in ("5.9.1", "6.0.0", "main-snapshot-2023-11-15"):
            service.install(sel(name))
        service.use(sel("6"))

        service.uninstall(sel("6"))

        assert service.in_use() == ver("5.9.1")

    def test_in_use_falls_back_to_snapshot(self, service):
        service.install(sel("5.9.1"))
        service.install(sel("main-snapshot"))

        service.uninstall(sel("5"))

        assert service.in_use() == ver("main-snapshot-2023-11-15")

    def test_all(self, service, swiftup_home):
        service.install(sel("5.9.1"))
        service.install(sel("6"))

        removed = service.uninstall(None)

        assert len(removed) == 2
        assert service.in_use() is None
        assert list(swiftup_home.bin_dir.iterdir()) == []
        assert load_config(swiftup_home.config_file).installed_toolchains == []

    def test_nothing_matches(self, service):
        service.install(sel("5.9.1"))
        assert service.uninstall(sel("6")) == []

    def test_not_in_use_keeps_current(self, service):
        service.install(sel("5.9.1"))
        service.install(sel("6"))

        service.uninstall(sel("6"))

        assert service.in_use() == ver("5.9.1")


class TestUpdate:
    """Tests for updating toolchains."""

    def test_updates_in_use_patch(self, service, store):
        service.install(sel("5.9.0"))

        result = service.update()

        assert result.old == ver("5.9.0")
        assert result.new == ver("5.9.2")
        assert service.in_use() == ver("5.9.2")
        assert names(service.list_installed()) == ["5.9.2"]
        assert not store.contains(ver("5.9.0"))

    def test_patch_update_stays_on_minor(self, service):
        service.install(sel("5.9.2"))

        assert service.update() is None

    def test_major_selector_allows_minor_update(self, service):
        service.install(sel("5.9.2"))

        result = service.update(sel("5"))

        assert result.new == ver("5.10.0")

    def test_latest_selector_allows_major_update(self, service):
        service.install(sel("5.9.2"))

        result = service.update(sel("latest"))

        assert result.new == ver("6.0.0")

    def test_snapshot_update_same_branch(self, service):
        service.install(sel("main-snapshot-2023-10-01"))

        result = service.update()

        assert result.new == ver("main-snapshot-2023-11-15")

    def test_release_branch_snapshot_up_to_date(self, service):
        service.install(sel("5.10-snapshot"))

        assert service.update() is None

    def test_not_in_use_target_stays_not_in_use(self, service):
        service.install(sel("6.0.0"))
        service.install(sel("5.9.0"))

        result = service.update(sel("5.9"))

        assert result.new == ver("5.9.2")
        assert service.in_use() == ver("6.0.0")

    def test_nothing_in_use(self, service):
        with pytest.raises(ToolchainError, match="No toolchain is in use"):
            service.update()

    def test_selector_not_installed(self, service):
        service.install(sel("6"))
        with pytest.raises(ToolchainError, match="No installed toolchain matches 5.9"):
            service.update(sel("5.9"))


class TestListing:
    """Tests for listing toolchains."""

    def test_list_installed_filtered(self, service):
        for name in ("5.9.1", "6.0.0", "main-snapshot-2023-10-01"):
            service.install(sel(name))

        assert names(service.list_installed(sel("main-snapshot"))) == ["main-snapshot-2023-10-01"]
        assert names(service.list_installed()) == ["5.9.1", "6.0.0", "main-snapshot-2023-10-01"]

    def test_list_available_filtered(self, service):
        assert names(service.list_available(sel("5.9"))) == ["5.9.0", "5.9.1", "5.9.2"]

    def test_list_available_requires_mirror(self, swiftup_home, store):
        service = ToolchainService(Config(), swiftup_home.config_file, store)

        with pytest.raises(ToolchainError):
            service.list_available()
