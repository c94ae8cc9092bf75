"""Tests for ToolchainVersion value object."""

import pytest

from swiftup.domain import ToolchainVersion


class TestParse:
    """Tests for parsing toolchain names."""

    def test_full_stable_version(self):
        v = ToolchainVersion.parse("5.9.1")
        assert (v.major, v.minor, v.patch) == (5, 9, 1)
        assert v.is_snapshot is False

    def test_missing_patch_defaults_to_zero(self):
        """Test that 5.9 is the same toolchain as 5.9.0."""
        assert ToolchainVersion.parse("5.9") == ToolchainVersion.stable(5, 9, 0)
        assert ToolchainVersion.parse("5.9").name == "5.9.0"

    def test_main_snapshot(self):
        v = ToolchainVersion.parse("main-snapshot-2023-10-01")
        assert v.is_snapshot is True
        assert v.branch == "main"
        assert v.date == "2023-10-01"

    def test_release_branch_snapshot(self):
        v = ToolchainVersion.parse("5.10-snapshot-2024-01-31")
        assert v.branch == "5.10"
        assert v.name == "5.10-snapshot-2024-01-31"

    def test_surrounding_whitespace_ignored(self):
        assert ToolchainVersion.parse(" 5.9.1\n").name == "5.9.1"

    @pytest.mark.parametrize(
        "name",
        ["", "5", "latest", "5.9.1.2", "v5.9", "main-snapshot", "main-snapshot-2023-1-1", "dev-snapshot-2023-10-01"],
    )
    def test_invalid_names_raise(self, name):
        with pytest.raises(ValueError):
            ToolchainVersion.parse(name)


class TestInvariants:
    """Tests for value object validation."""

    def test_stable_requires_all_components(self):
        with pytest.raises(ValueError):
            ToolchainVersion(major=5, minor=9)

    def test_negative_component_rejected(self):
        with pytest.raises(ValueError):
            ToolchainVersion.stable(5, -1)

    def test_snapshot_requires_branch(self):
        with pytest.raises(ValueError):
            ToolchainVersion(date="2023-10-01")

    @pytest.mark.parametrize("date", ["2023-13-01", "2023-02-30", "2023-10-45"])
    def test_snapshot_date_must_exist(self, date):
        with pytest.raises(ValueError, match="snapshot date"):
            ToolchainVersion.parse(f"main-snapshot-{date}")

    def test_immutable(self):
        v = ToolchainVersion.stable(5, 9)
        with pytest.raises(AttributeError):
            v.major = 6


class TestOrdering:
    """Tests for sorting toolchains."""

    def test_numeric_not_lexical(self):
        assert ToolchainVersion.parse("5.10.0") > ToolchainVersion.parse("5.9.2")

    def test_stable_before_snapshots(self):
        assert ToolchainVersion.parse("6.0.0") < ToolchainVersion.parse("5.9-snapshot-2020-01-01")

    def test_snapshots_sorted_by_branch_then_date(self):
        names = [
            "main-snapshot-2023-01-01",
            "5.10-snapshot-2023-06-01",
            "5.9-snapshot-2023-12-01",
            "5.10-snapshot-2023-01-01",
        ]
        ordered = [v.name for v in sorted(ToolchainVersion.parse(n) for n in names)]
        assert ordered == [
            "5.9-snapshot-2023-12-01",
            "5.10-snapshot-2023-01-01",
            "5.10-snapshot-2023-06-01",
            "main-snapshot-2023-01-01",
        ]

    def test_equal_versions_hash_equal(self):
        assert len({ToolchainVersion.parse("5.9"), ToolchainVersion.parse("5.9.0")}) == 1

    def test_str_is_name(self):
        assert str(ToolchainVersion.parse("main-snapshot-2023-10-01")) == "main-snapshot-2023-10-01"
