"""Tests for the individual release checks."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipit.core.result import Err, Ok
from shipit.services.checks import (
    check_branch,
    check_changelog,
    check_license,
    check_remote_status,
    check_version,
    check_working_tree,
    normalize_version,
    tag_name,
)


class TestNormalizeVersion:
    @pytest.mark.parametrize(
        ("given", "expected"),
        [
            ("1.2.0", "1.2.0"),
            ("v1.2.0", "1.2.0"),
            ("vv1.2.0", "v1.2.0"),
            ("1.0.0-rc.1", "1.0.0-rc.1"),
        ],
    )
    def test_strips_exactly_one_leading_v(self, given: str, expected: str) -> None:
        assert normalize_version(given) == expected

    def test_tag_name_is_v_prefixed(self) -> None:
        assert tag_name("1.2.0") == "v1.2.0"


class TestCheckVersion:
    def test_match(self) -> None:
        assert isinstance(check_version("1.2.0", "1.2.0"), Ok)

    def test_match_after_normalizing(self) -> None:
        assert isinstance(check_version(normalize_version("v1.2.0"), "1.2.0"), Ok)

    def test_mismatch_names_both_versions(self) -> None:
        result = check_version("1.2.1", "1.2.0")

        assert isinstance(result, Err)
        assert result.error.kind == "version_mismatch"
        assert "1.2.1" in result.error.message
        assert "1.2.0" in result.error.message
        assert result.error.message == 'Expected "1.2.1" to match pyproject.toml version "1.2.0"'


class TestCheckWorkingTree:
    def test_empty_status_is_clean(self) -> None:
        assert isinstance(check_working_tree(""), Ok)

    @pytest.mark.parametrize("output", [" M src/app.py\n", "?? notes.txt\n", "\n"])
    def test_any_output_is_dirty(self, output: str) -> None:
        result = check_working_tree(output)

        assert isinstance(result, Err)
        assert result.error.kind == "dirty_working_tree"
        assert result.error.message == "Found uncommitted changes in the working tree"


class TestCheckBranch:
    def test_same_branch(self) -> None:
        assert isinstance(check_branch("main", "main"), Ok)

    def test_mismatch_names_both(self) -> None:
        result = check_branch("main", "feature/x")

        assert isinstance(result, Err)
        assert result.error.kind == "branch_mismatch"
        assert result.error.message == 'Expected branch "main" does not match current "feature/x"'


class TestCheckChangelog:
    def test_entry_present(self, tmp_path: Path) -> None:
        (tmp_path / "CHANGELOG.md").write_text("## v1.2.0\n\n- fix\n", encoding="utf-8")

        assert isinstance(check_changelog(tmp_path, "CHANGELOG.md", "v1.2.0"), Ok)

    def test_entry_missing(self, tmp_path: Path) -> None:
        (tmp_path / "CHANGELOG.md").write_text("## v1.1.0\n", encoding="utf-8")

        result = check_changelog(tmp_path, "CHANGELOG.md", "v1.2.0")

        assert isinstance(result, Err)
        assert result.error.kind == "changelog_entry_missing"
        assert result.error.message == "CHANGELOG.md does not include an entry for v1.2.0"

    def test_unprefixed_entry_does_not_count(self, tmp_path: Path) -> None:
        (tmp_path / "CHANGELOG.md").write_text("## 1.2.0\n", encoding="utf-8")

        result = check_changelog(tmp_path, "CHANGELOG.md", "v1.2.0")

        assert isinstance(result, Err)
        assert result.error.kind == "changelog_entry_missing"

    def test_file_missing_has_its_own_message(self, tmp_path: Path) -> None:
        result = check_changelog(tmp_path, "CHANGELOG.md", "v1.2.0")

        assert isinstance(result, Err)
        assert result.error.kind == "changelog_missing"
        assert result.error.message == "CHANGELOG.md is missing"

    def test_custom_changelog_name(self, tmp_path: Path) -> None:
        (tmp_path / "HISTORY.rst").write_text("v1.2.0\n------\n", encoding="utf-8")

        assert isinstance(check_changelog(tmp_path, "HISTORY.rst", "v1.2.0"), Ok)

    def test_latin1_changelog(self, tmp_path: Path) -> None:
        (tmp_path / "CHANGELOG.md").write_bytes("## v1.2.0 caf\xe9\n".encode("latin-1"))

        assert isinstance(check_changelog(tmp_path, "CHANGELOG.md", "v1.2.0"), Ok)

    def test_latin1_changelog_without_entry(self, tmp_path: Path) -> None:
        (tmp_path / "CHANGELOG.md").write_bytes("## v1.1.0 caf\xe9\n".encode("latin-1"))

        result = check_changelog(tmp_path, "CHANGELOG.md", "v1.2.0")

        assert isinstance(result, Err)
        assert result.error.kind == "changelog_entry_missing"

    def test_directory_counts_as_missing(self, tmp_path: Path) -> None:
        (tmp_path / "CHANGELOG.md").mkdir()

        result = check_changelog(tmp_path, "CHANGELOG.md", "v1.2.0")

        assert isinstance(result, Err)
        assert result.error.kind == "changelog_missing"


class TestCheckLicense:
    def test_none_present(self, tmp_path: Path) -> None:
        result = check_license(tmp_path, ("LICENSE.md", "LICENSE"))

        assert isinstance(result, Err)
        assert result.error.kind == "license_missing"
        assert result.error.message == "LICENSE file is missing, add LICENSE.md or LICENSE"

    @pytest.mark.parametrize("name", ["LICENSE.md", "LICENSE"])
    def test_exactly_one_present(self, tmp_path: Path, name: str) -> None:
        (tmp_path / name).write_text("MIT\n", encoding="utf-8")

        result = check_license(tmp_path, ("LICENSE.md", "LICENSE"))

        assert isinstance(result, Ok)
        assert result.value == name

    def test_directory_is_not_a_license(self, tmp_path: Path) -> None:
        (tmp_path / "LICENSE").mkdir()

        assert isinstance(check_license(tmp_path, ("LICENSE",)), Err)


class TestCheckRemoteStatus:
    def test_in_sync(self) -> None:
        assert isinstance(check_remote_status("## main...origin/main\n"), Ok)

    def test_ahead(self) -> None:
        result = check_remote_status("## main...origin/main [ahead 2]\n")

        assert isinstance(result, Err)
        assert result.error.kind == "branch_ahead"
        assert result.error.message == "Local branch is ahead of the remote branch, aborting"

    def test_behind(self) -> None:
        result = check_remote_status("## main...origin/main [behind 1]\n")

        assert isinstance(result, Err)
        assert result.error.kind == "branch_behind"
        assert result.error.message == "Local branch is behind the remote branch, aborting"

    def test_ahead_reported_when_diverged(self) -> None:
        result = check_remote_status("## main...origin/main [ahead 1, behind 3]\n")

        assert isinstance(result, Err)
        assert result.error.kind == "branch_ahead"

    def test_substring_anywhere_counts(self) -> None:
        result = check_remote_status("something behind something")

        assert isinstance(result, Err)
        assert result.error.kind == "branch_behind"

    def test_branch_name_trips_the_check(self) -> None:
        result = check_remote_status("## go-ahead...origin/go-ahead\n")

        assert isinstance(result, Err)
        assert result.error.kind == "branch_ahead"
