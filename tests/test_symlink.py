"""Tests for the Symlink entity (core/symlink.py).

All tests run against a real temporary filesystem.

Coverage:
* Source resolution for whole and mapped declarations.
* Status probing, including idempotence.
* ``link`` with and without force.
* ``unlink`` ownership refusal and forced removal.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from home_symlink.core.models import MappedLink, StatusKind, SymlinkStatus, WholeLink
from home_symlink.core.symlink import EMPTY_DESTINATION_REASON, NOT_OWNED_REASON, Symlink


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "pkg"
    directory.mkdir()
    (directory / "config.fish").write_text("set -x EDITOR vim\n", encoding="utf-8")
    return directory


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    return tmp_path / "out" / "config.fish"


@pytest.fixture
def symlink(package_dir: Path, dest: Path) -> Symlink:
    dest.parent.mkdir()
    return Symlink(
        base=package_dir,
        kind=MappedLink(source=Path("config.fish"), target=dest),
    )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class TestResolution:
    def test_mapped_from_path_is_canonical(self, symlink: Symlink, package_dir: Path) -> None:
        assert symlink.from_path() == (package_dir / "config.fish").resolve()
        assert symlink.status.is_unlinked

    def test_whole_from_path_is_package_dir(self, package_dir: Path, tmp_path: Path) -> None:
        whole = Symlink(base=package_dir, kind=WholeLink(target=tmp_path / "link"))
        assert whole.from_path() == package_dir.resolve()

    def test_missing_source_sets_error(self, package_dir: Path, dest: Path) -> None:
        missing = Symlink(base=package_dir, kind=MappedLink(Path("nope"), dest))
        assert missing.from_path() is None
        assert missing.status.is_error
        assert "nope" in str(missing.status.reason)

    def test_to_path_is_verbatim(self, symlink: Symlink, dest: Path) -> None:
        assert symlink.to_path() == dest
        assert not dest.exists()

    def test_declared_source_is_not_canonicalized(
        self, symlink: Symlink, package_dir: Path,
    ) -> None:
        assert symlink.declared_source() == package_dir / "config.fish"


# ---------------------------------------------------------------------------
# Probe
# ---------------------------------------------------------------------------

class TestProbe:
    def test_missing_destination_is_unlinked(self, symlink: Symlink) -> None:
        assert symlink.probe() == SymlinkStatus.unlinked()

    def test_link_to_source_is_linked(self, symlink: Symlink, dest: Path, package_dir: Path) -> None:
        os.symlink((package_dir / "config.fish").resolve(), dest)
        assert symlink.probe() == SymlinkStatus.linked()

    def test_link_elsewhere_is_unlinked(self, symlink: Symlink, dest: Path, tmp_path: Path) -> None:
        other = tmp_path / "other"
        other.write_text("x", encoding="utf-8")
        os.symlink(other, dest)
        assert symlink.probe() == SymlinkStatus.unlinked()

    def test_regular_file_is_unlinked(self, symlink: Symlink, dest: Path) -> None:
        dest.write_text("mine", encoding="utf-8")
        assert symlink.probe() == SymlinkStatus.unlinked()

    def test_missing_source_is_error(self, package_dir: Path, dest: Path) -> None:
        missing = Symlink(base=package_dir, kind=MappedLink(Path("nope"), dest))
        assert missing.probe().kind is StatusKind.ERROR

    def test_idempotent(self, symlink: Symlink, dest: Path, package_dir: Path) -> None:
        os.symlink((package_dir / "config.fish").resolve(), dest)
        first = symlink.probe()
        second = symlink.probe()
        assert first == second == SymlinkStatus.linked()

    def test_does_not_touch_filesystem(self, symlink: Symlink, dest: Path) -> None:
        dest.write_text("mine", encoding="utf-8")
        symlink.probe()
        assert dest.read_text(encoding="utf-8") == "mine"


# ---------------------------------------------------------------------------
# link
# ---------------------------------------------------------------------------

class TestLink:
    def test_creates_symlink(self, symlink: Symlink, dest: Path, package_dir: Path) -> None:
        assert symlink.link() == SymlinkStatus.linked()
        assert dest.is_symlink()
        assert Path(os.readlink(dest)) == (package_dir / "config.fish").resolve()

    def test_probe_after_link_is_linked(self, symlink: Symlink) -> None:
        symlink.link()
        assert symlink.probe() == SymlinkStatus.linked()

    def test_whole_package_link(self, package_dir: Path, tmp_path: Path) -> None:
        target = tmp_path / "fish"
        whole = Symlink(base=package_dir, kind=WholeLink(target=target))
        assert whole.link().is_linked
        assert (target / "config.fish").read_text(encoding="utf-8").startswith("set")

    def test_occupied_destination_fails(self, symlink: Symlink, dest: Path) -> None:
        dest.write_text("mine", encoding="utf-8")
        status = symlink.link()
        assert status.is_error
        assert "exists" in str(status.reason)
        assert dest.read_text(encoding="utf-8") == "mine"

    def test_missing_parent_fails(self, package_dir: Path, tmp_path: Path) -> None:
        deep = Symlink(
            base=package_dir,
            kind=MappedLink(Path("config.fish"), tmp_path / "no" / "such" / "dir"),
        )
        assert deep.link().is_error

    def test_missing_source_keeps_resolution_error(
        self, package_dir: Path, dest: Path,
    ) -> None:
        missing = Symlink(base=package_dir, kind=MappedLink(Path("nope"), dest))
        status = missing.link()
        assert status.is_error
        assert "nope" in str(status.reason)
        assert not os.path.lexists(dest)

    def test_force_replaces_regular_file(self, symlink: Symlink, dest: Path) -> None:
        dest.write_text("mine", encoding="utf-8")
        assert symlink.link(force=True).is_linked
        assert dest.is_symlink()

    def test_force_replaces_directory(self, symlink: Symlink, dest: Path) -> None:
        dest.mkdir()
        (dest / "inner").write_text("x", encoding="utf-8")
        assert symlink.link(force=True).is_linked
        assert dest.is_symlink()

    def test_force_replaces_foreign_symlink(
        self, symlink: Symlink, dest: Path, tmp_path: Path,
    ) -> None:
        other_dir = tmp_path / "other_dir"
        other_dir.mkdir()
        (other_dir / "keep").write_text("x", encoding="utf-8")
        os.symlink(other_dir, dest)

        assert symlink.link(force=True).is_linked
        assert symlink.probe().is_linked
        assert (other_dir / "keep").exists()

    def test_force_with_empty_destination(self, symlink: Symlink) -> None:
        assert symlink.link(force=True).is_linked


# ---------------------------------------------------------------------------
# unlink
# ---------------------------------------------------------------------------

class TestUnlink:
    def test_removes_owned_symlink(self, symlink: Symlink, dest: Path) -> None:
        symlink.link()
        assert symlink.unlink() == SymlinkStatus.unlinked()
        assert not os.path.lexists(dest)

    def test_source_survives_unlink(self, symlink: Symlink, package_dir: Path) -> None:
        symlink.link()
        symlink.unlink()
        assert (package_dir / "config.fish").exists()

    def test_refuses_regular_file(self, symlink: Symlink, dest: Path) -> None:
        dest.write_text("mine", encoding="utf-8")
        assert symlink.unlink() == SymlinkStatus.error(NOT_OWNED_REASON)
        assert dest.read_text(encoding="utf-8") == "mine"

    def test_refuses_foreign_symlink(self, symlink: Symlink, dest: Path, tmp_path: Path) -> None:
        other = tmp_path / "other"
        other.write_text("x", encoding="utf-8")
        os.symlink(other, dest)

        assert symlink.unlink() == SymlinkStatus.error(NOT_OWNED_REASON)
        assert Path(os.readlink(dest)) == other

    def test_refuses_missing_destination(self, symlink: Symlink) -> None:
        assert symlink.unlink() == SymlinkStatus.error(NOT_OWNED_REASON)

    def test_force_removes_regular_file(self, symlink: Symlink, dest: Path) -> None:
        dest.write_text("mine", encoding="utf-8")
        assert symlink.unlink(force=True) == SymlinkStatus.unlinked()
        assert not dest.exists()

    def test_force_removes_owned_symlink(self, symlink: Symlink, dest: Path) -> None:
        symlink.link()
        assert symlink.unlink(force=True) == SymlinkStatus.unlinked()
        assert not os.path.lexists(dest)

    def test_force_on_missing_destination_is_error(self, symlink: Symlink) -> None:
        assert symlink.unlink(force=True).is_error

    def test_force_does_not_remove_directories(self, symlink: Symlink, dest: Path) -> None:
        dest.mkdir()
        assert symlink.unlink(force=True).is_error
        assert dest.is_dir()


# ---------------------------------------------------------------------------
# Empty destination
# ---------------------------------------------------------------------------

class TestEmptyDestination:
    @pytest.fixture
    def workdir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
        directory = tmp_path / "work"
        directory.mkdir()
        (directory / "keep.txt").write_text("x", encoding="utf-8")
        monkeypatch.chdir(directory)
        return directory

    @pytest.fixture
    def no_target(self, package_dir: Path) -> Symlink:
        return Symlink(base=package_dir, kind=MappedLink(Path("config.fish"), Path("")))

    @pytest.mark.parametrize("force", [False, True])
    def test_link_refused(self, no_target: Symlink, workdir: Path, force: bool) -> None:
        assert no_target.link(force=force) == SymlinkStatus.error(EMPTY_DESTINATION_REASON)
        assert (workdir / "keep.txt").exists()

    @pytest.mark.parametrize("force", [False, True])
    def test_unlink_refused(self, no_target: Symlink, workdir: Path, force: bool) -> None:
        assert no_target.unlink(force=force) == SymlinkStatus.error(EMPTY_DESTINATION_REASON)
        assert (workdir / "keep.txt").exists()
