"""Shared pytest fixtures and configuration for the home-symlink test suite.

Guidelines
----------
* Every test works inside ``tmp_path``; ``HOME`` is redirected there.
* Symlink assertions compare against canonical (``resolve()``-d) paths.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fresh home directory that ``~/`` expands to."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """An empty packages root directory."""
    root_dir = tmp_path / "dotfiles"
    root_dir.mkdir()
    return root_dir


MakePackage = Callable[..., Path]


@pytest.fixture
def make_package(root: Path) -> MakePackage:
    """Factory creating ``root/<name>`` with a declaration and source files."""

    def _make(
        name: str,
        declaration: str | None = None,
        files: Mapping[str, str] | None = None,
    ) -> Path:
        package_dir = root / name
        package_dir.mkdir()
        if declaration is not None:
            (package_dir / ".symlink").write_text(declaration, encoding="utf-8")
        for relative, content in (files or {}).items():
            path = package_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return package_dir

    return _make


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from emitting ANSI codes into captured output."""
    for var in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)
