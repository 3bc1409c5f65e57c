"""The :class:`Package` entity and package discovery.

A package is one subdirectory of the root.  Its ``.symlink`` file is
parsed and every declared symlink is probed once at load time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from home_symlink.core.parser import parse_declarations
from home_symlink.core.symlink import Symlink
from home_symlink.exceptions import RootDirectoryError
from home_symlink.infra import filesystem

logger = logging.getLogger(__name__)

DECLARATION_FILENAME: str = ".symlink"
"""Name of the declaration file inside each package directory."""


@dataclass(slots=True)
class Package:
    """All symlinks declared by one package directory, in file order."""

    name: str
    directory: Path
    symlinks: list[Symlink] = field(default_factory=list)

    @classmethod
    def load(
        cls,
        directory: Path,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> Package:
        """Parse *directory*'s declaration file and probe each symlink.

        A missing or unreadable declaration file yields a package with
        no symlinks.
        """
        text = filesystem.read_text_or_empty(directory / DECLARATION_FILENAME)
        symlinks = list(parse_declarations(directory, text, environ=environ))
        for symlink in symlinks:
            symlink.probe()
        logger.debug("loaded package %s (%d symlinks)", directory.name, len(symlinks))
        return cls(name=directory.name, directory=directory, symlinks=symlinks)

    def link(self, force: bool = False) -> None:
        """Link every symlink that is not already linked."""
        for symlink in self.symlinks:
            if not symlink.status.is_linked:
                symlink.link(force)

    def unlink(self, force: bool = False) -> None:
        """Unlink every symlink that is not already unlinked."""
        for symlink in self.symlinks:
            if not symlink.status.is_unlinked:
                symlink.unlink(force)


def discover_packages(
    root: Path,
    *,
    environ: Mapping[str, str] | None = None,
) -> list[Package]:
    """Load one :class:`Package` per immediate subdirectory of *root*.

    Raises
    ------
    RootDirectoryError
        If *root* cannot be listed.
    """
    try:
        directories = filesystem.list_subdirectories(root)
    except OSError as exc:
        raise RootDirectoryError(
            f"Cannot read packages directory {root}: {exc.strerror or exc}",
            hint="Check that the directory exists and is readable.",
        ) from exc
    return [Package.load(directory, environ=environ) for directory in directories]


def link_packages(packages: Iterable[Package], *, force: bool = False) -> None:
    for package in packages:
        package.link(force)


def unlink_packages(packages: Iterable[Package], *, force: bool = False) -> None:
    for package in packages:
        package.unlink(force)
