"""The :class:`Symlink` entity: one declaration plus its live status.

Every operation here records its outcome on :attr:`Symlink.status`
instead of raising.  A failed link or unlink leaves an
:meth:`~home_symlink.core.models.SymlinkStatus.error` behind and the
caller moves on to the next symlink.

Ownership
---------
Without ``force``, :meth:`Symlink.unlink` deletes the destination only
when it is a symlink whose recorded target equals the canonical source
path, i.e. a link this tool would have created.  Anything else at the
destination is left alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from home_symlink.core.models import SymlinkKind, SymlinkStatus, WholeLink
from home_symlink.infra import filesystem

logger = logging.getLogger(__name__)

NOT_OWNED_REASON: str = "Symlink wasn't created by home-symlink."
EMPTY_DESTINATION_REASON: str = "No destination path declared."


@dataclass(slots=True)
class Symlink:
    """A declared symlink belonging to the package directory *base*."""

    base: Path
    kind: SymlinkKind
    status: SymlinkStatus = field(default_factory=SymlinkStatus.unlinked)

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def declared_source(self) -> Path:
        """Return the link source as declared, before canonicalization."""
        if isinstance(self.kind, WholeLink):
            return self.base
        return self.base / self.kind.source

    def from_path(self) -> Path | None:
        """Return the canonical link source.

        On failure the status becomes an error and ``None`` is returned;
        check :attr:`status` rather than trusting the return value.
        """
        try:
            return filesystem.canonicalize(self.declared_source())
        except (OSError, RuntimeError) as exc:
            self._record_error(exc)
            return None

    def to_path(self) -> Path:
        """Return the link destination verbatim (it may not exist yet)."""
        return self.kind.target

    def points_to(self, source: Path | None) -> bool:
        """Whether the destination is a symlink whose target is *source*."""
        if source is None:
            return False
        return filesystem.read_link(self.to_path()) == source

    # ------------------------------------------------------------------
    # Status probe
    # ------------------------------------------------------------------

    def probe(self) -> SymlinkStatus:
        """Re-evaluate :attr:`status` against the filesystem (read-only)."""
        self.status = SymlinkStatus.unlinked()
        source = self.from_path()
        if self.points_to(source):
            self.status = SymlinkStatus.linked()
        logger.debug("probe %s: %s", self.to_path(), self.status)
        return self.status

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def link(self, force: bool = False) -> SymlinkStatus:
        """Create the destination symlink.

        With *force*, whatever occupies the destination is removed
        first, as a directory tree and failing that as a file.  A failed
        removal is recorded but does not stop the link attempt.
        """
        if self._destination_missing():
            return self.status
        source = self.from_path()
        if source is None:
            return self.status
        destination = self.to_path()

        if force:
            self._clear_destination(destination)

        try:
            filesystem.create_symlink(source, destination)
        except OSError as exc:
            self._record_error(exc)
            return self.status

        logger.debug("linked %s -> %s", destination, source)
        self.status = SymlinkStatus.linked()
        return self.status

    def unlink(self, force: bool = False) -> SymlinkStatus:
        """Remove the destination symlink if this tool created it.

        With *force*, the destination is removed without the ownership
        check.
        """
        if self._destination_missing():
            return self.status
        destination = self.to_path()

        if force:
            self._remove_destination(destination)
            return self.status

        source = self.from_path()
        if not self.points_to(source):
            logger.info("refusing to remove %s: %s", destination, NOT_OWNED_REASON)
            self.status = SymlinkStatus.error(NOT_OWNED_REASON)
            return self.status

        self._remove_destination(destination)
        return self.status

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _destination_missing(self) -> bool:
        # Path("") is the working directory; never link or delete there.
        if self.to_path().parts:
            return False
        self.status = SymlinkStatus.error(EMPTY_DESTINATION_REASON)
        return True

    def _clear_destination(self, destination: Path) -> None:
        try:
            filesystem.remove_tree(destination)
        except OSError:
            try:
                filesystem.remove_file(destination)
            except OSError as exc:
                logger.debug("could not clear %s: %s", destination, exc)
                self.status = SymlinkStatus.from_exception(exc)

    def _remove_destination(self, destination: Path) -> None:
        try:
            filesystem.remove_file(destination)
        except OSError as exc:
            self._record_error(exc)
            return
        logger.debug("unlinked %s", destination)
        self.status = SymlinkStatus.unlinked()

    def _record_error(self, exc: Exception) -> None:
        logger.info("%s: %s", self.to_path(), exc)
        self.status = SymlinkStatus.from_exception(exc)
