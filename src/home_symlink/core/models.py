"""Domain models for home-symlink.

Declarations and statuses are **frozen** dataclasses — immutable value
objects.  The only mutable state in the system is the ``status`` field
of a :class:`~home_symlink.core.symlink.Symlink`, which is replaced
wholesale with a new :class:`SymlinkStatus` at each stage.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Union


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

class StatusKind(enum.Enum):
    """Discriminator for :class:`SymlinkStatus`."""

    UNLINKED = "unlinked"
    LINKED = "linked"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SymlinkStatus:
    """Live state of one declared symlink.

    ``reason`` is set only for :attr:`StatusKind.ERROR`.  Two error
    statuses are equal only when their reasons are equal.
    """

    kind: StatusKind
    reason: str | None = None

    @classmethod
    def unlinked(cls) -> SymlinkStatus:
        return cls(StatusKind.UNLINKED)

    @classmethod
    def linked(cls) -> SymlinkStatus:
        return cls(StatusKind.LINKED)

    @classmethod
    def error(cls, reason: str) -> SymlinkStatus:
        return cls(StatusKind.ERROR, reason)

    @classmethod
    def from_exception(cls, exc: BaseException) -> SymlinkStatus:
        """Collapse any exception into an error status carrying its text."""
        return cls.error(str(exc))

    @property
    def is_linked(self) -> bool:
        return self.kind is StatusKind.LINKED

    @property
    def is_unlinked(self) -> bool:
        return self.kind is StatusKind.UNLINKED

    @property
    def is_error(self) -> bool:
        return self.kind is StatusKind.ERROR

    def __str__(self) -> str:
        if self.kind is StatusKind.LINKED:
            return "(✓) Linked"
        if self.kind is StatusKind.UNLINKED:
            return "(X) Unlinked"
        return f"(X) Error: {self.reason}"


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WholeLink:
    """The whole package directory is linked to *target*."""

    target: Path
    """Absolute link destination, home shorthand already expanded."""


@dataclass(frozen=True, slots=True)
class MappedLink:
    """One path inside the package is linked to *target*."""

    source: Path
    """Link source, relative to the package directory."""

    target: Path
    """Absolute link destination, home shorthand already expanded."""


SymlinkKind = Union[WholeLink, MappedLink]
