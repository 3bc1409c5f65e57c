"""Status aggregation and plain-text package reports.

The aggregate is presentation-only: it summarises a package's
statuses for display and never feeds back into any entity.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable

from home_symlink.core.models import SymlinkStatus
from home_symlink.core.package import Package
from home_symlink.core.symlink import Symlink


class AggregateLabel(enum.Enum):
    """Package summaries that are not a single symlink status."""

    NO_SYMLINKS = "(X) No symlinks defined"
    MIXED = "(-) Mixed"

    def __str__(self) -> str:
        return self.value


def aggregate_status(
    statuses: Iterable[SymlinkStatus],
) -> SymlinkStatus | AggregateLabel:
    """Reduce *statuses* to one summary.

    * no statuses → :attr:`AggregateLabel.NO_SYMLINKS`
    * all equal (error reasons included) → that status
    * otherwise → :attr:`AggregateLabel.MIXED`
    """
    iterator = iter(statuses)
    first = next(iterator, None)
    if first is None:
        return AggregateLabel.NO_SYMLINKS
    if all(status == first for status in iterator):
        return first
    return AggregateLabel.MIXED


def package_summary(package: Package) -> SymlinkStatus | AggregateLabel:
    """Return the aggregate status of *package*'s symlinks."""
    return aggregate_status(symlink.status for symlink in package.symlinks)


def format_symlink(symlink: Symlink) -> str:
    """Render one indented ``<source> -> <destination> - <status>`` line."""
    return f"  {symlink.declared_source()} -> {symlink.to_path()} - {symlink.status}"


def format_package(package: Package) -> str:
    """Render *package* as a multi-line plain-text report.

    The first line is ``<name> - <summary>``; each symlink follows on
    its own indented line as ``<source> -> <destination> - <status>``.
    """
    lines = [f"{package.name} - {package_summary(package)}"]
    lines.extend(format_symlink(symlink) for symlink in package.symlinks)
    return "\n".join(lines)
