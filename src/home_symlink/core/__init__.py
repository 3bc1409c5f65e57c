"""Core layer — declarations, symlink/package entities, and reports.

Rules
-----
* No ``print()`` calls.
* Filesystem access goes through :mod:`home_symlink.infra.filesystem`.
* No imports from ``cli``.
* Per-symlink failures are statuses, never exceptions.
"""

from home_symlink.core.models import (
    MappedLink,
    StatusKind,
    SymlinkKind,
    SymlinkStatus,
    WholeLink,
)
from home_symlink.core.package import (
    DECLARATION_FILENAME,
    Package,
    discover_packages,
    link_packages,
    unlink_packages,
)
from home_symlink.core.parser import parse_declaration, parse_declarations
from home_symlink.core.paths import expand_home
from home_symlink.core.report import (
    AggregateLabel,
    aggregate_status,
    format_package,
    package_summary,
)
from home_symlink.core.symlink import NOT_OWNED_REASON, Symlink

__all__: list[str] = [
    "DECLARATION_FILENAME",
    "NOT_OWNED_REASON",
    "AggregateLabel",
    "MappedLink",
    "Package",
    "StatusKind",
    "Symlink",
    "SymlinkKind",
    "SymlinkStatus",
    "WholeLink",
    "aggregate_status",
    "discover_packages",
    "expand_home",
    "format_package",
    "link_packages",
    "package_summary",
    "parse_declaration",
    "parse_declarations",
    "unlink_packages",
]
