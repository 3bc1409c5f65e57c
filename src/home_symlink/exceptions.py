"""Custom exception hierarchy for home-symlink.

Only fatal startup conditions are raised as exceptions.  Failures on
an individual symlink never raise: they are recorded on the entity as
:meth:`~home_symlink.core.models.SymlinkStatus.error` so that sibling
symlinks and packages keep processing.

Hierarchy
---------
HomeSymlinkError
├── ConfigurationError
└── RootDirectoryError
"""

from __future__ import annotations


class HomeSymlinkError(Exception):
    """Base exception for all home-symlink errors.

    The CLI error boundary renders the message (and hint, if any)
    without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class ConfigurationError(HomeSymlinkError):
    """Raised when no root directory was given or configured."""


class RootDirectoryError(HomeSymlinkError):
    """Raised when the root directory cannot be listed."""
