"""Exit-code constants used by the CLI layer.

Per-symlink failures never change the exit code; only fatal startup
errors do.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed (individual symlinks may still report errors)."""

GENERAL_ERROR: int = 1
"""A known HomeSymlinkError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
