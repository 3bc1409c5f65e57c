"""Allow ``python -m home_symlink`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m home_symlink`` behaves identically to the
``home-symlink`` console script.
"""

from __future__ import annotations

from home_symlink.cli.app import cli

if __name__ == "__main__":
    cli()
