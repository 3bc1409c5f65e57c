"""CLI application entry point and command routing for home-symlink.

This module is the **sole error boundary** for the entire application.
It catches :class:`~home_symlink.exceptions.HomeSymlinkError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Per-symlink failures are not errors at this level: they are shown
inline in each package report and the command still exits
:data:`~home_symlink.cli.exit_codes.SUCCESS`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from home_symlink.cli import exit_codes
from home_symlink.cli.console import console, err_console, escape, rich_available
from home_symlink.config import ROOT_DIR_ENV_VAR, resolve_root_dir
from home_symlink.core.package import (
    Package,
    discover_packages,
    link_packages,
    unlink_packages,
)
from home_symlink.core.paths import expand_home
from home_symlink.core.report import format_package
from home_symlink.exceptions import HomeSymlinkError
from home_symlink.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``home-symlink link [-f]``    (alias ``l``)
    * ``home-symlink unlink [-f]``  (alias ``u``)
    * ``home-symlink status``       (alias ``s``)
    """
    parser = argparse.ArgumentParser(
        prog="home-symlink",
        description="Link dotfile packages into place from their .symlink files.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--dir",
        type=expand_home,
        default=None,
        help=f"Packages directory. Defaults to ${ROOT_DIR_ENV_VAR}.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every filesystem operation to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    link = commands.add_parser("link", aliases=["l"], help="Create missing symlinks.")
    link.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Delete whatever occupies a destination before linking.",
    )
    link.set_defaults(handler=_handle_link)

    unlink = commands.add_parser("unlink", aliases=["u"], help="Remove symlinks.")
    unlink.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Delete destinations even if they were not created by home-symlink.",
    )
    unlink.set_defaults(handler=_handle_unlink)

    status = commands.add_parser("status", aliases=["s"], help="Show symlink status.")
    status.set_defaults(handler=_handle_status)

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _load_packages(args: argparse.Namespace) -> list[Package]:
    root = resolve_root_dir(args.dir)
    logger.debug("packages directory: %s", root)
    return discover_packages(root)


def _print_reports(packages: list[Package]) -> None:
    if rich_available():
        from home_symlink.cli.render import render_package

        for package in packages:
            console.print(render_package(package))
            console.print()
        return

    for package in packages:
        console.print(format_package(package))
        console.print()


def _handle_link(args: argparse.Namespace) -> int:
    packages = _load_packages(args)
    link_packages(packages, force=args.force)
    _print_reports(packages)
    return exit_codes.SUCCESS


def _handle_unlink(args: argparse.Namespace) -> int:
    packages = _load_packages(args)
    unlink_packages(packages, force=args.force)
    _print_reports(packages)
    return exit_codes.SUCCESS


def _handle_status(args: argparse.Namespace) -> int:
    _print_reports(_load_packages(args))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the home-symlink CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.verbose)
    return args.handler(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except HomeSymlinkError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
