"""Rich rendering of package reports.

Mirrors :func:`home_symlink.core.report.format_package` line for line,
adding colour: green for linked, red for unlinked and errors, yellow
for mixed packages.
"""

from __future__ import annotations

from typing import Any

from home_symlink.core.models import StatusKind, SymlinkStatus
from home_symlink.core.package import Package
from home_symlink.core.report import AggregateLabel, package_summary

_STATUS_STYLES: dict[StatusKind, str] = {
    StatusKind.LINKED: "green",
    StatusKind.UNLINKED: "red",
    StatusKind.ERROR: "red",
}

_LABEL_STYLES: dict[AggregateLabel, str] = {
    AggregateLabel.NO_SYMLINKS: "red",
    AggregateLabel.MIXED: "yellow",
}


def _status_text(status: SymlinkStatus) -> Any:
    from rich.text import Text

    style = _STATUS_STYLES[status.kind]
    if status.is_error:
        return Text.assemble(("(X) Error: ", style), str(status.reason))
    return Text(str(status), style=style)


def render_package(package: Package) -> Any:
    """Return a ``rich.text.Text`` report for *package*."""
    from rich.text import Text

    summary = package_summary(package)
    if isinstance(summary, AggregateLabel):
        summary_text = Text(str(summary), style=_LABEL_STYLES[summary])
    else:
        summary_text = _status_text(summary)
    summary_text.stylize("bold")

    text = Text.assemble((package.name, "bold"), (" - ", "bold"), summary_text)
    for symlink in package.symlinks:
        text.append(f"\n  {symlink.declared_source()} -> {symlink.to_path()} - ")
        text.append_text(_status_text(symlink.status))
    return text
