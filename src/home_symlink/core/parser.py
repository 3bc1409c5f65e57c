"""Parser for ``.symlink`` declaration lines.

Grammar (one declaration per line, surrounding whitespace ignored)::

    SOURCE = DESTINATION    # MappedLink: package-relative SOURCE
    DESTINATION             # WholeLink: the package directory itself

Blank lines are skipped.  Only line feeds separate declarations, so
form feeds and Unicode line separators stay inside a line; a trailing
carriage return is stripped with the rest of the whitespace.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path

from home_symlink.core.models import MappedLink, WholeLink
from home_symlink.core.paths import expand_home
from home_symlink.core.symlink import Symlink


def parse_declaration(
    base: Path,
    line: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> Symlink | None:
    """Turn one declaration line into an unprobed :class:`Symlink`.

    Returns ``None`` for blank lines.  Only the first ``=`` splits; any
    later ones belong to the destination.  An empty side becomes
    ``Path("")``: an empty source names the package directory itself.
    """
    text = line.strip()
    if not text:
        return None

    parts = [part.strip() for part in text.split("=", 1)]

    if len(parts) == 1:
        target = expand_home(parts[0], environ=environ)
        return Symlink(base=base, kind=WholeLink(target=target))

    source, target = parts
    return Symlink(
        base=base,
        kind=MappedLink(
            source=expand_home(source, environ=environ),
            target=expand_home(target, environ=environ),
        ),
    )


def parse_declarations(
    base: Path,
    text: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> Iterator[Symlink]:
    """Yield a :class:`Symlink` per parseable line of *text*, in order."""
    for line in text.split("\n"):
        symlink = parse_declaration(base, line, environ=environ)
        if symlink is not None:
            yield symlink
