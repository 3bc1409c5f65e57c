"""Home-directory shorthand expansion."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

HOME_PREFIX: str = "~/"


def expand_home(path: str, *, environ: Mapping[str, str] | None = None) -> Path:
    """Replace a leading ``~/`` in *path* with ``$HOME``.

    Expansion is best-effort: when ``HOME`` is unset, or *path* does not
    start with ``~/``, the literal path is returned unchanged.
    """
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if path.startswith(HOME_PREFIX) and home is not None:
        return Path(home) / path[len(HOME_PREFIX):]
    return Path(path)
