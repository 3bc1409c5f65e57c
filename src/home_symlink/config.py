"""Configuration constants and root-directory resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from home_symlink.core.paths import expand_home
from home_symlink.exceptions import ConfigurationError

ROOT_DIR_ENV_VAR: str = "HOME_SYMLINK_DIR"
"""Environment variable consulted when no ``--dir`` is passed."""


def resolve_root_dir(
    explicit: Path | None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the packages root directory.

    *explicit* (the ``--dir`` argument) wins.  Otherwise the value of
    :data:`ROOT_DIR_ENV_VAR` is used, with ``~/`` expanded.

    Raises
    ------
    ConfigurationError
        If neither source provides a directory.
    """
    if explicit is not None:
        return explicit

    env = os.environ if environ is None else environ
    value = env.get(ROOT_DIR_ENV_VAR)
    if not value:
        raise ConfigurationError(
            f"No packages directory given and {ROOT_DIR_ENV_VAR} is not set.",
            hint=f"Pass --dir DIR or export {ROOT_DIR_ENV_VAR}=~/dotfiles",
        )
    return expand_home(value, environ=env)
