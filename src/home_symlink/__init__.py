"""home-symlink — declarative dotfile symlink manager.

Each package directory under a root holds a ``.symlink`` declaration
file; the tool reconciles the filesystem's symlinks against it.
"""

from home_symlink.version import __version__

__all__: list[str] = ["__version__"]
