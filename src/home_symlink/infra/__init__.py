"""Infrastructure layer — filesystem integration.

Thin wrappers over the OS calls the core needs.  Functions here let
:class:`OSError` propagate; the core decides whether a failure becomes
a symlink status or a fatal :class:`~home_symlink.exceptions.HomeSymlinkError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from home_symlink.infra.filesystem import (
    canonicalize,
    create_symlink,
    list_subdirectories,
    read_link,
    read_text_or_empty,
    remove_file,
    remove_tree,
)

__all__: list[str] = [
    "canonicalize",
    "create_symlink",
    "list_subdirectories",
    "read_link",
    "read_text_or_empty",
    "remove_file",
    "remove_tree",
]
