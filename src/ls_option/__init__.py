"""Filesystem listing with declarative entry filters.

This package provides ListOption, a chainable description of which directory
entries to select (files or directories, hidden or not, by filename suffix)
and the traversal that applies it.
"""

from importlib.metadata import PackageNotFoundError, version

from ls_option.list_option import ListOption, is_hidden
from ls_option.permission_action import PermissionAction
from ls_option.types import EntryKind, PathType

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("ls-option")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "EntryKind",
    "ListOption",
    "PathType",
    "PermissionAction",
    "is_hidden",
]
