from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Kind of a filesystem entry as seen by the listing filters.

    Anything that is not a directory (regular files, device nodes, broken
    symlinks) is treated as a file.

    Attributes:
        FILE: Non-directory entry
        DIRECTORY: Directory, or a symlink resolving to one
    """

    FILE = "file"
    DIRECTORY = "directory"
