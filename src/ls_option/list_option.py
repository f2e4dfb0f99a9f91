"""Listing configuration and directory traversal.

This module provides the ListOption class, a value describing which filesystem
entries to select (by kind, visibility and filename suffix) together with the
traversal that applies that description to a directory tree.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ls_option.permission_action import PermissionAction
from ls_option.types import EntryKind, PathType

logger = logging.getLogger(__name__)

HIDDEN_MARKER = "."


def is_hidden(name: str) -> bool:
    """Return True if a base name follows the dot-file convention.

    The leading-dot rule is used on every platform, including Windows, so that
    listings are reproducible regardless of filesystem attribute flags.

    Example:
        >>> is_hidden(".git")
        True
        >>> is_hidden("main.rs")
        False
    """
    return name.startswith(HIDDEN_MARKER)


@dataclass(frozen=True)
class ListOption:
    """Declarative description of a directory listing.

    A ListOption is an immutable value. Each builder method returns a new
    ListOption with one setting changed, so configurations can be chained and
    shared freely. The terminal ``list`` call walks the filesystem and returns
    every entry that passes all three filters:

    - kind: files are kept if ``include_files``, directories if ``include_dirs``
    - visibility: dot entries are kept if ``include_hidden``, others if ``include_unhidden``
    - suffix: the base name ends with one of ``suffixes``, or ``suffixes`` is empty

    Descent into subdirectories is independent of whether the directory itself
    is listed, except that directories failing the visibility filter are never
    entered.

    Defaults show files and directories, hidden and unhidden, one level deep,
    with no suffix restriction.

    Attributes:
        include_files (bool): List non-directory entries.
        include_dirs (bool): List directories.
        include_hidden (bool): List entries whose name starts with a dot.
        include_unhidden (bool): List entries whose name does not start with a dot.
        is_recursive (bool): Descend into subdirectories without a depth limit.
        max_level (int): Depth limit used when not recursive; 1 lists direct children only.
        suffixes (Tuple[str, ...]): Allowed filename suffixes, matched case-sensitively.
        on_permission_error (PermissionAction): What to do with unreadable directories.
        follow_links (bool): Descend into symbolic links that point at directories.

    Example:
        >>> option = ListOption.default().dir(False).hidden(False).recursive(True).sufs([".rs"])
        >>> option.include_dirs, option.is_recursive, option.suffixes
        (False, True, ('.rs',))
        >>> ListOption.default().list("/path/that/does/not/exist")
        []
    """

    include_files: bool = True
    include_dirs: bool = True
    include_hidden: bool = True
    include_unhidden: bool = True
    is_recursive: bool = False
    max_level: int = 1
    suffixes: Tuple[str, ...] = ()
    on_permission_error: PermissionAction = PermissionAction.IGNORE
    follow_links: bool = False

    @classmethod
    def default(cls) -> "ListOption":
        """Create a ListOption with the documented default settings."""
        return cls()

    def file(self, if_show: bool) -> "ListOption":
        """Set whether files are listed."""
        return replace(self, include_files=if_show)

    def dir(self, if_show: bool) -> "ListOption":
        """Set whether directories are listed."""
        return replace(self, include_dirs=if_show)

    def hidden(self, if_show: bool) -> "ListOption":
        """Set whether hidden (dot) entries are listed and descended into."""
        return replace(self, include_hidden=if_show)

    def unhidden(self, if_show: bool) -> "ListOption":
        """Set whether non-hidden entries are listed and descended into."""
        return replace(self, include_unhidden=if_show)

    def recursive(self, if_choose: bool) -> "ListOption":
        """Set whether to descend into subdirectories without a depth limit.

        When recursive is enabled the ``max_level`` setting is ignored.
        """
        return replace(self, is_recursive=if_choose)

    def level(self, level: int) -> "ListOption":
        """Set how many levels deep a non-recursive listing goes.

        Args:
            level: 1 lists the direct children of the root, 2 adds their children,
                and so on. 0 lists nothing from a directory root.

        Raises:
            ValueError: If level is not a non-negative integer.
        """
        if isinstance(level, bool) or not isinstance(level, int) or level < 0:
            raise ValueError(f"Level must be a non-negative integer, got {level!r}")
        return replace(self, max_level=level)

    def sufs(self, sufs: Iterable[str]) -> "ListOption":
        """Replace the suffix allow-list.

        Suffixes are used verbatim, so ``sufs([".rs"])`` matches ``main.rs`` and
        ``sufs(["rs"])`` also matches ``cars``. An empty iterable removes the
        suffix restriction.

        Raises:
            TypeError: If a single string is passed instead of an iterable of strings.

        Example:
            >>> ListOption.default().suf(".toml").sufs([".rs", ".md"]).suffixes
            ('.rs', '.md')
        """
        if isinstance(sufs, str):
            raise TypeError("sufs() expects an iterable of suffixes, not a single string")
        return replace(self, suffixes=tuple(sufs))

    def suf(self, suf: str) -> "ListOption":
        """Add one suffix to the allow-list."""
        return replace(self, suffixes=self.suffixes + (suf,))

    def exts(self, exts: Iterable[str]) -> "ListOption":
        """Replace the allow-list with the given extensions (without the dot).

        Example:
            >>> ListOption.default().exts(["rs", "toml"]).suffixes
            ('.rs', '.toml')
        """
        if isinstance(exts, str):
            raise TypeError("exts() expects an iterable of extensions, not a single string")
        return replace(self, suffixes=tuple(f".{ext}" for ext in exts))

    def ext(self, ext: str) -> "ListOption":
        """Add one extension (without the dot) to the allow-list."""
        return replace(self, suffixes=self.suffixes + (f".{ext}",))

    def permission_action(self, action: Union[PermissionAction, str]) -> "ListOption":
        """Set how unreadable directories are handled.

        Args:
            action: A PermissionAction or its string value ("ignore" or "raise").

        Raises:
            ValueError: If action is not a known permission action.
        """
        return replace(self, on_permission_error=PermissionAction(action))

    def follow_symlinks(self, if_follow: bool) -> "ListOption":
        """Set whether symbolic links to directories are descended into.

        Symlinks are always classified by what they point at; this only controls
        descent. No loop detection is performed when following links.
        """
        return replace(self, follow_links=if_follow)

    def matches_kind(self, kind: EntryKind) -> bool:
        if kind is EntryKind.DIRECTORY:
            return self.include_dirs
        return self.include_files

    def matches_visibility(self, name: str) -> bool:
        if is_hidden(name):
            return self.include_hidden
        return self.include_unhidden

    def matches_suffix(self, name: str) -> bool:
        return not self.suffixes or any(name.endswith(suffix) for suffix in self.suffixes)

    def matches(self, name: str, kind: EntryKind) -> bool:
        """Return True if an entry with this base name and kind belongs in the listing."""
        return self.matches_kind(kind) and self.matches_visibility(name) and self.matches_suffix(name)

    def list(self, path: PathType, skipped: Optional[List[Tuple[str, OSError]]] = None) -> List[str]:
        """List the entries under a path that match this configuration.

        If the path is a directory, its children are listed (and their children,
        depending on ``is_recursive`` and ``max_level``). If the path is anything
        else, it is listed itself when it matches. A path that does not exist
        yields an empty list.

        Returned paths are joined onto ``path`` as given, so a relative root gives
        relative results. Entries appear in directory enumeration order, with the
        descendants of a directory directly after it.

        Args:
            path: The root to list. Can be any path-like object.
            skipped: Optional list that receives a (directory, error) pair for every
                directory left out because it could not be read under the IGNORE policy.

        Returns:
            Paths of the matching entries.

        Raises:
            PermissionError: If a directory cannot be read due to permissions and
                ``on_permission_error`` is RAISE.
            OSError: If a directory cannot be read for another reason and
                ``on_permission_error`` is RAISE.

        Example:
            >>> ListOption.default().file(True).dir(False).sufs([".rs"]).list("src")  # doctest: +SKIP
            ['src/lib.rs', 'src/option.rs']
        """
        root = os.fspath(path)
        if not os.path.lexists(root):
            return []
        if not os.path.isdir(root):
            name = os.path.basename(root)
            return [root] if self.matches(name, EntryKind.FILE) else []
        if not self.is_recursive and self.max_level < 1:
            return []

        results: List[str] = []
        # Each frame is the remaining children of one directory and their depth.
        stack: List[Tuple[Iterator["os.DirEntry[str]"], int]] = [(iter(self._read_directory(root, skipped)), 1)]
        while stack:
            entries, depth = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            kind = self._entry_kind(entry)
            if self.matches(entry.name, kind):
                results.append(entry.path)

            if kind is EntryKind.DIRECTORY and self._should_descend(entry, depth):
                stack.append((iter(self._read_directory(entry.path, skipped)), depth + 1))

        return results

    def _entry_kind(self, entry: "os.DirEntry[str]") -> EntryKind:
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        return EntryKind.DIRECTORY if is_dir else EntryKind.FILE

    def _should_descend(self, entry: "os.DirEntry[str]", depth: int) -> bool:
        if not self.is_recursive and depth >= self.max_level:
            return False
        if not self.matches_visibility(entry.name):
            return False
        if entry.is_symlink() and not self.follow_links:
            logger.debug(f"Not descending into symlinked directory: {entry.path}")
            return False
        return True

    def _read_directory(
        self, directory: str, skipped: Optional[List[Tuple[str, OSError]]]
    ) -> List["os.DirEntry[str]"]:
        """Read all entries of one directory, applying the permission policy on failure."""
        try:
            with os.scandir(directory) as iterator:
                return [entry for entry in iterator]
        except OSError as e:
            if self.on_permission_error == PermissionAction.RAISE:
                if isinstance(e, PermissionError):
                    raise PermissionError(f"Access denied to {directory}: {e}") from e
                raise
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            if skipped is not None:
                skipped.append((directory, e))
        return []
