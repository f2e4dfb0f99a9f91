"""Tree view of a flat listing.

ListOption.list returns a flat list of paths. This module rebuilds the
hierarchy from such a list so it can be shown like the Unix ``tree`` command.
"""

import os
from typing import Any, Collection, Dict, Iterable, Iterator, Optional, Tuple

from anytree import Node, RenderTree

from ls_option.types import PathType


class ListingNode(Node):  # type: ignore
    """Node representing one path segment of a listing.

    Extends anytree.Node with a directory flag and the full path of the entry.
    Intermediate directories that were only needed to connect listed entries to
    the root have ``listed_path`` set to None.

    Attributes:
        name (str): The base name of the entry.
        parent (Optional[ListingNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.
        listed_path (Optional[str]): The listed path, or None for connecting nodes.

    Example:
        >>> root = ListingNode("src", is_dir=True)
        >>> child = ListingNode("main.rs", parent=root, listed_path="src/main.rs")
        >>> child.is_dir, child.listed_path
        (False, 'src/main.rs')
    """

    def __init__(
        self,
        name: str,
        parent: Optional["ListingNode"] = None,
        is_dir: bool = False,
        listed_path: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.listed_path = listed_path

    @property
    def is_listed(self) -> bool:
        return self.listed_path is not None


def _split_relative(root: str, path: str) -> Tuple[str, ...]:
    relative = os.path.relpath(path, root)
    return tuple(part for part in relative.split(os.sep) if part and part != os.curdir)


def build_listing_tree(root: PathType, paths: Iterable[str], dirs: Collection[str] = ()) -> ListingNode:
    """Build a tree of ListingNode objects from a flat listing.

    Args:
        root: The path that was passed to ListOption.list.
        paths: Paths returned by ListOption.list.
        dirs: The subset of ``paths`` that are directories. Paths that are not in
            this collection are checked on disk with os.path.isdir.

    Returns:
        The root node, named after the base name of ``root``. When ``root`` is
        an existing file the root node is a leaf.

    Example:
        >>> tree = build_listing_tree("root", ["root/sub", "root/sub/b.rs"], dirs={"root/sub"})
        >>> [node.name for node in tree.descendants]
        ['sub', 'b.rs']
    """
    root_str = os.fspath(root)
    root_name = os.path.basename(os.path.normpath(os.path.abspath(root_str)))
    # A root that was listed as a single file stays a leaf.
    root_is_dir = os.path.isdir(root_str) or not os.path.lexists(root_str)
    root_node = ListingNode(root_name or root_str, is_dir=root_is_dir)
    nodes: Dict[Tuple[str, ...], ListingNode] = {(): root_node}

    for path in paths:
        parts = _split_relative(root_str, path)
        if not parts:
            root_node.listed_path = path
            continue
        parent = root_node
        for depth in range(1, len(parts)):
            key = parts[:depth]
            if key not in nodes:
                nodes[key] = ListingNode(parts[depth - 1], parent=parent, is_dir=True)
            parent = nodes[key]

        is_dir = path in dirs or os.path.isdir(path)
        node = nodes.get(parts)
        if node is None:
            nodes[parts] = ListingNode(parts[-1], parent=parent, is_dir=is_dir, listed_path=path)
        else:
            # Created earlier as a connecting node for one of its descendants.
            node.listed_path = path

    return root_node


def _sort_children(children: Iterable[ListingNode]) -> Iterable[ListingNode]:
    return sorted(children, key=lambda n: (not n.is_dir, n.name.lower()))


def render_listing_tree(node: ListingNode) -> Iterator[str]:
    """Generate the tree representation one line at a time.

    Directories come first, then files, both ordered case-insensitively, and
    directories are marked with a trailing slash.

    Example:
        >>> tree = build_listing_tree("root", ["root/x.rs", "root/sub"], dirs={"root/sub"})
        >>> print("\\n".join(render_listing_tree(tree)))
        root/
        ├── sub/
        └── x.rs
    """
    for prefix, _, current in RenderTree(node, childiter=_sort_children):
        suffix = "/" if current.is_dir else ""
        yield f"{prefix}{current.name}{suffix}"
