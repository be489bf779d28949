"""File system tree representation with depth limits and exclusion rules.

This module provides the main FileSystemTree class for building tree
representations of directory structures. The walk is best effort: entries that
cannot be listed or inspected degrade to empty directories or plain leaves
instead of failing the whole snapshot.
"""

import os
from pathlib import Path
from typing import Optional

from treesnap.exclusion_rules.base_rules import BaseExclusionRules
from treesnap.file_system_tree.tree_node import TreeNode
from treesnap.types import PathType

DEFAULT_MAX_DEPTH = 3


class FileSystemTree:
    """A depth-bounded tree representation of a directory structure.

    The root directory sits at depth 0 and its entries are always listed. A
    directory found at depth ``d`` has its own entries listed only while
    ``d + 1 <= max_depth``; deeper directories still appear in the tree but are
    left unexpanded. A ``max_depth`` of None walks without limit.

    Siblings keep the order returned by the directory listing. Entries excluded
    by the exclusion rules are dropped together with everything below them.

    Error Handling:
        - A directory that cannot be listed (permissions, vanished, not a
          directory) gets no children.
        - An entry whose type cannot be determined is treated as a file.
        - A missing or non-directory root yields a root without children.

    Attributes:
        root_path (Path): The root directory being represented.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for hiding entries.
        max_depth (Optional[int]): Deepest level whose children are listed.

    Example:
        >>> tree = FileSystemTree(".", max_depth=1)  # doctest: +SKIP
        >>> [node.name for node in tree.get_tree().children]  # doctest: +SKIP
        ['README.md', 'src']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
            exclusion_rules: Rules for excluding entries. Defaults to None (nothing excluded).
            max_depth: Deepest level whose children are listed, or None for no limit.
                Defaults to DEFAULT_MAX_DEPTH.

        Raises:
            ValueError: If max_depth is negative.
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative or None, got {max_depth}")
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.max_depth = max_depth
        self._tree: Optional[TreeNode] = None

    def get_tree(self) -> TreeNode:
        """Get the root node of the tree, building it on first access.

        Returns:
            The root node. Its children are the visible entries of the root directory.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        """Build the tree from the root path."""
        name = self.root_path.resolve().name or str(self.root_path)
        root = TreeNode(name, is_dir=True)
        self._walk(root, self.root_path, 0)
        self._tree = root

    def _walk(self, node: TreeNode, path: Path, depth: int) -> None:
        """Attach the visible entries of ``path`` to ``node``, recursing into directories.

        ``depth`` is the level of the entries being listed: 0 for the root's own entries.
        """
        if self.max_depth is not None and depth > self.max_depth:
            return
        node.expanded = True

        try:
            names = os.listdir(path)
        except OSError:
            return

        if self.exclusion_rules is not None:
            names = self.exclusion_rules.filter_names(names)

        for name in names:
            child_path = path / name
            try:
                is_dir = child_path.is_dir()
            except OSError:
                is_dir = False

            child = TreeNode(name, parent=node, is_dir=is_dir)
            if is_dir:
                self._walk(child, child_path, depth + 1)
