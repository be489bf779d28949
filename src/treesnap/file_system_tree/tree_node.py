"""Node representation for file system entries in the tree."""

from typing import Any, Optional

from anytree import Node


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in the snapshot tree.

    Extends anytree.Node with a flag telling directories from files and a flag
    recording whether a directory was expanded, i.e. whether it lay within the
    depth bound so that its listing was attempted. Inherits tree traversal
    capabilities (children, depth, iteration) from anytree.Node.

    A directory that is expanded but has no children is either empty, fully
    excluded, or could not be listed; renderers treat all three the same way.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[TreeNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.
        expanded (bool): True if the directory's children were looked up.
        children (tuple[TreeNode]): The child nodes, in listing order (inherited).

    Example:
        >>> root = TreeNode("project", is_dir=True, expanded=True)
        >>> child = TreeNode("a.txt", parent=root)
        >>> [node.name for node in root.children]
        ['a.txt']
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        is_dir: bool = False,
        expanded: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The base name of the file or directory.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            expanded: Whether the directory's children were looked up. Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.expanded = expanded
