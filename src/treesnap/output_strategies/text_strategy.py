"""Plain-text output strategy for snapshot trees.

This module provides a strategy for rendering a snapshot tree with box-drawing
connectors, similar to the Unix ``tree`` command but with a fixed two-space
indent per level.
"""

from typing import Iterator

from treesnap.file_system_tree.tree_node import TreeNode

from .base_strategy import OutputStrategy

INDENT = "  "
BRANCH = "├── "
LAST_BRANCH = "└── "


class TextOutputStrategy(OutputStrategy):
    """Output strategy that renders the tree with box-drawing connectors.

    Each entry becomes one line: two spaces per depth level, a connector and the
    entry name. The last entry of every listing uses ``└── ``; all others use
    ``├── ``. A directory's entries follow it directly, one level deeper.

    Example:
        >>> root = TreeNode("project", is_dir=True, expanded=True)
        >>> _ = TreeNode("a.txt", parent=root)
        >>> b = TreeNode("b", parent=root, is_dir=True, expanded=True)
        >>> _ = TreeNode("c.txt", parent=b)
        >>> print(TextOutputStrategy().render(root), end="")
        ├── a.txt
        └── b
          └── c.txt
    """

    @property
    def format_name(self) -> str:
        return "text"

    def stream_lines(self, node: TreeNode, depth: int = 0) -> Iterator[str]:
        """Generate the rendered lines for the entries below ``node``.

        Args:
            node: Directory node whose children are rendered.
            depth: Indentation level of those children.

        Yields:
            One line per entry, each ending with a newline.
        """
        children = node.children
        for i, child in enumerate(children):
            connector = LAST_BRANCH if i == len(children) - 1 else BRANCH
            yield f"{INDENT * depth}{connector}{child.name}\n"
            if child.is_dir:
                yield from self.stream_lines(child, depth + 1)

    def render(self, root: TreeNode) -> str:
        return "".join(self.stream_lines(root))

    def get_file_extension(self) -> str:
        return ".txt"
