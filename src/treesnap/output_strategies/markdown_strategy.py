"""Markdown output strategy for snapshot trees."""

from anytree import PreOrderIter

from treesnap.file_system_tree.tree_node import TreeNode

from .base_strategy import OutputStrategy

INDENT = "  "


class MarkdownOutputStrategy(OutputStrategy):
    """Output strategy that renders the tree as an indented Markdown bullet list.

    Each entry becomes one line made of two spaces per depth level, a ``- `` bullet
    and the entry name. A directory's entries follow it directly, one level deeper.

    Example:
        >>> root = TreeNode("project", is_dir=True, expanded=True)
        >>> b = TreeNode("b", parent=root, is_dir=True, expanded=True)
        >>> _ = TreeNode("c.txt", parent=b)
        >>> print(MarkdownOutputStrategy().render(root), end="")
        - b
          - c.txt
    """

    @property
    def format_name(self) -> str:
        return "markdown"

    def render(self, root: TreeNode) -> str:
        lines = []
        # Pre-order iteration visits siblings in listing order
        for node in PreOrderIter(root):
            if node is root:
                continue
            lines.append(f"{INDENT * (node.depth - 1)}- {node.name}\n")
        return "".join(lines)

    def get_file_extension(self) -> str:
        return ".md"
