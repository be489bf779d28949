"""HTML output strategy for snapshot trees.

This module provides a strategy for rendering a snapshot tree as nested
unordered lists. The output is a fragment: there is no surrounding document.
"""

from typing import List

from treesnap.file_system_tree.tree_node import TreeNode

from .base_strategy import OutputStrategy


class HTMLOutputStrategy(OutputStrategy):
    """Output strategy that renders the tree as nested ``<ul>``/``<li>`` lists.

    Every listed directory level becomes a ``<ul>`` block. Files are rendered on a
    single line; a directory opens its ``<li>`` on one line, is followed by its
    nested block if it was expanded, and is closed on its own line:

        <ul>
        <li>a.txt</li>
        <li>b
        <ul>
        <li>c.txt</li>
        </ul>
        </li>
        </ul>

    A directory beyond the depth limit has no nested block. An expanded directory
    without children (empty, excluded away or unlistable) has an empty one.

    Note:
        Entry names are inserted verbatim, without HTML escaping, so a name such as
        ``a<b>.txt`` produces markup.
    """

    @property
    def format_name(self) -> str:
        return "html"

    def _render_level(self, node: TreeNode) -> List[str]:
        parts = ["<ul>\n"]
        for child in node.children:
            if child.is_dir:
                parts.append(f"<li>{child.name}\n")
                if child.expanded:
                    parts.extend(self._render_level(child))
                parts.append("</li>\n")
            else:
                parts.append(f"<li>{child.name}</li>\n")
        parts.append("</ul>\n")
        return parts

    def render(self, root: TreeNode) -> str:
        return "".join(self._render_level(root))

    def get_file_extension(self) -> str:
        return ".html"
