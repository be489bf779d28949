"""JSON output strategy for snapshot trees.

This module provides a strategy for rendering a snapshot tree as a nested JSON
array, one object per entry.
"""

import json
from typing import Any, Dict, List

from treesnap.file_system_tree.tree_node import TreeNode

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that renders the tree as a JSON array of entry objects.

    Each entry is rendered as an object with the following structure:
    {
        "name": "entry name",
        "children": [...]  # Only for directories
    }

    The ``children`` key is present if and only if the entry is a directory. A
    directory beyond the depth limit, or one that could not be listed, carries an
    empty array. Files never carry the key.

    Output uses two-space indentation, keeps non-ASCII names verbatim, and has no
    trailing newline.

    Example:
        >>> root = TreeNode("project", is_dir=True, expanded=True)
        >>> _ = TreeNode("a.txt", parent=root)
        >>> _ = TreeNode("b", parent=root, is_dir=True)
        >>> print(JSONOutputStrategy().render(root))
        [
          {
            "name": "a.txt"
          },
          {
            "name": "b",
            "children": []
          }
        ]
    """

    @property
    def format_name(self) -> str:
        return "json"

    def to_data(self, node: TreeNode) -> Dict[str, Any]:
        """Convert one entry and its descendants to JSON-ready data.

        Args:
            node: The entry to convert.

        Returns:
            A dictionary with a "name" key and, for directories, a "children" list.
        """
        data: Dict[str, Any] = {"name": node.name}
        if node.is_dir:
            data["children"] = [self.to_data(child) for child in node.children]
        return data

    def render(self, root: TreeNode) -> str:
        entries: List[Dict[str, Any]] = [self.to_data(child) for child in root.children]
        return json.dumps(entries, indent=2, ensure_ascii=False)

    def get_file_extension(self) -> str:
        """Get the file extension for JSON output.

        Returns:
            str: The string ".json".
        """
        return ".json"
