"""Output strategy base class defining the interface for tree rendering.

This module provides the abstract base class that defines how a built snapshot
tree is turned into text. It establishes the contract that concrete strategies
must follow, including the name of the file each format is saved under.
"""

from abc import ABC, abstractmethod

from treesnap.file_system_tree.tree_node import TreeNode

OUTPUT_FILE_STEM = "tree"


class OutputStrategy(ABC):
    """Abstract base class defining the interface for tree rendering strategies.

    This class implements the Strategy pattern for rendering a snapshot tree in
    different formats (JSON, HTML, Markdown, text). Rendering is a pure function of
    the tree: the root node itself is never rendered, only its descendants.

    Every strategy must render a directory without children (empty, excluded away,
    unlistable or beyond the depth limit) without error markers.

    Example:
        >>> class CsvStrategy(OutputStrategy):
        ...     @property
        ...     def format_name(self) -> str:
        ...         return "csv"
        ...
        ...     def render(self, root: TreeNode) -> str:
        ...         return "".join(f"{child.name},{int(child.is_dir)}\\n" for child in root.children)
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".csv"
        >>> CsvStrategy().get_file_name()
        'tree.csv'
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """The user-facing name of the format, as typed at the format prompt."""
        pass

    @abstractmethod
    def render(self, root: TreeNode) -> str:
        """Render the descendants of a snapshot root.

        Args:
            root: Root node of a built tree. Its children are the top-level entries.

        Returns:
            The complete rendered output.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".json", ".md").
        """
        pass

    def get_file_name(self) -> str:
        """Get the name of the file this format is written to.

        Returns:
            The fixed output file name, e.g. "tree.json".
        """
        return f"{OUTPUT_FILE_STEM}{self.get_file_extension()}"
