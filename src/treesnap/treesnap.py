"""Directory snapshot rendering.

This module ties the file system walk to the output strategies. A TreeSnapshot
walks its directory again for every render, so each format reflects the
filesystem at the moment it is produced.
"""

from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Type

from treesnap.config import Configuration
from treesnap.file_system_tree.file_system_tree import FileSystemTree
from treesnap.output_strategies.base_strategy import OutputStrategy
from treesnap.output_strategies.html_strategy import HTMLOutputStrategy
from treesnap.output_strategies.json_strategy import JSONOutputStrategy
from treesnap.output_strategies.markdown_strategy import MarkdownOutputStrategy
from treesnap.output_strategies.text_strategy import TextOutputStrategy
from treesnap.types import OutputFormat, PathType

_STRATEGIES: Dict[OutputFormat, Type[OutputStrategy]] = {
    OutputFormat.JSON: JSONOutputStrategy,
    OutputFormat.HTML: HTMLOutputStrategy,
    OutputFormat.MARKDOWN: MarkdownOutputStrategy,
    OutputFormat.TEXT: TextOutputStrategy,
}


def create_strategy(output_format: OutputFormat) -> OutputStrategy:
    """Create the output strategy for a concrete format.

    Args:
        output_format: Any format except OutputFormat.ALL.

    Returns:
        A new strategy instance.

    Raises:
        ValueError: If output_format is OutputFormat.ALL or otherwise unsupported.
    """
    try:
        return _STRATEGIES[OutputFormat(output_format)]()
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}")


class TreeSnapshot:
    """Renders the structure of one directory according to a Configuration.

    Note:
        The doctest examples are marked with SKIP because they require a specific
        filesystem structure.

    Attributes:
        directory (Path): Root directory being snapshotted.
        config (Configuration): Format, depth and ignore settings for the run.

    Example:
        >>> snapshot = TreeSnapshot("project", Configuration(OutputFormat.TEXT))  # doctest: +SKIP
        >>> print(snapshot.render(OutputFormat.TEXT), end="")  # doctest: +SKIP
        ├── a.txt
        └── b
          └── c.txt
    """

    def __init__(self, directory: PathType, config: Optional[Configuration] = None) -> None:
        """Initialize the snapshot.

        Args:
            directory: Directory to snapshot. It is not required to exist; a missing
                directory renders as an empty tree.
            config: Run settings. Defaults to Configuration().
        """
        self.directory = Path(directory)
        self.config = config if config is not None else Configuration()

    def build_tree(self) -> FileSystemTree:
        """Create a fresh, unbuilt FileSystemTree for this snapshot's settings."""
        return FileSystemTree(self.directory, self.config.exclusion_rules(), self.config.max_depth)

    def render(self, output_format: OutputFormat) -> str:
        """Walk the directory and render it in one concrete format.

        Raises:
            ValueError: If output_format is OutputFormat.ALL.
        """
        strategy = create_strategy(output_format)
        return strategy.render(self.build_tree().get_tree())

    def render_selected(self) -> Iterator[Tuple[OutputStrategy, str]]:
        """Render every format selected by the configuration, one after another.

        Each format is rendered from its own walk, and only when the iterator is
        advanced to it.

        Yields:
            Pairs of (strategy, rendered output) in dispatch order.
        """
        for output_format in self.config.selected_formats():
            strategy = create_strategy(output_format)
            yield strategy, strategy.render(self.build_tree().get_tree())
