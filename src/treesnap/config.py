"""Run configuration and the parsers that build it from operator answers.

A Configuration is created once per run and never changes afterwards. The
parsers raise InvalidFormatError or InvalidDepthError on bad input; choosing a
fallback is left to the caller.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from treesnap.exceptions import InvalidDepthError, InvalidFormatError
from treesnap.exclusion_rules.name_rules import DEFAULT_IGNORE_NAMES, NameExclusionRules
from treesnap.file_system_tree.file_system_tree import DEFAULT_MAX_DEPTH
from treesnap.types import OutputFormat

UNLIMITED_DEPTH_KEYWORD = "all"


@dataclass(frozen=True)
class Configuration:
    """Immutable settings for one snapshot run.

    Attributes:
        output_format: Format to render, or OutputFormat.ALL for every format.
        max_depth: Deepest level (root entries = 0) whose children are listed.
            None means unlimited.
        ignore_names: Entry base names to exclude, matched exactly.

    Example:
        >>> config = Configuration(OutputFormat.TEXT, max_depth=0, ignore_names=frozenset({"b"}))
        >>> [fmt.value for fmt in config.selected_formats()]
        ['text']
        >>> config.exclusion_rules().exclude("b")
        True
    """

    output_format: OutputFormat = OutputFormat.ALL
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    ignore_names: FrozenSet[str] = field(default_factory=lambda: frozenset(DEFAULT_IGNORE_NAMES))

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise InvalidDepthError(str(self.max_depth))

    def selected_formats(self) -> List[OutputFormat]:
        """Expand the configured format into the concrete formats to render, in order."""
        if self.output_format is OutputFormat.ALL:
            return OutputFormat.concrete()
        return [self.output_format]

    def exclusion_rules(self) -> NameExclusionRules:
        return NameExclusionRules(self.ignore_names)


def parse_format(value: str) -> OutputFormat:
    """Parse an output format name.

    Surrounding whitespace is ignored and matching is case-insensitive.

    Args:
        value: The raw format answer, e.g. " JSON ".

    Returns:
        The matching OutputFormat.

    Raises:
        InvalidFormatError: If the name is not one of json, html, markdown, text, all.

    Example:
        >>> parse_format(" Markdown ")
        <OutputFormat.MARKDOWN: 'markdown'>
    """
    normalized = value.strip().lower()
    try:
        return OutputFormat(normalized)
    except ValueError:
        raise InvalidFormatError(normalized)


def parse_max_depth(value: str) -> Optional[int]:
    """Parse a maximum depth answer.

    Args:
        value: The raw depth answer. Blank input selects DEFAULT_MAX_DEPTH, the
            keyword "all" (any case) selects unlimited depth, and anything else must
            be a non-negative integer.

    Returns:
        The depth, or None for unlimited.

    Raises:
        InvalidDepthError: If the value is neither blank, the keyword, nor a
            non-negative integer.

    Example:
        >>> parse_max_depth("5")
        5
        >>> parse_max_depth("ALL") is None
        True
        >>> parse_max_depth("  ")
        3
    """
    normalized = value.strip()
    # Blank selects the default without raising
    if not normalized:
        return DEFAULT_MAX_DEPTH
    if normalized.lower() == UNLIMITED_DEPTH_KEYWORD:
        return None
    try:
        depth = int(normalized)
    except ValueError:
        raise InvalidDepthError(normalized)
    if depth < 0:
        raise InvalidDepthError(normalized)
    return depth


def parse_ignore_list(value: str) -> FrozenSet[str]:
    """Parse a comma separated ignore list.

    Blank input selects DEFAULT_IGNORE_NAMES. Otherwise the input is split on
    commas and each name is trimmed; empty names (from ``"a,,b"`` or a trailing
    comma) are kept as literal entries.

    Example:
        >>> sorted(parse_ignore_list(" venv , .tox"))
        ['.tox', 'venv']
        >>> sorted(parse_ignore_list("a,"))
        ['', 'a']
    """
    if not value.strip():
        return frozenset(DEFAULT_IGNORE_NAMES)
    return frozenset(name.strip() for name in value.split(","))
