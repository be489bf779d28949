from enum import Enum
from os import PathLike
from typing import List, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class OutputFormat(str, Enum):
    """Enumeration of the output formats a snapshot can be rendered in.

    ALL is a selector rather than a format of its own: it stands for every
    concrete format, rendered in declaration order.

    Attributes:
        JSON: Nested array of ``{name, children}`` objects
        HTML: Nested ``<ul>``/``<li>`` lists
        MARKDOWN: Indented bullet list
        TEXT: Box-drawing connector tree
        ALL: Every format above
    """

    JSON = "json"
    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"
    ALL = "all"

    @classmethod
    def concrete(cls) -> List["OutputFormat"]:
        """Return every format except the ALL selector, in dispatch order."""
        return [fmt for fmt in cls if fmt is not cls.ALL]
