class InvalidFormatError(ValueError):
    """
    Exception raised when an output format name is not recognized.

    The interactive configurator catches this error and falls back to rendering
    every format, so it only surfaces to library callers that parse format names
    themselves.

    Attributes:
        value (str): The rejected format name, as supplied.

    Example:
        >>> error = InvalidFormatError("xml")
        >>> str(error)
        "Invalid output format: 'xml'"
    """

    def __init__(self, value: str) -> None:
        """
        Initialize the exception with the rejected format name.

        Args:
            value (str): The format name that failed to parse.
        """
        self.value = value
        super().__init__(f"Invalid output format: {value!r}")


class InvalidDepthError(ValueError):
    """
    Exception raised when a maximum depth value cannot be parsed.

    Valid depths are non-negative integers or the unlimited-depth keyword.

    Attributes:
        value (str): The rejected depth value, as supplied.

    Example:
        >>> error = InvalidDepthError("deep")
        >>> str(error)
        "Invalid maximum depth: 'deep'"
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid maximum depth: {value!r}")
