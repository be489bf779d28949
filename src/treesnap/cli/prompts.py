"""Interactive configuration prompts for the treesnap CLI.

This module asks the operator for the output format, the maximum depth and the
ignore list, in that order, and turns the answers into a Configuration. Invalid
answers never abort the run: a warning is printed and a default is used.
"""

from typing import Callable, Optional

from treesnap.config import Configuration, parse_format, parse_ignore_list, parse_max_depth
from treesnap.exceptions import InvalidDepthError, InvalidFormatError
from treesnap.file_system_tree.file_system_tree import DEFAULT_MAX_DEPTH
from treesnap.types import OutputFormat

FORMAT_PROMPT = "Enter output format (html, json, markdown, text, all): "
DEPTH_PROMPT = "Enter maximum depth (or 'all' for unlimited): "
IGNORE_PROMPT = (
    "Enter comma separated list of directories/files to ignore (default: node_modules, .git, dist, build): "
)

InputFunc = Callable[[str], str]


def ask(prompt: str, input_func: Optional[InputFunc] = None) -> str:
    """Ask one question, treating end of input as a blank answer."""
    if input_func is None:
        input_func = input
    try:
        return input_func(prompt)
    except EOFError:
        return ""


def prompt_format(input_func: Optional[InputFunc] = None) -> OutputFormat:
    answer = ask(FORMAT_PROMPT, input_func)
    try:
        return parse_format(answer)
    except InvalidFormatError as e:
        print(f"Warning: {str(e)}. Using '{OutputFormat.ALL.value}' as default.")
        return OutputFormat.ALL


def prompt_max_depth(input_func: Optional[InputFunc] = None) -> Optional[int]:
    """Ask for the maximum depth.

    A blank answer selects DEFAULT_MAX_DEPTH without a warning; only an answer that
    cannot be parsed prints a warning before falling back to the same default.

    Returns:
        The depth, or None for unlimited.
    """
    answer = ask(DEPTH_PROMPT, input_func)
    try:
        return parse_max_depth(answer)
    except InvalidDepthError as e:
        print(f"Warning: {str(e)}. Using {DEFAULT_MAX_DEPTH} as default.")
        return DEFAULT_MAX_DEPTH


def configure(input_func: Optional[InputFunc] = None) -> Configuration:
    """Run the three prompts and build the run configuration.

    Args:
        input_func: Function used to read each answer. Defaults to the builtin input,
            looked up at call time.

    Returns:
        The configuration assembled from the answers.
    """
    output_format = prompt_format(input_func)
    max_depth = prompt_max_depth(input_func)
    ignore_names = parse_ignore_list(ask(IGNORE_PROMPT, input_func))
    return Configuration(output_format=output_format, max_depth=max_depth, ignore_names=ignore_names)
