"""Command-line argument parsing for treesnap.

This module defines the command-line interface for treesnap. Everything except
the root directory is asked for interactively once parsing succeeds.
"""

import argparse
from pathlib import Path

from treesnap import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with treesnap's options.
    """
    description = """
    treesnap: A utility for sharing a snapshot of a project's directory structure.

    After starting, treesnap asks three questions:
    - the output format (html, json, markdown, text, or all)
    - the maximum depth to descend (a number, or 'all' for unlimited; default 3)
    - a comma separated list of file and directory names to ignore
      (default: node_modules, .git, dist, build)

    The snapshot is written to the 'outtree' directory under the current working
    directory as tree.json, tree.html, tree.md and/or tree.txt.
    """

    epilog = """
    Examples:
      # Snapshot the current directory
      treesnap

      # Snapshot another directory
      treesnap /path/to/project

      # Answer the prompts from a pipe: text format, depth 2, ignore .venv
      printf 'text\\n2\\n.venv\\n' | treesnap /path/to/project

      # Display version information and exit
      treesnap -V
      treesnap --version
    """

    parser = argparse.ArgumentParser(
        prog="treesnap",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"treesnap {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to snapshot (default: the current working directory).",
    )

    return parser
