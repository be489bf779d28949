"""Command-line interface for treesnap.

This module provides the command-line entry point: it parses the root directory
argument, asks the operator for the run configuration, renders each selected
format and writes it to the output directory.

Exit Codes:
    0: Successful completion
    1: Runtime error, e.g. the output directory is not writable
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Snapshot the current directory
    $ treesnap
    Enter output format (html, json, markdown, text, all): text
    Enter maximum depth (or 'all' for unlimited): 2
    Enter comma separated list of directories/files to ignore (default: node_modules, .git, dist, build):
    ✅ text output written to /home/user/project/outtree/tree.txt
"""

import sys

from treesnap.cli.argparser import create_parser
from treesnap.cli.output_writer import OutputWriter
from treesnap.cli.prompts import configure
from treesnap.treesnap import TreeSnapshot


def main() -> None:
    """Main entry point for the treesnap command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    try:
        parser = create_parser()
        # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
        args = parser.parse_args()

        # Created before prompting so every format lists the same working directory entries
        writer = OutputWriter.for_working_directory()
        config = configure()
        snapshot = TreeSnapshot(args.directory, config)

        for strategy, content in snapshot.render_selected():
            path = writer.write(strategy.get_file_name(), content)
            print(f"✅ {strategy.format_name} output written to {path}")

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
