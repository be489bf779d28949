"""Output file writing for the treesnap CLI.

This module persists rendered snapshots into the fixed output directory, one
file per format.
"""

from pathlib import Path

from treesnap.types import PathType

OUTPUT_DIRNAME = "outtree"
OUTPUT_ENCODING = "utf-8"


class OutputWriter:
    """Writes rendered snapshots into an output directory.

    The directory is created, with any missing parents, when the writer is
    built, so a snapshot of the working directory lists it the same way in every
    format. Existing files of the same name are overwritten. Content is written
    as UTF-8 and newlines are written as-is on every platform.

    Entry names that are not valid UTF-8 on disk reach the renderers as lone
    surrogates; they are written with the replacement character instead of
    failing the run. Content is encoded before the file is opened, so an
    existing file is never truncated by an encoding problem.

    Errors are not handled here: a directory that cannot be created or a file that
    cannot be written raises OSError to the caller.

    Attributes:
        output_dir (Path): Directory the files are written into.
    """

    def __init__(self, output_dir: PathType) -> None:
        """Initialize the writer and create its output directory.

        Raises:
            OSError: If the directory cannot be created.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def for_working_directory(cls) -> "OutputWriter":
        """Create a writer targeting ``outtree`` under the current working directory."""
        return cls(Path.cwd() / OUTPUT_DIRNAME)

    def write(self, file_name: str, content: str) -> Path:
        """Write one rendered snapshot.

        Args:
            file_name: Name of the file inside the output directory, e.g. "tree.json".
            content: The full rendered output.

        Returns:
            The path of the written file.

        Raises:
            OSError: If the file cannot be written.
        """
        data = content.encode(OUTPUT_ENCODING, errors="replace")
        path = self.output_dir / file_name
        with path.open("wb") as f:
            f.write(data)
        return path
