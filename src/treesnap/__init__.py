"""Directory tree snapshot utilities.

This package provides tools for walking a directory structure and rendering it
as JSON, HTML, Markdown or a plain-text tree for sharing.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treesnap")
except PackageNotFoundError:
    __version__ = "unknown"
