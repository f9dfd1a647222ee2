"""Source filter tree utilities.

This package merges flat lists of source-path rules into a hierarchical tree
of path components and tracks which parts of that tree are covered by a
recursive rule, as needed by project generators that let users pick the
source paths included in a generated project.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("srcfilter")
except PackageNotFoundError:
    __version__ = "unknown"
