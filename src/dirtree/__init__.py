"""Directory tree rendering utilities.

This package renders a directory's structure as an indented, ``tree``-style
text block, with depth limits, name exclusions and optional size annotations.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"
