"""Directory tree construction and rendering.

This package lists a directory recursively into a tree of DirectoryEntry nodes and
renders that tree as indented text.
"""

from .directory_entry import DirectoryEntry
from .tree_builder import TreeBuilder, TreeSummary, render_tree

__all__ = ["DirectoryEntry", "TreeBuilder", "TreeSummary", "render_tree"]
