"""Post-processing of rendered trees for display and copying."""

import re

COLOR_MARKER_PATTERN = re.compile(r"<#[0-9A-Fa-f]{6}>|</#>")


def strip_color_markers(text: str) -> str:
    """Remove ``<#RRGGBB>`` and ``</#>`` color tags from text.

    Example:
        >>> strip_color_markers("<#ff0000>src</#>/main.go")
        'src/main.go'
    """
    return COLOR_MARKER_PATTERN.sub("", text)


def to_markdown(tree: str) -> str:
    """Wrap a rendered tree in a Markdown document with a fenced code block.

    Example:
        >>> print(to_markdown("project\\n└── README.md\\n"), end="")
        # Directory Tree
        <BLANKLINE>
        ```
        project
        └── README.md
        ```
    """
    body = tree.rstrip("\n")
    return f"# Directory Tree\n\n```\n{body}\n```\n"
