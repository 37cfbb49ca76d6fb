"""Tests for presentation helpers."""

from dirtree.presentation import strip_color_markers, to_markdown


def test_strip_color_markers():
    text = "project\n├── <#FF00aa>src</#>\n└── README.md\n"
    assert strip_color_markers(text) == "project\n├── src\n└── README.md\n"


def test_strip_color_markers_leaves_other_tags():
    assert strip_color_markers("<#12345>a</b>") == "<#12345>a</b>"
    assert strip_color_markers("<#GGGGGG>x") == "<#GGGGGG>x"


def test_to_markdown_wraps_tree_in_code_block():
    assert to_markdown("root\n└── a.txt\n") == "# Directory Tree\n\n```\nroot\n└── a.txt\n```\n"


def test_to_markdown_without_trailing_newline():
    assert to_markdown("root") == "# Directory Tree\n\n```\nroot\n```\n"
