"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirtree import __version__
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.preferences import DEPTH_ENV_VAR, EXCLUDED_DIRS_ENV_VAR, split_names


def create_ignore_action(ignore_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds ignore patterns into an exclusion rules object.

    Patterns given with -i/--ignore and files given with --ignore-file are applied
    in the order they appear on the command line, so a later ``!pattern`` can
    re-include what an earlier file excluded.

    Args:
        ignore_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class IgnoreRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string == "--ignore-file":
                ignore_rules.load_rules(Path(str(values)))
            else:
                ignore_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return IgnoreRulesAction


class NameListAction(argparse.Action):
    """Collect comma-separated names from a repeatable option into one flat list."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        names = list(getattr(namespace, self.dest, None) or [])
        names.extend(split_names(str(values)) if values is not None else [])
        setattr(namespace, self.dest, names)


def create_parser(ignore_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        ignore_rules: The exclusion rules object updated by -i/--ignore and --ignore-file.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: render a directory as an indented tree, like the Unix 'tree' command.

    Hidden entries (names starting with '.') are never shown. Names excluded with
    -x/--exclude are skipped at every depth together with everything below them.
    Sizes are those reported by the filesystem for each entry; for a directory
    that is the size of the directory itself, not of its contents.
    """

    epilog = f"""
    Defaults:
      {DEPTH_ENV_VAR}          default for -d/--depth (2 if unset)
      {EXCLUDED_DIRS_ENV_VAR}  names always excluded (".git,node_modules" if unset)

    Examples:
      # Two levels, sizes shown
      dirtree /path/to/project

      # Everything, no sizes
      dirtree -d -1 --show-size false /path/to/project

      # Skip more names (repeatable, comma-separated)
      dirtree -x dist,build -x coverage /path/to/project

      # Skip by gitignore-style pattern or file
      dirtree -i "*.pyc" --ignore-file .gitignore /path/to/project

      # Alphabetical order, as Markdown, into a file
      dirtree --sort -f markdown -o TREE.md /path/to/project

      # Print entry counts to stderr
      dirtree -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    IgnoreAction = create_ignore_action(ignore_rules)

    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to render.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        metavar="N",
        help="Maximum depth to render, -1 for unlimited. 0 and 1 both show only the direct children.",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        metavar="NAMES",
        action=NameListAction,
        default=[],
        help="Comma-separated entry names to exclude at every depth (can be specified multiple times).",
    )
    parser.add_argument(
        "--no-default-excludes",
        action="store_true",
        help=f"Do not exclude the default names from {EXCLUDED_DIRS_ENV_VAR}.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        dest="ignore",
        action=IgnoreAction,
        help="Gitignore-style pattern to exclude, matched against paths relative to DIRECTORY.",
    )
    parser.add_argument(
        "--ignore-file",
        metavar="FILE",
        dest="ignore",
        action=IgnoreAction,
        help="File of gitignore-style patterns to exclude (can be specified multiple times).",
    )
    parser.add_argument(
        "--show-size",
        metavar="{true,false}",
        help="Append the size of each entry; anything but 'false' enables it (default: true).",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort entries by name instead of keeping the filesystem's listing order.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "markdown"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--strip-markers",
        action="store_true",
        help="Remove <#RRGGBB> and </#> color markers from the output.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print directory and file counts. Valid destinations: stderr, stdout",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.depth is not None and args.depth < -1:
        raise ValueError("--depth must be -1 (unlimited) or a non-negative integer")
    if args.show_size is not None and not args.show_size.strip():
        raise ValueError("--show-size requires a value")
