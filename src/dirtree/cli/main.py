"""Command-line interface for dirtree.

Renders a directory tree and writes it to stdout or a file. Persistent defaults are
read from the environment (see dirtree.preferences) and merged with the arguments.

Exit Codes:
    0: Successful completion
    1: Runtime error (missing path, not a directory, unreadable entry, bad arguments)
    2: Command-line syntax error
    126: Permission denied while reading the tree
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Two levels with sizes, the default
    $ dirtree /path/to/project

    # Unlimited depth without sizes
    $ dirtree -d -1 --show-size false /path/to/project
"""

import errno
import sys
from typing import Iterator

from dirtree.cli.argparser import create_parser, validate_args
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.exceptions import FilesystemError
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.file_system_tree.tree_builder import TreeBuilder, TreeSummary
from dirtree.preferences import Preferences, parse_show_size
from dirtree.presentation import strip_color_markers, to_markdown
from dirtree.types import OrderingPolicy

PERMISSION_ERRNOS = (errno.EACCES, errno.EPERM)


def format_summary(summary: TreeSummary) -> str:
    """Format directory and file counts, one per line.

    Example:
        >>> format_summary(TreeSummary(directories=3, files=12))
        'Directories: 3\\nFiles: 12'
    """
    return f"Directories: {summary.directories}\nFiles: {summary.files}"


def main() -> None:
    """Main entry point for the dirtree command-line interface."""
    setup_signal_handling()

    try:
        # Populated by -i/--ignore and --ignore-file while parsing
        ignore_rules = GitIgnoreExclusionRules()

        parser = create_parser(ignore_rules)
        args = parser.parse_args()
        validate_args(args)

        config = Preferences.from_environ().merge(
            depth=args.depth,
            exclude=args.exclude,
            show_size=parse_show_size(args.show_size),
            ordering=OrderingPolicy.SORTED if args.sort else OrderingPolicy.PLATFORM_DEFAULT,
            ignore_rules=ignore_rules if ignore_rules.has_rules() else None,
            use_default_excludes=not args.no_default_excludes,
        )

        builder = TreeBuilder(config)
        # Everything is read here, so a failure leaves no partial output behind
        root = builder.build(args.directory)

        lines: Iterator[str] = builder.iter_lines(root)
        if args.strip_markers:
            lines = (strip_color_markers(line) for line in lines)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                if args.format == "markdown":
                    safe_writer.write(to_markdown("".join(lines)))
                else:
                    safe_writer.write_lines(lines)

                if args.summary == "stdout":
                    safe_writer.write("\n" + format_summary(builder.summarize(root)) + "\n")
                elif args.summary == "stderr":
                    print(format_summary(builder.summarize(root)), file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except FilesystemError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if e.errno in PERMISSION_ERRNOS else 1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
