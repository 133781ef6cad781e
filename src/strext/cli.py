"""
strext Command-Line Interface.

Exposes the text utilities to the shell. When the text argument is omitted
it is read from stdin, with a single trailing newline removed.

Usage:
    strext left 3 "abcdef"                  # abc
    strext right 2 "abcdef"                 # ef
    strext without-prefix v "v1.2.0"        # 1.2.0
    strext without-suffix .txt notes.txt    # notes
    strext count aa "aaaa"                  # 2
    strext split-part , -1 "a,b,c"          # c
    strext split-part , 1 "a,b,c,d" --limit 2
    echo "a:b:c" | strext split : --json

Environment:
    STREXT_COMPARISON   Default comparison mode for -c/--comparison
    NO_COLOR            Disable colored error output
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from strext import __version__
from strext.comparison import DEFAULT_COMPARISON, ComparisonMode
from strext.errors import StrExtError
from strext.text import (
    SplitOptions,
    count_occurrences,
    left,
    right,
    split_part,
    split_parts,
    without_prefix,
    without_suffix,
)

COMPARISON_ENV_VAR = "STREXT_COMPARISON"

logger = logging.getLogger("strext")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY error output)."""
        cls.RED = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stderr.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


def _add_text_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        help="Input text (default: read from stdin)",
    )


def _add_comparison_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--comparison",
        metavar="MODE",
        help=(
            "Comparison mode: "
            + ", ".join(mode.value for mode in ComparisonMode)
            + f" (default: ${COMPARISON_ENV_VAR} or {DEFAULT_COMPARISON.value})"
        ),
    )


def _add_limit_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-n",
        "--limit",
        type=int,
        default=0,
        help="Maximum number of segments, 0 for unlimited (default: 0)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="strext",
        description="strext - Stateless string extension utilities",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Left command
    left_parser = subparsers.add_parser(
        "left",
        aliases=["l"],
        help="Print the first N characters",
    )
    left_parser.add_argument("length", type=int, help="Number of characters")
    _add_text_argument(left_parser)

    # Right command
    right_parser = subparsers.add_parser(
        "right",
        aliases=["r"],
        help="Print the last N characters",
    )
    right_parser.add_argument("length", type=int, help="Number of characters")
    _add_text_argument(right_parser)

    # Without-prefix command
    prefix_parser = subparsers.add_parser(
        "without-prefix",
        aliases=["wp"],
        help="Remove a leading string once, if present",
    )
    prefix_parser.add_argument("trim", help="Prefix to remove")
    _add_text_argument(prefix_parser)
    _add_comparison_argument(prefix_parser)

    # Without-suffix command
    suffix_parser = subparsers.add_parser(
        "without-suffix",
        aliases=["ws"],
        help="Remove a trailing string once, if present",
    )
    suffix_parser.add_argument("trim", help="Suffix to remove")
    _add_text_argument(suffix_parser)
    _add_comparison_argument(suffix_parser)

    # Count command
    count_parser = subparsers.add_parser(
        "count",
        help="Count non-overlapping occurrences of a substring",
    )
    count_parser.add_argument("sub", help="Substring to count")
    _add_text_argument(count_parser)

    # Split-part command
    split_part_parser = subparsers.add_parser(
        "split-part",
        aliases=["sp"],
        help="Print one segment of the text split on a delimiter",
    )
    split_part_parser.add_argument("delimiter", help="Delimiter string")
    split_part_parser.add_argument(
        "position",
        type=int,
        help="Zero-based segment index, negative counts from the end",
    )
    _add_text_argument(split_part_parser)
    _add_limit_argument(split_part_parser)
    _add_comparison_argument(split_part_parser)

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Print every segment of the text split on a delimiter",
    )
    split_parser.add_argument("delimiter", help="Delimiter string")
    _add_text_argument(split_parser)
    _add_limit_argument(split_parser)
    _add_comparison_argument(split_parser)
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print segments as a JSON array instead of one per line",
    )

    return parser


# =============================================================================
# Helpers
# =============================================================================


def _read_text(args: argparse.Namespace) -> str:
    """Return the text argument, falling back to stdin."""
    if args.text is not None:
        return args.text
    logger.debug("Reading input from stdin")
    return without_suffix(sys.stdin.read(), "\n", ComparisonMode.ORDINAL)


def _comparison(args: argparse.Namespace) -> ComparisonMode:
    """Resolve the comparison mode from the flag, the environment, or the default."""
    if args.comparison:
        return ComparisonMode.parse(args.comparison)
    configured = os.environ.get(COMPARISON_ENV_VAR)
    if configured:
        logger.debug(f"Using comparison mode from ${COMPARISON_ENV_VAR}: {configured}")
        return ComparisonMode.parse(configured)
    return DEFAULT_COMPARISON


def _split_options(args: argparse.Namespace) -> SplitOptions:
    return SplitOptions(limit=args.limit, comparison=_comparison(args))


# =============================================================================
# Command Handlers
# =============================================================================


def cmd_left(args: argparse.Namespace) -> int:
    """Handle the left command."""
    print(left(_read_text(args), args.length))
    return 0


def cmd_right(args: argparse.Namespace) -> int:
    """Handle the right command."""
    print(right(_read_text(args), args.length))
    return 0


def cmd_without_prefix(args: argparse.Namespace) -> int:
    """Handle the without-prefix command."""
    print(without_prefix(_read_text(args), args.trim, _comparison(args)))
    return 0


def cmd_without_suffix(args: argparse.Namespace) -> int:
    """Handle the without-suffix command."""
    print(without_suffix(_read_text(args), args.trim, _comparison(args)))
    return 0


def cmd_count(args: argparse.Namespace) -> int:
    """Handle the count command."""
    print(count_occurrences(_read_text(args), args.sub))
    return 0


def cmd_split_part(args: argparse.Namespace) -> int:
    """Handle the split-part command."""
    options = _split_options(args)
    logger.debug(f"split-part position={args.position} {options}")
    print(split_part(_read_text(args), args.delimiter, args.position, options))
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    """Handle the split command."""
    options = _split_options(args)
    parts = split_parts(_read_text(args), args.delimiter, options)
    logger.debug(f"split produced {len(parts)} segment(s)")
    if args.json:
        print(json.dumps(parts, ensure_ascii=False))
    else:
        for part in parts:
            print(part)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.setLevel(getattr(logging, args.log_level.upper()))

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "left": cmd_left,
        "l": cmd_left,
        "right": cmd_right,
        "r": cmd_right,
        "without-prefix": cmd_without_prefix,
        "wp": cmd_without_prefix,
        "without-suffix": cmd_without_suffix,
        "ws": cmd_without_suffix,
        "count": cmd_count,
        "split-part": cmd_split_part,
        "sp": cmd_split_part,
        "split": cmd_split,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    logger.debug(f"Running command: {args.command}")
    try:
        return handler(args)
    except StrExtError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
