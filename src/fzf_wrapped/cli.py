"""Command-line interface for fzf_wrapped."""

import argparse
import logging
import sys
from typing import TextIO

from fzf_wrapped import __version__
from fzf_wrapped.builder import FinderBuilder
from fzf_wrapped.config import load_settings
from fzf_wrapped.errors import FinderError
from fzf_wrapped.finder import Finder
from fzf_wrapped.models import (
    DEFAULT_BORDER_LABEL,
    DEFAULT_HEADER,
    DEFAULT_POINTER,
    DEFAULT_PROMPT,
    DEFAULT_TABSTOP,
    FinderConfig,
    WrapperSettings,
)
from fzf_wrapped.options import Border, Color, Layout, Scheme

log = logging.getLogger("fzf_wrapped")

# (flag, builder setter, help)
BOOLEAN_FLAGS = [
    ("--literal", "literal", "Do not normalize latin script letters"),
    ("--track", "track", "Track the current selection when the result is updated"),
    ("--tac", "tac", "Reverse the order of the input"),
    ("--disabled", "disabled", "Do not perform search"),
    ("--no-mouse", "no_mouse", "Disable mouse"),
    ("--cycle", "cycle", "Enable cyclic scroll"),
    ("--keep-right", "keep_right", "Keep the right end of the line visible on overflow"),
    ("--no-hscroll", "no_hscroll", "Disable horizontal scroll"),
    ("--filepath-word", "filepath_word", "Make word-wise movements respect path separators"),
    ("--no-separator", "no_separator", "Hide info line separator"),
    ("--no-scrollbar", "no_scrollbar", "Hide scrollbar"),
    ("--header-first", "header_first", "Print header before the prompt line"),
    ("--ansi", "ansi", "Enable processing of ANSI color codes"),
    ("--no-bold", "no_bold", "Do not use bold text"),
]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fzf-wrapped",
        description="Pick one item with fzf and print it",
        epilog="Items are read from stdin, one per line, when none are given.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--scheme",
        choices=[m.value for m in Scheme],
        default=Scheme.default().value,
        help="Scoring scheme",
    )
    parser.add_argument(
        "--layout",
        choices=[m.value for m in Layout],
        default=Layout.default().value,
        help="Choose layout",
    )
    parser.add_argument(
        "--border",
        choices=[m.value for m in Border],
        default=Border.default().value,
        help="Draw border around the finder",
    )
    parser.add_argument(
        "--color",
        choices=[m.value for m in Color],
        default=Color.default().value,
        help="Base color theme",
    )
    parser.add_argument("--border-label", default=DEFAULT_BORDER_LABEL, help="Label on the border")
    parser.add_argument("--prompt", default=DEFAULT_PROMPT, help="Input prompt")
    parser.add_argument("--pointer", default=DEFAULT_POINTER, help="Pointer to the current line")
    parser.add_argument("--header", default=DEFAULT_HEADER, help="String to print as header")
    parser.add_argument(
        "--tabstop",
        type=int,
        default=DEFAULT_TABSTOP,
        help="Number of spaces for a tab character",
    )
    for flag, dest, help_text in BOOLEAN_FLAGS:
        parser.add_argument(flag, dest=dest, action="store_true", help=help_text)
    parser.add_argument(
        "--arg",
        dest="extra_args",
        action="append",
        default=[],
        metavar="ARG",
        help="Extra argument passed to fzf verbatim (use --arg=--height=10)",
    )
    parser.add_argument("items", nargs="*", help="Items to choose from")
    return parser


def build_config(args: argparse.Namespace, settings: WrapperSettings) -> FinderConfig:
    """Translate parsed CLI arguments into a FinderConfig."""
    builder = (
        FinderBuilder()
        .scheme(args.scheme)
        .layout(args.layout)
        .border(args.border)
        .border_label(args.border_label)
        .prompt(args.prompt)
        .pointer(args.pointer)
        .header(args.header)
        .tabstop(args.tabstop)
        .color(args.color)
        .custom_args([*settings.default_args, *args.extra_args])
    )
    for _, dest, _ in BOOLEAN_FLAGS:
        getattr(builder, dest)(getattr(args, dest))
    return builder.build()


def read_items(stream: TextIO) -> list[str]:
    """Read non-blank lines from a stream."""
    return [line for line in (raw.strip() for raw in stream) if line]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    settings = load_settings()
    try:
        config = build_config(args, settings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.items:
        items = args.items
    elif sys.stdin.isatty():
        print("Error: no items given and stdin is a terminal", file=sys.stderr)
        return 2
    else:
        items = read_items(sys.stdin)
    log.debug("offering %d items", len(items))

    finder = Finder(config, executable=settings.executable)
    with finder:
        try:
            finder.run()
            finder.add_items(items)
        except FinderError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        selection = finder.output()

    if selection is None:
        log.debug("no selection")
        return 1
    print(selection)
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
