"""Translate a FinderConfig into fzf command-line arguments."""

import shlex

from fzf_wrapped.models import FinderConfig


def _add_if_true(args: list[str], flag: str, value: bool) -> None:
    if value:
        args.append(flag)


def build_args(config: FinderConfig) -> list[str]:
    """Return the argument list for fzf, custom arguments last."""
    args: list[str] = []

    # Search
    args.append(f"--scheme={config.scheme.value}")
    _add_if_true(args, "--literal", config.literal)
    _add_if_true(args, "--track", config.track)
    _add_if_true(args, "--tac", config.tac)
    _add_if_true(args, "--disabled", config.disabled)

    # Interface
    _add_if_true(args, "--no-mouse", config.no_mouse)
    _add_if_true(args, "--cycle", config.cycle)
    _add_if_true(args, "--keep-right", config.keep_right)
    _add_if_true(args, "--no-hscroll", config.no_hscroll)
    _add_if_true(args, "--filepath-word", config.filepath_word)

    # Layout
    args.append(f"--layout={config.layout.value}")
    args.append(f"--border={config.border.value}")
    args.append(f"--border-label={config.border_label}")
    _add_if_true(args, "--no-separator", config.no_separator)
    _add_if_true(args, "--no-scrollbar", config.no_scrollbar)
    args.append(f"--prompt={config.prompt}")
    args.append(f"--pointer={config.pointer}")
    if config.header:
        args.append(f"--header={config.header}")
    _add_if_true(args, "--header-first", config.header_first)

    # Display
    _add_if_true(args, "--ansi", config.ansi)
    args.append(f"--tabstop={config.tabstop}")
    args.append(f"--color={config.color.value}")
    _add_if_true(args, "--no-bold", config.no_bold)

    args.extend(config.custom_args)
    return args


def format_command(argv: list[str]) -> str:
    """Render an argv list as a copy-pasteable shell command."""
    return shlex.join(argv)
