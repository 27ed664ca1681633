"""Chaining builder for FinderConfig."""

import operator
from collections.abc import Iterable
from typing import Any

from fzf_wrapped.models import FinderConfig
from fzf_wrapped.models.finder_config import MAX_TABSTOP
from fzf_wrapped.options import Border, Color, Layout, Scheme
from fzf_wrapped.text import as_text


class FinderBuilder:
    """Collect finder options one setter at a time, then freeze them with build().

    Setters validate their own input, so build() never fails.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> "FinderBuilder":
        self._values[name] = value
        return self

    def custom_args(self, args: Iterable[str | bytes]) -> "FinderBuilder":
        """Replace the extra arguments appended after the generated ones."""
        return self._set("custom_args", tuple(as_text(arg) for arg in args))

    # Search
    def scheme(self, value: Scheme | str) -> "FinderBuilder":
        return self._set("scheme", Scheme.from_token(value))

    def literal(self, value: bool = True) -> "FinderBuilder":
        return self._set("literal", bool(value))

    def track(self, value: bool = True) -> "FinderBuilder":
        return self._set("track", bool(value))

    def tac(self, value: bool = True) -> "FinderBuilder":
        return self._set("tac", bool(value))

    def disabled(self, value: bool = True) -> "FinderBuilder":
        return self._set("disabled", bool(value))

    # Interface
    def no_mouse(self, value: bool = True) -> "FinderBuilder":
        return self._set("no_mouse", bool(value))

    def cycle(self, value: bool = True) -> "FinderBuilder":
        return self._set("cycle", bool(value))

    def keep_right(self, value: bool = True) -> "FinderBuilder":
        return self._set("keep_right", bool(value))

    def no_hscroll(self, value: bool = True) -> "FinderBuilder":
        return self._set("no_hscroll", bool(value))

    def filepath_word(self, value: bool = True) -> "FinderBuilder":
        return self._set("filepath_word", bool(value))

    # Layout
    def layout(self, value: Layout | str) -> "FinderBuilder":
        return self._set("layout", Layout.from_token(value))

    def border(self, value: Border | str) -> "FinderBuilder":
        return self._set("border", Border.from_token(value))

    def border_label(self, value: str) -> "FinderBuilder":
        return self._set("border_label", str(value))

    def no_separator(self, value: bool = True) -> "FinderBuilder":
        return self._set("no_separator", bool(value))

    def no_scrollbar(self, value: bool = True) -> "FinderBuilder":
        return self._set("no_scrollbar", bool(value))

    def prompt(self, value: str) -> "FinderBuilder":
        return self._set("prompt", str(value))

    def pointer(self, value: str) -> "FinderBuilder":
        return self._set("pointer", str(value))

    def header(self, value: str) -> "FinderBuilder":
        return self._set("header", str(value))

    def header_first(self, value: bool = True) -> "FinderBuilder":
        return self._set("header_first", bool(value))

    # Display
    def ansi(self, value: bool = True) -> "FinderBuilder":
        return self._set("ansi", bool(value))

    def tabstop(self, value: int) -> "FinderBuilder":
        """Set the tab width; fzf accepts integers from 1 to 255."""
        width = operator.index(value)
        if not 1 <= width <= MAX_TABSTOP:
            raise ValueError(f"tabstop must be between 1 and {MAX_TABSTOP}, got {width}")
        return self._set("tabstop", width)

    def color(self, value: Color | str) -> "FinderBuilder":
        return self._set("color", Color.from_token(value))

    def no_bold(self, value: bool = True) -> "FinderBuilder":
        return self._set("no_bold", bool(value))

    def build(self) -> FinderConfig:
        """Return an immutable snapshot of the options set so far."""
        return FinderConfig(**self._values)
