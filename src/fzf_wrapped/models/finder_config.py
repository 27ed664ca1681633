"""Immutable configuration snapshot for a finder session."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from fzf_wrapped.options import Border, Color, Layout, Scheme

DEFAULT_PROMPT = "> "
DEFAULT_POINTER = ">"
DEFAULT_BORDER_LABEL = ""
DEFAULT_HEADER = ""
DEFAULT_TABSTOP = 8
MAX_TABSTOP = 255


class FinderConfig(BaseModel):
    """Options passed to fzf. Every field has a default."""

    model_config = ConfigDict(frozen=True)

    # Arguments with no dedicated field, appended verbatim.
    custom_args: tuple[str, ...] = ()

    # Search
    scheme: Scheme = Scheme.DEFAULT
    literal: bool = False
    track: bool = False
    tac: bool = False
    disabled: bool = False

    # Interface
    no_mouse: bool = False
    cycle: bool = False
    keep_right: bool = False
    no_hscroll: bool = False
    filepath_word: bool = False

    # Layout
    layout: Layout = Layout.DEFAULT
    border: Border = Border.NONE
    border_label: str = DEFAULT_BORDER_LABEL
    no_separator: bool = False
    no_scrollbar: bool = False
    prompt: str = DEFAULT_PROMPT
    pointer: str = DEFAULT_POINTER
    header: str = DEFAULT_HEADER
    header_first: bool = False

    # Display
    ansi: bool = False
    tabstop: int = Field(default=DEFAULT_TABSTOP, ge=1, le=MAX_TABSTOP)
    color: Color = Color.DARK
    no_bold: bool = False

    @field_validator("scheme", "layout", "border", "color", mode="before")
    @classmethod
    def _coerce_token(cls, value: Any, info: ValidationInfo) -> Enum:
        enum_type = cls.model_fields[info.field_name].annotation
        return enum_type.from_token(value)
