"""Enumerations for fzf options that only accept a fixed set of values."""

import logging
from enum import Enum

log = logging.getLogger(__name__)


class _TokenEnum(str, Enum):
    """Enum whose values are the exact tokens fzf expects on its command line."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "_TokenEnum":
        raise NotImplementedError

    @classmethod
    def from_token(cls, token: "str | _TokenEnum") -> "_TokenEnum":
        """Return the member for a token, or the default for unknown input."""
        if isinstance(token, cls):
            return token
        normalized = str(token).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        fallback = cls.default()
        log.debug("unknown %s token %r, using %s", cls.__name__, token, fallback.value)
        return fallback


class Scheme(_TokenEnum):
    """Scoring scheme used by the matcher."""

    DEFAULT = "default"
    PATH = "path"
    HISTORY = "history"

    @classmethod
    def default(cls) -> "Scheme":
        return cls.DEFAULT


class Layout(_TokenEnum):
    """Where the prompt and list are drawn."""

    DEFAULT = "default"
    REVERSE = "reverse"
    REVERSE_LIST = "reverse-list"

    @classmethod
    def default(cls) -> "Layout":
        return cls.DEFAULT


class Border(_TokenEnum):
    """Border style drawn around the finder."""

    NONE = "none"
    ROUNDED = "rounded"
    SHARP = "sharp"
    BOLD = "bold"
    DOUBLE = "double"
    BLOCK = "block"
    THINBLOCK = "thinblock"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def default(cls) -> "Border":
        return cls.NONE


class Color(_TokenEnum):
    """Base color theme."""

    DARK = "dark"
    LIGHT = "light"
    SIXTEEN = "16"
    BW = "bw"

    @classmethod
    def default(cls) -> "Color":
        return cls.DARK
