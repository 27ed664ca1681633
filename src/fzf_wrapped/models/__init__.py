"""Model package for fzf_wrapped."""

from fzf_wrapped.models.finder_config import (
    DEFAULT_BORDER_LABEL,
    DEFAULT_HEADER,
    DEFAULT_POINTER,
    DEFAULT_PROMPT,
    DEFAULT_TABSTOP,
    FinderConfig,
)
from fzf_wrapped.models.finder_result import FinderResult
from fzf_wrapped.models.wrapper_settings import DEFAULT_EXECUTABLE, WrapperSettings

__all__ = [
    "DEFAULT_BORDER_LABEL",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_HEADER",
    "DEFAULT_POINTER",
    "DEFAULT_PROMPT",
    "DEFAULT_TABSTOP",
    "FinderConfig",
    "FinderResult",
    "WrapperSettings",
]
