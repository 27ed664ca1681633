"""Run the fzf fuzzy finder as a subprocess and collect the user's selection."""

from fzf_wrapped.builder import FinderBuilder
from fzf_wrapped.errors import FinderError, FinderStateError, SpawnError, WaitError, WriteError
from fzf_wrapped.finder import Finder, FinderState, run_with_output
from fzf_wrapped.models import FinderConfig, FinderResult
from fzf_wrapped.options import Border, Color, Layout, Scheme

__version__ = "0.1.0"

__all__ = [
    "Border",
    "Color",
    "Finder",
    "FinderBuilder",
    "FinderConfig",
    "FinderError",
    "FinderResult",
    "FinderState",
    "FinderStateError",
    "Layout",
    "Scheme",
    "SpawnError",
    "WaitError",
    "WriteError",
    "__version__",
    "run_with_output",
]
