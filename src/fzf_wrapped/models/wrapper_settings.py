"""Runtime settings model for fzf_wrapped."""

from pydantic import BaseModel

DEFAULT_EXECUTABLE = "fzf"


class WrapperSettings(BaseModel):
    """User-level settings read from the config file and environment."""

    executable: str = DEFAULT_EXECUTABLE
    default_args: list[str] = []
