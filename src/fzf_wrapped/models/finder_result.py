"""Result model for a finished finder session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FinderResult:
    """Exit status and captured stdout of the fzf process."""

    returncode: int
    stdout: bytes

    @property
    def text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace").strip()

    @property
    def selection(self) -> str | None:
        """The trimmed selection, or None when fzf printed nothing."""
        if not self.stdout:
            return None
        return self.text
