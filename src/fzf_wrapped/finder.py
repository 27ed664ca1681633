"""Drive fzf as a child process.

A Finder moves through three states: UNSTARTED -> RUNNING -> FINISHED.
run() spawns fzf with piped stdin/stdout, add_item()/add_items() stream
newline-terminated entries into it (also while the user is already typing),
and wait()/output() block until fzf exits and return what it printed.
"""

import logging
import subprocess
from collections.abc import Iterable
from enum import Enum
from fzf_wrapped.args import build_args, format_command
from fzf_wrapped.builder import FinderBuilder
from fzf_wrapped.config import get_executable
from fzf_wrapped.errors import FinderStateError, SpawnError, WaitError, WriteError
from fzf_wrapped.models import FinderConfig, FinderResult
from fzf_wrapped.text import as_text

log = logging.getLogger(__name__)

# fzf exits with 2 on its own errors (bad flags, terminal issues).
FZF_ERROR_EXIT_CODE = 2


class FinderState(Enum):
    UNSTARTED = "unstarted"
    RUNNING = "running"
    FINISHED = "finished"


class Finder:
    """A single fzf session built from a FinderConfig."""

    def __init__(self, config: FinderConfig | None = None, executable: str | None = None) -> None:
        self.config = config if config is not None else FinderConfig()
        self.executable = executable or get_executable()
        self.state = FinderState.UNSTARTED
        self._process: subprocess.Popen[bytes] | None = None
        self._items_written = 0

    @staticmethod
    def builder() -> FinderBuilder:
        return FinderBuilder()

    def argv(self) -> list[str]:
        """Return the full command line used to launch fzf."""
        return [self.executable, *build_args(self.config)]

    def run(self) -> None:
        """Spawn fzf. On failure the finder stays UNSTARTED."""
        if self.state is not FinderState.UNSTARTED:
            raise FinderStateError(f"cannot run a finder that is {self.state.value}")
        argv = self.argv()
        log.debug("spawning: %s", format_command(argv))
        try:
            process = subprocess.Popen(argv, stdin=subprocess.PIPE, stdout=subprocess.PIPE)
        except OSError as e:
            raise SpawnError(f"failed to start {self.executable}: {e}") from e
        self._process = process
        self.state = FinderState.RUNNING

    def _require_running(self, action: str) -> subprocess.Popen[bytes]:
        if self.state is not FinderState.RUNNING or self._process is None:
            raise FinderStateError(f"cannot {action}: finder is {self.state.value}")
        return self._process

    def add_item(self, item: str | bytes) -> None:
        """Write one item to fzf, trimmed and terminated by a single newline.

        Bytes are decoded as UTF-8 with replacement; other types raise TypeError.
        Blocks when the pipe is full until fzf reads more of its input.
        """
        process = self._require_running("add item")
        if process.stdin is None:
            raise FinderStateError("cannot add item: fzf stdin is not a pipe")
        line = as_text(item).strip() + "\n"
        try:
            process.stdin.write(line.encode("utf-8"))
            process.stdin.flush()
        except (OSError, ValueError) as e:
            raise WriteError(f"failed to write item to {self.executable}: {e}") from e
        self._items_written += 1

    def add_items(self, items: Iterable[str | bytes]) -> None:
        """Write each item in order, stopping at the first failure."""
        for item in items:
            self.add_item(item)

    def wait(self) -> FinderResult:
        """Close fzf's input, block until it exits and return its output.

        The session is consumed even if waiting fails.
        """
        process = self._require_running("wait")
        self.state = FinderState.FINISHED
        try:
            stdout, _ = process.communicate()
        except OSError as e:
            try:
                self._reap(process)
            except OSError as reap_error:
                log.debug("failed to reap %s: %s", self.executable, reap_error)
            raise WaitError(f"failed waiting for {self.executable}: {e}") from e

        returncode = process.returncode
        log.debug(
            "%s exited with %s after %d items", self.executable, returncode, self._items_written
        )
        if returncode == FZF_ERROR_EXIT_CODE:
            log.warning("%s reported an error (exit code %d)", self.executable, returncode)
        return FinderResult(returncode=returncode, stdout=stdout or b"")

    def output(self) -> str | None:
        """Return the user's selection, or None if nothing was selected."""
        try:
            result = self.wait()
        except WaitError as e:
            log.debug("no selection: %s", e)
            return None
        return result.selection

    def close(self) -> None:
        """Kill and reap fzf if it is still running."""
        process = self._process
        if self.state is not FinderState.RUNNING or process is None:
            return
        self.state = FinderState.FINISHED
        self._reap(process)

    def _reap(self, process: subprocess.Popen[bytes]) -> None:
        if process.poll() is None:
            log.debug("killing %s (pid %s)", self.executable, process.pid)
            process.kill()
        process.wait()
        for stream in (process.stdin, process.stdout):
            if stream is not None:
                try:
                    stream.close()
                except OSError:
                    pass

    def __enter__(self) -> "Finder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def run_with_output(
    finder: Finder | FinderConfig | None, items: Iterable[str | bytes]
) -> str | None:
    """Run fzf over items and return the selection.

    Spawn and write failures are reported as None, the same as cancelling.
    """
    if not isinstance(finder, Finder):
        finder = Finder(finder)
    with finder:
        try:
            finder.run()
            finder.add_items(items)
        except (SpawnError, WriteError) as e:
            log.debug("run_with_output failed: %s", e)
            return None
        return finder.output()
