"""Exceptions raised while driving the fzf subprocess."""


class FinderError(Exception):
    """Base class for all finder failures."""


class SpawnError(FinderError):
    """The fzf executable could not be started."""


class WriteError(FinderError):
    """An item could not be written to the running finder."""


class WaitError(FinderError):
    """Waiting for the finder to exit failed at the OS level."""


class FinderStateError(FinderError, RuntimeError):
    """An operation was called in a lifecycle state that does not allow it."""
