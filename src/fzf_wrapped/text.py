"""Coercion of caller-supplied values into text for fzf."""


def as_text(value: str | bytes) -> str:
    """Return value as str, decoding bytes as UTF-8 with replacement."""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")
