"""Shortening of verbose HTTP client error messages."""

from __future__ import annotations

_CONNECT_MARKER = "error trying to connect:"


def trim_error_output(error: BaseException | str) -> str:
    """Return the meaningful part of an HTTP client error message.

    Only the text after ``error trying to connect:`` is kept when present;
    otherwise the message is returned as is.
    """
    text = str(error)
    _, sep, after = text.partition(_CONNECT_MARKER)
    return after.strip() if sep else text