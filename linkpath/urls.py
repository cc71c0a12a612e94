"""Helpers for splitting link text that may not be a full URL."""

from __future__ import annotations


def remove_get_params_and_separate_fragment(url: str) -> tuple[str, str | None]:
    """Strip the query string from ``url`` and split off its fragment.

    The input is link text rather than a parsed URL, since it may have no
    scheme or host. Everything after the first ``#`` is the fragment, and
    everything from the first ``?`` before it is discarded.
    """
    path, sep, fragment = url.partition("#")
    path = path.partition("?")[0]
    return path, (fragment if sep else None)