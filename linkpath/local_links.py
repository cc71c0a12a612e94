"""Turning local link text into ``file://`` URLs."""

from __future__ import annotations

import os
import string
from pathlib import Path, PurePath
from urllib.parse import quote, unquote

from linkpath.paths import InvalidFileError, resolve
from linkpath.urls import remove_get_params_and_separate_fragment

_PRINTABLE = "".join(chr(code) for code in range(0x21, 0x7F))
_PATH_SEGMENT_SAFE = "".join(
    ch for ch in _PRINTABLE if ch not in ' "#<>?`{}/%' and ch not in string.ascii_letters + string.digits
)
_FRAGMENT_SAFE = "".join(
    ch for ch in _PRINTABLE if ch not in ' "<>`' and ch not in string.ascii_letters + string.digits
)


class InvalidPathToUriError(ValueError):
    """Raised when link text cannot be turned into a file URL."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot convert path to URI: {path}")


class InvalidUrlFromPathError(ValueError):
    """Raised when a resolved path cannot be expressed as a file URL."""

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot convert path to URL: {self.path}")


def is_anchor(text: str) -> bool:
    """Tell whether link text is a bare in-page anchor such as ``#top``."""
    return text.startswith("#")


def prepend_root_dir_if_absolute_local_link(
    text: str, root_dir: os.PathLike | str | None
) -> str:
    """Put ``root_dir`` in front of ``text`` when it is a root-relative link."""
    if text.startswith("/") and root_dir is not None:
        return f"{os.fspath(root_dir)}{text}"
    return text


def _file_url(path: PurePath) -> str:
    if not path.is_absolute():
        raise InvalidUrlFromPathError(path)
    segments = "/".join(quote(part, safe=_PATH_SEGMENT_SAFE) for part in path.parts[1:])
    drive = f"/{path.drive}" if path.drive else ""
    return f"file://{drive}/{segments}"


def resolve_and_create_url(
    src_path: os.PathLike | str,
    dest_path: str,
    ignore_absolute_local_links: bool,
) -> str:
    """Resolve ``dest_path`` linked from ``src_path`` into a ``file://`` URL.

    The query string is dropped and the fragment kept. The path part is
    percent-decoded first so that it is not encoded twice; invalid UTF-8
    raises ``UnicodeDecodeError``.
    """
    path_part, fragment = remove_get_params_and_separate_fragment(dest_path)
    decoded = unquote(path_part, encoding="utf-8", errors="strict")

    try:
        resolved = resolve(src_path, decoded, ignore_absolute_local_links)
    except InvalidFileError as exc:
        raise InvalidPathToUriError(decoded) from exc
    if resolved is None:
        raise InvalidPathToUriError(decoded)

    url = _file_url(resolved)
    if fragment is not None:
        url = f"{url}#{quote(fragment, safe=_FRAGMENT_SAFE)}"
    return url


def create_uri_from_file_path(
    file_path: os.PathLike | str,
    link_text: str,
    ignore_absolute_local_links: bool,
) -> str:
    """Build the ``file://`` URL that ``link_text`` in ``file_path`` points to.

    Anchors are attached to the name of the file they appear in.
    """
    source = Path(file_path)
    if is_anchor(link_text):
        name = source.name
        if not name or name == "..":
            raise InvalidFileError(source)
        target = f"{name}{link_text}"
    else:
        target = link_text

    try:
        return resolve_and_create_url(source, target, ignore_absolute_local_links)
    except ValueError as exc:
        raise InvalidPathToUriError(target) from exc