"""Resolution of local link targets to absolute, cleaned paths."""

from __future__ import annotations

import functools
import os
from pathlib import Path, PurePath


class InvalidFileError(ValueError):
    """Raised when a path cannot serve as a link source or target."""

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid file path: {self.path}")


@functools.lru_cache(maxsize=1)
def _current_dir() -> Path:
    return Path.cwd()


def _clean(path: PurePath) -> Path:
    """Lexically normalise ``path``: drop ``.``, fold ``..``, keep the root."""
    anchor = path.anchor
    parts = path.parts[1:] if anchor else path.parts
    cleaned: list[str] = []
    for part in parts:
        if part == ".":
            continue
        if part == "..":
            if cleaned and cleaned[-1] != "..":
                cleaned.pop()
            elif not anchor:
                cleaned.append("..")
            continue
        cleaned.append(part)
    if not anchor and not cleaned:
        return Path(".")
    return Path(anchor, *cleaned)


@functools.lru_cache(maxsize=None)
def _absolute_cached(path: Path) -> Path:
    full = path if path.is_absolute() else _current_dir() / path
    return _clean(full)


def absolute_path(path: os.PathLike | str) -> Path:
    """Return ``path`` made absolute against the working directory and cleaned."""
    return _absolute_cached(Path(path))


def resolve(
    src: os.PathLike | str,
    dst: os.PathLike | str,
    ignore_absolute_local_links: bool,
) -> Path | None:
    """Resolve ``dst`` as linked to from within the file ``src``.

    Relative targets are taken from the directory holding ``src``. Absolute
    targets give ``None`` when ``ignore_absolute_local_links`` is set.
    """
    src_path = Path(src)
    dst_path = Path(dst)
    if dst_path.is_absolute():
        if ignore_absolute_local_links:
            return None
        resolved = dst_path
    else:
        if src_path.anchor and src_path == src_path.parent:
            raise InvalidFileError(dst_path)
        resolved = src_path.parent / dst_path
    return absolute_path(resolved)


def contains(parent: os.PathLike | str, child: os.PathLike | str) -> bool:
    """Tell whether ``child`` lies inside ``parent`` (or is ``parent`` itself).

    Both paths must exist; a missing path raises ``FileNotFoundError``.
    """
    parent_real = Path(parent).resolve(strict=True)
    child_real = Path(child).resolve(strict=True)
    return child_real.is_relative_to(parent_real)