"""Resolve local document links into absolute paths and file URLs."""

__version__ = "0.1.0"
__all__ = ["urls", "paths", "errortext", "local_links"]