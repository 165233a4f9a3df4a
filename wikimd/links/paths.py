"""Lexical path helpers used when rewriting link targets.

None of these functions touch the filesystem.
"""

from __future__ import annotations

import posixpath
import re

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def encode_spaces(path: str) -> str:
    """Percent-encode every space in *path*."""
    return path.replace(" ", "%20")


def has_scheme(path: str) -> bool:
    """True for targets like ``https://...`` or ``mailto:...``."""
    return bool(_SCHEME_RE.match(path))


def clean_path(path: str) -> str:
    """Collapse ``.`` and ``..`` segments and duplicate separators.

    ``..`` only cancels a preceding real segment: leading ``..`` of a
    relative path is kept and ``/..`` collapses to ``/``.
    """
    if not path or has_scheme(path):
        return path

    rooted = path.startswith("/")
    segments: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments and segments[-1] != "..":
                segments.pop()
            elif not rooted:
                segments.append(segment)
            continue
        segments.append(segment)

    cleaned = "/".join(segments)
    if rooted:
        return "/" + cleaned
    return cleaned or "."


def normalize_path(path: str) -> str:
    return encode_spaces(clean_path(path))


def relative_path(target: str, start: str) -> str:
    """Express *target* relative to the directory *start*.

    Relative inputs are anchored at the current working directory first.
    """
    return posixpath.relpath(clean_path(target), clean_path(start))
