"""Rewrites markdown link targets for publishing.

Three kinds of targets are handled:

* wiki pages: a target whose ``.<extension>`` file exists beside the
  source document is pointed at the rendered ``.html`` page,
* ``file:`` targets: forced absolute, resolved against the source directory,
* ``local:`` targets: resolved against the source directory, then made
  relative to the output directory.

Everything else only gets lexical cleaning and space encoding.
"""

from __future__ import annotations

import logging
import posixpath
import re

from .models import LinkReference, ResolutionContext
from .paths import encode_spaces, normalize_path, relative_path

logger = logging.getLogger(__name__)

LINK_RE = re.compile(r"\[(?P<text>[^\]\n]*)\]\((?P<uri>[^)\n]*)\)")
_TITLE_RE = re.compile(r'\s+"')

FILE_PREFIX = "file:"
LOCAL_PREFIX = "local:"


def split_fragment(uri: str) -> tuple[str, str | None]:
    """Split ``path#fragment``. More than one ``#`` means no fragment."""
    parts = uri.split("#")
    if len(parts) == 2:
        return parts[0], parts[1]
    return uri, None


def split_title(uri: str) -> tuple[str, str | None]:
    """Split ``url "Title"`` into the url and the title remainder ``Title"``."""
    parts = _TITLE_RE.split(uri)
    if len(parts) == 2:
        return parts[0], parts[1]
    return uri, None


def is_wiki_link(path: str, context: ResolutionContext) -> bool:
    """Check whether *path* names an existing wiki page beside the document."""
    if not path:
        return False
    try:
        candidate = (context.input_dir / path).with_suffix(f".{context.extension}")
        return candidate.is_file()
    except (OSError, ValueError):
        return False


def _resolve_wiki_link(uri: str) -> str:
    path, fragment = split_fragment(uri)
    head, tail = posixpath.split(path.rstrip("/"))
    stem, _ext = posixpath.splitext(tail)
    target = posixpath.join(head, f"{stem}.html")
    if fragment is not None:
        return f"{target}#{encode_spaces(fragment)}"
    return target


def _resolve_other_link(uri: str, context: ResolutionContext) -> str:
    url, title = split_title(uri)
    input_dir = context.input_dir.as_posix()

    if url.startswith(FILE_PREFIX):
        target = url[len(FILE_PREFIX):]
        if not posixpath.isabs(target):
            target = posixpath.join(input_dir, target)
    elif url.startswith(LOCAL_PREFIX):
        target = posixpath.join(input_dir, url[len(LOCAL_PREFIX):])
        target = relative_path(target, context.output_dir.as_posix())
    else:
        target = url

    target = normalize_path(target)
    if title is not None:
        return f'{target} "{title}'
    return target


def resolve_link(text: str, uri: str, context: ResolutionContext) -> str:
    """Return the markdown link ``[text](uri)`` with *uri* rewritten."""
    path, _fragment = split_fragment(uri)
    if is_wiki_link(path, context):
        resolved = _resolve_wiki_link(uri)
    else:
        resolved = _resolve_other_link(uri, context)
    if resolved != uri:
        logger.debug("rewrote link %r -> %r", uri, resolved)
    return LinkReference(text=text, uri=resolved).to_markdown()


def find_links(text: str) -> list[LinkReference]:
    return [LinkReference(text=m["text"], uri=m["uri"]) for m in LINK_RE.finditer(text)]


def rewrite_links(text: str, context: ResolutionContext) -> str:
    """Rewrite every markdown link in *text*."""
    return LINK_RE.sub(lambda m: resolve_link(m["text"], m["uri"], context), text)
