"""Markdown to HTML rendering via Python-Markdown."""

from __future__ import annotations

import markdown

DEFAULT_EXTENSIONS: list[str] = ["footnotes", "tables", "fenced_code", "sane_lists"]


def render_markdown(text: str, extensions: list[str] | None = None) -> str:
    """Render *text* to an HTML fragment."""
    return markdown.markdown(
        text,
        extensions=DEFAULT_EXTENSIONS if extensions is None else extensions,
        output_format="html",
    )
