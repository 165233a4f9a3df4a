"""Page templates with ``%placeholder%`` substitution."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """\
<html>
<head>
    <link rel="Stylesheet" type="text/css" href="%root_path%style.css" />
    <title>%title%</title>
    <meta http-equiv="Content-Type" content="text/html; charset=utf-8" />

    %pygments%
</head>
<body>
    <a href="%root_path%index.html">Index</a> |
    <hr>
    <div class="content">
    %content%
    </div>
</body>
</html>"""

_CHUNK_RE = re.compile(r"[^\W_]+")

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _is_boundary(prev: str, cur: str, nxt: str) -> bool:
    if prev.islower() and cur.isupper():
        return True
    # "HTMLPage" splits before the "P"
    if prev.isupper() and cur.isupper() and nxt.islower():
        return True
    return prev.isdigit() != cur.isdigit()


def _split_words(stem: str) -> list[str]:
    words = []
    for chunk in _CHUNK_RE.findall(stem):
        start = 0
        for i in range(1, len(chunk)):
            if _is_boundary(chunk[i - 1], chunk[i], chunk[i + 1 : i + 2]):
                words.append(chunk[start:i])
                start = i
        words.append(chunk[start:])
    return words


def title_case(stem: str) -> str:
    """``my_wiki-pageName`` -> ``My Wiki Page Name``."""
    return " ".join(word.capitalize() for word in _split_words(stem))


def format_date(when: datetime | None = None) -> str:
    """``5. Mar 2024``, with English month names regardless of locale."""
    when = when or datetime.now(timezone.utc)
    return f"{when.day}. {_MONTHS[when.month - 1]} {when.year}"


def load_template(path: str | Path | None) -> str:
    """Read a template file, falling back to DEFAULT_TEMPLATE."""
    if path is None:
        return DEFAULT_TEMPLATE
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Could not read template %s (%s); using default", path, e)
        return DEFAULT_TEMPLATE


def render_template(
    template: str,
    *,
    root_path: str,
    title: str,
    code_theme: str,
    date: str | None = None,
) -> str:
    """Fill every placeholder except ``%content%``."""
    return (
        template.replace("%root_path%", root_path)
        .replace("%title%", title)
        .replace("%pygments%", "")
        .replace("%code_theme%", code_theme)
        .replace("%date%", date if date is not None else format_date())
    )


def insert_content(page: str, body_html: str) -> str:
    return page.replace("%content%", body_html)
