from .markdown import DEFAULT_EXTENSIONS, render_markdown
from .template import (
    DEFAULT_TEMPLATE,
    format_date,
    insert_content,
    load_template,
    render_template,
    title_case,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_TEMPLATE",
    "format_date",
    "insert_content",
    "load_template",
    "render_markdown",
    "render_template",
    "title_case",
]
