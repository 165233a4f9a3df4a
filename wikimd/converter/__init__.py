"""Wiki markdown to standalone HTML page conversion."""

from wikimd.converter.converter import WikiConverter, to_html, to_html_and_save
from wikimd.converter.models import ConversionResult, WikiOptions

__all__ = [
    "ConversionResult",
    "WikiConverter",
    "WikiOptions",
    "to_html",
    "to_html_and_save",
]
