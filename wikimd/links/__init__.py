"""Link classification and rewriting."""

from wikimd.links.models import LinkReference, ResolutionContext
from wikimd.links.paths import clean_path, encode_spaces, normalize_path, relative_path
from wikimd.links.resolver import (
    find_links,
    is_wiki_link,
    resolve_link,
    rewrite_links,
    split_fragment,
    split_title,
)

__all__ = [
    "LinkReference",
    "ResolutionContext",
    "clean_path",
    "encode_spaces",
    "find_links",
    "is_wiki_link",
    "normalize_path",
    "relative_path",
    "resolve_link",
    "rewrite_links",
    "split_fragment",
    "split_title",
]
