"""Rewrites markdown link targets relative to the published output."""

from wikimd.links import ResolutionContext, rewrite_links

from .pipeline import Transform


class LinkRewriter(Transform):
    def __init__(self, context: ResolutionContext):
        self.context = context

    def apply(self, content: str) -> str:
        return rewrite_links(content, self.context)
