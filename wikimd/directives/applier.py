"""Applies ``'{target type data}'`` directives to rendered HTML.

The tree is walked once and every directive is turned into a
``DirectiveMutation`` addressed by node index. Mutations are applied after
the walk, then all marker text is removed from the serialized document.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, NavigableString
from bs4.element import PreformattedString

from .models import AttributeKind, Directive, DirectiveMutation, ElementTarget

logger = logging.getLogger(__name__)

DIRECTIVE_RE = re.compile(r"'\{(?P<element>\S+)\s+(?P<type>\S+)\s+(?P<data>.*?)\}'")


def parse_directive(text: str) -> Directive | None:
    """Parse the first directive marker in *text*, if any.

    Raises UnknownDirectiveError for tokens outside the vocabulary.
    """
    match = DIRECTIVE_RE.search(text)
    if match is None:
        return None
    attribute = AttributeKind.from_token(match["type"])
    target = ElementTarget.from_token(match["element"])
    return Directive(target=target, attribute=attribute, data=match["data"])


def _is_text(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def collect_mutations(nodes: list) -> list[DirectiveMutation]:
    """Walk *nodes* in document order and record one mutation per directive."""
    index_of = {id(node): i for i, node in enumerate(nodes)}
    mutations: list[DirectiveMutation] = []
    for node in nodes:
        if not _is_text(node):
            continue
        directive = parse_directive(str(node))
        if directive is None:
            continue
        # ElementTarget.PARENT is the only target
        parent_index = index_of.get(id(node.parent))
        if parent_index is None:
            logger.debug("directive %r has no parent element", directive)
            continue
        mutations.append(
            DirectiveMutation(
                node_index=parent_index,
                attribute=directive.attribute.value,
                value=directive.data,
            )
        )
    return mutations


def strip_directives(html: str) -> str:
    return DIRECTIVE_RE.sub("", html)


def apply_directives(html: str) -> str:
    """Apply every directive in *html* and remove the markers."""
    soup = BeautifulSoup(html, "html.parser")
    nodes = list(soup.descendants)

    mutations = collect_mutations(nodes)
    for mutation in mutations:
        nodes[mutation.node_index][mutation.attribute] = mutation.value
    logger.debug("applied %d directive(s)", len(mutations))

    return strip_directives(str(soup))
