"""Author-defined variables embedded in markdown source.

A document may carry one definition block::

    <'''color{#c33}width{40%}'''>

and reference the values inside quoted braces, e.g. ``'{p s color:$color}'``.
The block is removed from the output and every reference is substituted.
"""

from __future__ import annotations

import logging
import re

from wikimd.errors import UnresolvedVariableError

logger = logging.getLogger(__name__)

DEFINITION_RE = re.compile(r"<'''(?P<data>.*)'''>", re.DOTALL)
PAIR_RE = re.compile(r"(?P<key>\S*?)\{(?P<value>[^}]*?)\}")
# "after" always swallows the closing brace of the marker
REFERENCE_RE = re.compile(r"'\{(?P<before>.*?)\$(?P<var>\S+?)(?P<after>\s.*?\}|\})'")


class VariableStore:
    def __init__(self) -> None:
        self.variables: dict[str, str] = {}

    def parse_variables(self, text: str) -> None:
        """Collect ``key{value}`` pairs from the first definition block."""
        match = DEFINITION_RE.search(text)
        if match is None:
            return
        for pair in PAIR_RE.finditer(match["data"]):
            self.variables[pair["key"]] = pair["value"]
        logger.debug("parsed %d variable(s)", len(self.variables))

    def clear_variables(self, text: str) -> str:
        return DEFINITION_RE.sub("", text)

    def replace_variables(self, text: str) -> str:
        """Substitute every reference in a single pass.

        Values are not expanded again, so ``$name`` inside a value survives.
        """
        return REFERENCE_RE.sub(self._substitute, text)

    def _substitute(self, match: re.Match) -> str:
        name = match["var"]
        try:
            value = self.variables[name]
        except KeyError:
            raise UnresolvedVariableError(name) from None
        after = match["after"][:-1]
        return f"'{{{match['before']}{value}{after}}}'"

    def parse(self, text: str) -> str:
        """Parse the definition block, strip it and substitute references."""
        self.parse_variables(text)
        cleaned = self.clear_variables(text)
        return self.replace_variables(cleaned)


def preprocess_variables(markdown: str) -> str:
    return VariableStore().parse(markdown)
