"""Markdown- and HTML-stage wrappers for variables and directives."""

from wikimd.directives import apply_directives
from wikimd.variables import preprocess_variables

from .pipeline import Transform


class VariableSubstitution(Transform):
    """Strips the variable block and substitutes ``$name`` references."""

    def apply(self, content: str) -> str:
        return preprocess_variables(content)


class DirectiveApplier(Transform):
    """Applies ``'{target type data}'`` markers to rendered HTML."""

    def apply(self, content: str) -> str:
        return apply_directives(content)
