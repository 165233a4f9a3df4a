"""Post-render HTML directives."""

from .applier import apply_directives, collect_mutations, parse_directive, strip_directives
from .models import AttributeKind, Directive, DirectiveMutation, ElementTarget

__all__ = [
    "AttributeKind",
    "Directive",
    "DirectiveMutation",
    "ElementTarget",
    "apply_directives",
    "collect_mutations",
    "parse_directive",
    "strip_directives",
]
