"""Transform pipeline for converting wiki markdown to publishable HTML."""

from .pipeline import Transform, TransformPipeline
from .link_rewriter import LinkRewriter
from .substitution import DirectiveApplier, VariableSubstitution

__all__ = [
    "Transform",
    "TransformPipeline",
    "LinkRewriter",
    "DirectiveApplier",
    "VariableSubstitution",
]
