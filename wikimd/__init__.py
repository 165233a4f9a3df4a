"""Convert vimwiki markdown pages to standalone HTML."""

__version__ = "0.1.0"
