"""Pydantic models for the document conversion pipeline."""

from __future__ import annotations

from pydantic import BaseModel


class WikiOptions(BaseModel):
    """Per-document inputs, as passed by vimwiki or the CLI."""

    extension: str = "wiki"
    output_dir: str
    input_file: str
    template_file: str | None = None
    root_path: str = "./"


class ConversionResult(BaseModel):
    """Result of converting one wiki page."""

    source_path: str
    markdown: str  # after variable and link processing
    body_html: str
    html: str  # full page
    output_path: str
