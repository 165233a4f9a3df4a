from pydantic import BaseModel, Field
from typing import Literal

from wikimd.render.markdown import DEFAULT_EXTENSIONS


class MarkdownConfig(BaseModel):
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))


class WikiMdConfig(BaseModel):
    highlight_theme: str = "default"
    extension: str = "wiki"
    root_path: str = "./"
    template_file: str | None = None
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
