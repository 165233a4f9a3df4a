"""Wiki page to HTML converter.

Stages, in order: read source → substitute variables → rewrite links →
render markdown → apply directives → fill the page template.
"""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path

from wikimd.config.models import WikiMdConfig
from wikimd.converter.models import ConversionResult, WikiOptions
from wikimd.links import ResolutionContext
from wikimd.render import (
    insert_content,
    load_template,
    render_markdown,
    render_template,
    title_case,
)
from wikimd.transform import (
    DirectiveApplier,
    LinkRewriter,
    TransformPipeline,
    VariableSubstitution,
)

logger = logging.getLogger(__name__)


class WikiConverter:
    """Converts a single wiki page. Holds no state between documents."""

    def __init__(self, options: WikiOptions, config: WikiMdConfig | None = None) -> None:
        self.options = options
        self.config = config or WikiMdConfig()

    @cached_property
    def context(self) -> ResolutionContext:
        return ResolutionContext.for_document(
            self.options.input_file,
            self.options.output_dir,
            self.options.extension,
        )

    @cached_property
    def markdown_pipeline(self) -> TransformPipeline:
        return TransformPipeline([VariableSubstitution(), LinkRewriter(self.context)])

    @cached_property
    def html_pipeline(self) -> TransformPipeline:
        return TransformPipeline([DirectiveApplier()])

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def stem(self) -> str:
        return Path(self.options.input_file).stem

    @property
    def title(self) -> str:
        return title_case(self.stem)

    def output_filepath(self) -> Path:
        return Path(self.options.output_dir) / f"{self.stem}.html"

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def read_source(self) -> str:
        return Path(self.options.input_file).read_text(encoding="utf-8")

    def preprocess(self, text: str | None = None) -> str:
        """Return the markdown with variables substituted and links rewritten."""
        if text is None:
            text = self.read_source()
        logger.debug("preprocessing %s", self.options.input_file)
        return self.markdown_pipeline.apply(text)

    def render_body(self, markdown: str) -> str:
        html = render_markdown(markdown, self.config.markdown.extensions)
        return self.html_pipeline.apply(html)

    def get_body_html(self) -> str:
        return self.render_body(self.preprocess())

    def get_template_html(self) -> str:
        template_file = self.options.template_file or self.config.template_file
        return render_template(
            load_template(template_file),
            root_path=self.options.root_path,
            title=self.title,
            code_theme=self.config.highlight_theme,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert(self) -> ConversionResult:
        """Run every stage. Any failure propagates; nothing is written."""
        markdown = self.preprocess()
        body_html = self.render_body(markdown)
        html = insert_content(self.get_template_html(), body_html)
        return ConversionResult(
            source_path=self.options.input_file,
            markdown=markdown,
            body_html=body_html,
            html=html,
            output_path=str(self.output_filepath()),
        )

    def to_html(self) -> str:
        return self.convert().html

    def to_html_and_save(self) -> Path:
        """Convert and write the page to ``output_filepath()``."""
        result = self.convert()
        dest = Path(result.output_path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(result.html, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", dest, len(result.html))
        return dest


def to_html(options: WikiOptions, config: WikiMdConfig | None = None) -> str:
    return WikiConverter(options, config).to_html()


def to_html_and_save(options: WikiOptions, config: WikiMdConfig | None = None) -> Path:
    return WikiConverter(options, config).to_html_and_save()
