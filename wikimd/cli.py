"""CLI entry point for wikimd."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax

from wikimd.config import WikiMdConfig, load_config, save_config
from wikimd.config.loader import DEFAULT_CONFIG_TEMPLATE, USER_CONFIG_PATH
from wikimd.converter import WikiConverter, WikiOptions
from wikimd.errors import WikiMdError
from wikimd.logging_config import setup_logging
from wikimd.vimwiki import parse_vimwiki_args

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wikimd",
    help="Convert vimwiki markdown pages to standalone HTML.",
)

config_app = typer.Typer(help="Manage wikimd configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: WikiMdConfig | None = None


def _get_config() -> WikiMdConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to wikimd.yaml")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    setup_logging("debug" if verbose else _config.log_level, _config.log_format)


def _run(options: WikiOptions, cfg: WikiMdConfig, *, dry_run: bool = False) -> None:
    """Convert one page and report the outcome."""
    converter = WikiConverter(options, cfg)
    try:
        if dry_run:
            result = converter.convert()
            rprint("[yellow](dry run, nothing written)[/yellow]\n")
            rprint(Syntax(result.body_html, "html"))
            dest = Path(result.output_path)
        else:
            dest = converter.to_html_and_save()
    except (WikiMdError, OSError, ValueError) as e:
        logger.debug("conversion of %s failed", options.input_file, exc_info=True)
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    rprint(
        Panel(
            f"[dim]Source:[/dim]  {options.input_file}\n"
            f"[dim]Output:[/dim]  {dest}",
            title="Conversion Result",
            border_style="green",
        )
    )


@app.command()
def convert(
    file: str = typer.Argument(..., help="Wiki page to convert"),
    output: str = typer.Option(..., "--output", "-o", help="Output directory"),
    extension: str | None = typer.Option(
        None, "--ext", "-e", help="Extension of wiki pages (default from config)"
    ),
    template: str | None = typer.Option(None, "--template", "-t", help="Page template"),
    root: str | None = typer.Option(None, "--root", help="Relative path to the wiki root"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Render without writing"),
) -> None:
    """Convert a single wiki page to HTML."""
    cfg = _get_config()
    options = WikiOptions(
        extension=extension or cfg.extension,
        output_dir=output,
        input_file=file,
        template_file=template,
        root_path=root or cfg.root_path,
    )
    _run(options, cfg, dry_run=dry_run)


@app.command()
def vimwiki(
    args: list[str] = typer.Argument(
        ..., help="The 11 positional arguments vimwiki passes to custom_wiki2html"
    ),
) -> None:
    """Convert a page using vimwiki's custom_wiki2html argument convention."""
    cfg = _get_config()
    try:
        vimwiki_args = parse_vimwiki_args(args)
    except WikiMdError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _run(vimwiki_args.to_options(), cfg)


def vimwiki_entry() -> None:
    """Console script used as vimwiki's ``custom_wiki2html``."""
    app(["vimwiki", "--", *sys.argv[1:]], prog_name="wikimd-vimwiki")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default wikimd.yaml in current directory."""
    target = Path("wikimd.yaml")
    if target.exists() and not force:
        rprint("[yellow]wikimd.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


@config_app.command("save")
def config_save(
    path: str = typer.Argument(str(USER_CONFIG_PATH), help="Destination file"),
) -> None:
    """Write the resolved configuration to PATH."""
    dest = save_config(_get_config(), path)
    rprint(f"[green]Saved[/green] {dest}")


if __name__ == "__main__":
    app()
