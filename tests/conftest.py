"""Shared test fixtures for wikimd."""

from pathlib import Path

import pytest

from wikimd.config.models import WikiMdConfig
from wikimd.converter.models import WikiOptions
from wikimd.links import ResolutionContext

SAMPLE_PAGE = """\
<'''accent{color:#c33}width{max-width:40em}'''>
# Project Notes

See [the other page](another_file) and [a section](another_file#open questions).

![diagram](local:../images/diagram.png "Architecture")

Important paragraph. '{p s $accent}'
"""


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep tests away from any real ./wikimd.yaml or ~/.wikimd/config.yaml."""
    monkeypatch.setattr("wikimd.config.loader.USER_CONFIG_PATH", tmp_path / "no-user-config.yaml")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def wiki_dir(tmp_path) -> Path:
    """A wiki with two pages under ``wiki/bar``."""
    bar = tmp_path / "wiki" / "bar"
    bar.mkdir(parents=True)
    (bar / "another_file.wiki").write_text("# Another\n")
    (tmp_path / "wiki" / "top_level.wiki").write_text("# Top\n")
    return bar


@pytest.fixture
def sample_page(wiki_dir) -> Path:
    page = wiki_dir / "project_notes.wiki"
    page.write_text(SAMPLE_PAGE)
    return page


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "site_html" / "bar"


@pytest.fixture
def context(wiki_dir, output_dir) -> ResolutionContext:
    return ResolutionContext(input_dir=wiki_dir, output_dir=output_dir, extension="wiki")


@pytest.fixture
def sample_options(sample_page, output_dir) -> WikiOptions:
    return WikiOptions(
        extension="wiki",
        output_dir=str(output_dir),
        input_file=str(sample_page),
        root_path="../",
    )


@pytest.fixture
def sample_config() -> WikiMdConfig:
    return WikiMdConfig()
