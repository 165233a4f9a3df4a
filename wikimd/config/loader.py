"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import WikiMdConfig

USER_CONFIG_PATH = Path.home() / ".wikimd" / "config.yaml"


def load_config(cli_path: str | None = None) -> WikiMdConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./wikimd.yaml"),
        USER_CONFIG_PATH,
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return WikiMdConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except (TypeError, ValidationError) as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return WikiMdConfig()


def save_config(config: WikiMdConfig, path: str | Path) -> Path:
    """Write *config* as YAML, creating parent directories."""
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(yaml.safe_dump(config.model_dump(), default_flow_style=False, sort_keys=False))
    return dest


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `wikimd config init`
DEFAULT_CONFIG_TEMPLATE = """\
# wikimd.yaml

# Theme name substituted for %code_theme% in page templates
highlight_theme: "default"

# Wiki page extension; links to existing <name>.<extension> files become <name>.html
extension: "wiki"

# Relative path from a page to the wiki root (%root_path%)
root_path: "./"

# Page template; omit to use the built-in template
# template_file: "~/vimwiki/templates/default.tpl"

# Python-Markdown extensions
markdown:
  extensions:
    - footnotes
    - tables
    - fenced_code
    - sane_lists

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
