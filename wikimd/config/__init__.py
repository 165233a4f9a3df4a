from .loader import load_config, save_config
from .models import MarkdownConfig, WikiMdConfig

__all__ = [
    "MarkdownConfig",
    "WikiMdConfig",
    "load_config",
    "save_config",
]
