"""Utility modules for complex-split."""

from complex_split.utils.config import load_config, render_config, write_default_config

__all__ = ["load_config", "render_config", "write_default_config"]
