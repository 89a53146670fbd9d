# llmstxt/config/__init__.py
"""
Configuration for a generation run: the settings dataclass and the
TOML/environment loader that produces it.
"""
from .settings import GeneratorConfig, BuildMode
from .loader import build_config, load_and_merge_configs, resolve_build_mode

__all__ = ["GeneratorConfig", "BuildMode", "build_config", "load_and_merge_configs", "resolve_build_mode"]
