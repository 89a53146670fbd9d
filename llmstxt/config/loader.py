# llmstxt/config/loader.py
"""
Handles loading and merging of configuration from TOML files, plugin
options, CLI flags and the execution-mode environment variables.
"""
import os
import toml
from pathlib import Path
from typing import Dict, Any, Mapping, Optional
from dataclasses import fields as dataclass_fields
import structlog

from llmstxt.exceptions import ConfigError

from .settings import GeneratorConfig, BuildMode

log = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAMES = [".llmstxt.toml", "llmstxt.toml", "pyproject.toml"]
USER_CONFIG_DIR = Path.home() / ".config" / "llmstxt"
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.toml"

# first variable that is set decides the mode.
MODE_ENV_VARS = ("LLMSTXT_ENV", "NODE_ENV")

# maps keys accepted in toml files and plugin options to GeneratorConfig attributes.
CONFIG_KEY_TO_GENERATORCONFIG_ATTR_MAP: Dict[str, str] = {
    "docs_dir": "docs_dir",
    "static_dir": "static_dir",
    "output_file": "output_file",
    "outputFile": "output_file",
    "exclude": "exclude_patterns",
    "exclude_patterns": "exclude_patterns",
    "mode": "mode",
}

def _load_toml_file_data(file_path: Path) -> Dict[str, Any]:
    if not file_path.is_file():
        return {}
    log.debug("loading_toml_config_file", path=str(file_path))
    try:
        data = toml.load(str(file_path))
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"could not read config file {file_path}: {e}") from e
    if file_path.name == "pyproject.toml":
        return data.get("tool", {}).get("llmstxt", {})
    return data

def load_and_merge_configs(start_dir: Optional[Path] = None) -> Dict[str, Any]:
    # user-level settings first, then the first project-local file found in start_dir.
    start_dir = Path(start_dir) if start_dir is not None else Path.cwd()
    merged_toml_data: Dict[str, Any] = {}
    if USER_CONFIG_FILE.is_file():
        log.info("loading_user_global_config", path=str(USER_CONFIG_FILE))
        merged_toml_data.update(_load_toml_file_data(USER_CONFIG_FILE))

    for filename in PROJECT_CONFIG_FILENAMES:
        candidate = start_dir / filename
        if candidate.is_file():
            project_settings = _load_toml_file_data(candidate)
            if project_settings:
                log.info("loading_project_local_config", path=str(candidate))
                merged_toml_data.update(project_settings)
                break
    if not merged_toml_data:
        log.debug("no_configuration_files_loaded", start_dir=str(start_dir))
    return merged_toml_data

def resolve_build_mode(environ: Optional[Mapping[str, str]] = None) -> Optional[BuildMode]:
    # reads the execution-mode signal. None means no variable is set at all.
    environ = os.environ if environ is None else environ
    for var_name in MODE_ENV_VARS:
        value = environ.get(var_name)
        if value is not None:
            mode = BuildMode.from_string(value)
            log.debug("build_mode_from_environment", variable=var_name, value=value, mode=mode.value)
            return mode
    return None

def _map_settings(raw_settings: Mapping[str, Any], source: str) -> Dict[str, Any]:
    mapped: Dict[str, Any] = {}
    for key, value in raw_settings.items():
        attr = CONFIG_KEY_TO_GENERATORCONFIG_ATTR_MAP.get(key)
        if attr is None:
            log.warning("unknown_config_key_ignored", key=key, source=source)
            continue
        if value is None:
            continue
        if attr == "exclude_patterns":
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, (list, tuple)):
                raise ConfigError(f"'{key}' must be a list of glob patterns, got {type(value).__name__}")
            value = [str(p) for p in value]
        mapped[attr] = value
    return mapped

def build_config(
    site_dir: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GeneratorConfig:
    """
    Layers configuration sources into a GeneratorConfig.

    Precedence, lowest first: dataclass defaults, toml files, the mode
    environment variables (mode only), then explicit overrides coming from
    plugin options or CLI flags. Override values of None are ignored.
    """
    site_dir = Path(site_dir) if site_dir is not None else Path.cwd()
    effective_options: Dict[str, Any] = {}

    effective_options.update(_map_settings(load_and_merge_configs(site_dir), source="toml"))

    env_mode = resolve_build_mode(environ)
    if env_mode is not None:
        effective_options["mode"] = env_mode

    if overrides:
        effective_options.update(_map_settings(overrides, source="overrides"))

    valid_fields = {f.name for f in dataclass_fields(GeneratorConfig) if f.init}
    final_kwargs = {k: v for k, v in effective_options.items() if k in valid_fields}
    final_kwargs["site_dir"] = site_dir

    try:
        config = GeneratorConfig(**final_kwargs)
    except TypeError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
    log.debug("generator_config_built", site_dir=str(config.site_dir), mode=config.mode.value,
              output=str(config.output_path))
    return config
