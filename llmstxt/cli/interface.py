# llmstxt/cli/interface.py
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from click_option_group import optgroup
import structlog

from llmstxt import __version__ as app_version
from llmstxt.config.loader import build_config
from llmstxt.config.settings import (
    GeneratorConfig, BuildMode,
    DEFAULT_DOCS_DIR, DEFAULT_STATIC_DIR, DEFAULT_OUTPUT_FILE,
)
from llmstxt.core.pipeline import LlmsTxtGenerator
from llmstxt.exceptions import LlmsTxtError
from llmstxt.logging_setup import configure_logging

log = structlog.get_logger(__name__)


def _print_cli_summary_output(generator: LlmsTxtGenerator):
    result = generator.result
    click.secho(generator.confirmation_message(), fg="green", err=True)
    click.echo(f"Documents included: {len(result.included)}, skipped: {len(result.skipped)}", err=True)


def run_generation(config: GeneratorConfig):
    # runs one generation and maps failures to a red message and exit code 1.
    log.info("generation_orchestration_started", site_dir=str(config.site_dir))
    try:
        generator = LlmsTxtGenerator(config)
        generator.generate()
    except (LlmsTxtError, OSError) as e:
        log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
    _print_cli_summary_output(generator)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@click.option("--json-logs", "json_logs", is_flag=True, default=False, help="Emit logs as JSON.")
@click.version_option(version=app_version, package_name="llmstxt", prog_name="llmstxt", help="Show version and exit.")
def main_cli_group(verbosity_level: int, json_logs: bool):
    """llmstxt: concatenate a documentation tree into a single llms.txt
    file for LLM ingestion."""
    log_level = "warning"
    if verbosity_level == 1: log_level = "info"
    elif verbosity_level >= 2: log_level = "debug"
    configure_logging(log_level_str=log_level, json_logs=json_logs)


@main_cli_group.command("generate-llms-txt")
@optgroup.group("Site Layout", help="Where the documentation and static assets live.")
@optgroup.option("--site-dir", "site_dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Site root. Default: current directory.")
@optgroup.option("--docs-dir", "docs_dir", type=click.Path(path_type=Path), default=None, help=f"Docs directory, relative to the site root. Default: {DEFAULT_DOCS_DIR}.")
@optgroup.option("--static-dir", "static_dir", type=click.Path(path_type=Path), default=None, help=f"Static assets directory, relative to the site root. Default: {DEFAULT_STATIC_DIR}.")
@optgroup.group("Output", help="Where the generated file is written.")
@optgroup.option("-o", "--output-file", "output_file", type=click.Path(dir_okay=False, path_type=Path), default=None, help=f"Output file, relative to the static directory. Default: {DEFAULT_OUTPUT_FILE}.")
@optgroup.group("Content Selection", help="Which documents end up in the output.")
@optgroup.option("--mode", "mode", type=click.Choice([m.value for m in BuildMode]), default=None, help="Build mode. Default: from LLMSTXT_ENV / NODE_ENV, else production.")
@optgroup.option("-e", "--exclude", "exclude_patterns", multiple=True, help="Glob patterns (relative to the docs directory) to leave out.")
def generate_llms_txt_command(site_dir: Optional[Path], **cli_params: Any):
    """Generate the LLMs text file."""
    log.debug("cli_command_invoked", params=cli_params)
    overrides: Dict[str, Any] = {k: v for k, v in cli_params.items() if v is not None}
    if not overrides.get("exclude_patterns"):
        overrides.pop("exclude_patterns", None)
    else:
        overrides["exclude_patterns"] = list(overrides["exclude_patterns"])

    try:
        config = build_config(site_dir, overrides=overrides)
    except LlmsTxtError as e:
        log.error("config_error_in_cli", message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    run_generation(config)
