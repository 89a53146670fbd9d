# llmstxt/plugin.py
"""
Host integration: a plugin object exposing the content-load lifecycle hook
and a hook that registers the generate command on the host's click group.
"""
from pathlib import Path
from typing import Any, Mapping, Optional

import click
import structlog

from llmstxt.config.loader import build_config
from llmstxt.core.assembler import AssembledContent
from llmstxt.core.pipeline import LlmsTxtGenerator

log = structlog.get_logger(__name__)

PLUGIN_NAME = "generate-llms-txt-plugin"
COMMAND_NAME = "generate-llms-txt"


class LlmsTxtPlugin:
    """Generates ``static/llms.txt`` for a documentation site.

    ``options`` accepts the same keys as the toml configuration
    (``output_file``/``outputFile``, ``docs_dir``, ``static_dir``,
    ``exclude``, ``mode``). The build mode is read from the environment
    once, when the plugin is constructed, unless ``mode`` is given.
    """

    name = PLUGIN_NAME

    def __init__(
        self,
        site_dir: Path,
        options: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config = build_config(Path(site_dir), overrides=options or {}, environ=environ)

    def generate_content(self) -> AssembledContent:
        generator = LlmsTxtGenerator(self.config)
        result = generator.generate()
        click.echo(generator.confirmation_message(), err=True)
        return result

    async def load_content(self) -> AssembledContent:
        # lifecycle hook; generation itself is synchronous.
        log.debug("plugin_load_content", plugin=self.name)
        return self.generate_content()

    def extend_cli(self, cli: click.Group) -> click.Command:
        # registers a flag-less command on the host cli.
        from llmstxt.cli.interface import run_generation

        @cli.command(COMMAND_NAME, help="Generate the LLMs text file.")
        def generate_llms_txt_command():
            run_generation(self.config)

        return generate_llms_txt_command
