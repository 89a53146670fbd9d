# llmstxt/core/pipeline.py
import sys

from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.console import Console as RichConsole
import structlog
import logging as stdlib_logging

from llmstxt.config.settings import GeneratorConfig
from llmstxt.core.assembler import AssembledContent, assemble
from llmstxt.core.discovery.pattern_matching import compile_glob_patterns_to_spec


log = structlog.get_logger(__name__)


class LlmsTxtGenerator:
    # runs one generation for a resolved configuration.
    def __init__(self, config: GeneratorConfig):
        self.config: GeneratorConfig = config
        self.log = structlog.get_logger(f"{__name__}.{self.__class__.__name__}")
        self.result: AssembledContent = AssembledContent()

    def confirmation_message(self) -> str:
        return f"Generated: {self.config.output_path} ({self.config.mode.value} mode)"

    def generate(self) -> AssembledContent:
        exclude_spec = compile_glob_patterns_to_spec(self.config.exclude_patterns)
        self.log.info("generation_started", docs=str(self.config.docs_path),
                      output=str(self.config.output_path), mode=self.config.mode.value)

        app_log_level = stdlib_logging.getLogger("llmstxt").getEffectiveLevel()
        progress_disabled = app_log_level > stdlib_logging.INFO or not sys.stderr.isatty()
        stderr_console = RichConsole(file=sys.stderr)

        with Progress(
            SpinnerColumn(), TextColumn("[bold blue]{task.description}"),
            transient=True, disable=progress_disabled, console=stderr_console
        ) as progress:
            task = progress.add_task(f"assembling {self.config.output_path.name}...", total=None)
            self.result = assemble(
                self.config.docs_path,
                self.config.output_path,
                self.config.is_development,
                exclude_spec=exclude_spec,
            )
            progress.update(task, completed=True,
                            description=f"included {len(self.result.included)} documents.")

        self.log.info("generation_complete", output=str(self.config.output_path),
                      included=len(self.result.included), skipped=len(self.result.skipped))
        return self.result
