from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional
import structlog

log = structlog.get_logger(__name__)

DEFAULT_DOCS_DIR = "docs"
DEFAULT_STATIC_DIR = "static"
DEFAULT_OUTPUT_FILE = "llms.txt"

class BuildMode(Enum):
    # execution context controlling whether draft documents are emitted.
    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, s: Optional[str]) -> "BuildMode":
        # only an explicit "development" selects development; anything else is production.
        if s and s.strip().lower() == cls.DEVELOPMENT.value:
            return cls.DEVELOPMENT
        return cls.PRODUCTION

DEFAULT_BUILD_MODE = BuildMode.PRODUCTION

@dataclass
class GeneratorConfig:
    # holds all configuration parameters for a single generation run.
    site_dir: Path = field(default_factory=Path.cwd)
    docs_dir: Path = Path(DEFAULT_DOCS_DIR)
    static_dir: Path = Path(DEFAULT_STATIC_DIR)
    output_file: Path = Path(DEFAULT_OUTPUT_FILE)
    mode: BuildMode = DEFAULT_BUILD_MODE
    exclude_patterns: List[str] = field(default_factory=list)

    def __post_init__(self):
        # coerces string values coming from toml files or plugin options.
        self.site_dir = Path(self.site_dir).resolve()
        self.docs_dir = Path(self.docs_dir)
        self.static_dir = Path(self.static_dir)
        self.output_file = Path(self.output_file)
        if isinstance(self.mode, str):
            self.mode = BuildMode.from_string(self.mode)

    @property
    def is_development(self) -> bool:
        return self.mode is BuildMode.DEVELOPMENT

    @property
    def docs_path(self) -> Path:
        return self.site_dir / self.docs_dir

    @property
    def output_path(self) -> Path:
        # absolute output_file values are kept as-is by the path join.
        return self.site_dir / self.static_dir / self.output_file
