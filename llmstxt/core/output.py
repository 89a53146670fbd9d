from pathlib import Path
import structlog
from llmstxt.exceptions import OutputError

log = structlog.get_logger(__name__)

def ensure_parent_dir(output_file_path: Path):
    # creates the destination directory; an existing directory is fine.
    try:
        output_file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(str(e)) from e

def write_to_file(output_file_path: Path, text_content: str):
    # writes text content to the specified file path, replacing any previous content.
    log.info("writing_output_to_file", path=str(output_file_path), chars=len(text_content))
    try:
        output_file_path.write_text(text_content, encoding="utf-8", newline="")
    except OSError as e:
        raise OutputError(str(e)) from e
