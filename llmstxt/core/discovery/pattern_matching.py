from pathlib import Path
from typing import Optional, List
import pathspec
import structlog

from llmstxt.exceptions import ConfigError

log = structlog.get_logger(__name__)

def compile_glob_patterns_to_spec(glob_patterns: List[str]) -> Optional[pathspec.PathSpec]:
    # compiles a list of glob patterns into a pathspec object for matching.
    if not glob_patterns:
        return None
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", glob_patterns)
    except Exception as e:
        raise ConfigError(f"error compiling exclude patterns {glob_patterns}: {e}") from e

def is_path_excluded(
    path_relative_to_root: Path,
    exclude_spec: Optional[pathspec.PathSpec],
    is_dir: bool = False,
) -> bool:
    # directories get a trailing slash so "dir/" style patterns match them.
    if exclude_spec is None:
        return False
    path_str = path_relative_to_root.as_posix()
    if is_dir:
        path_str += "/"
    return exclude_spec.match_file(path_str)
