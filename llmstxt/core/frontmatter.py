# llmstxt/core/frontmatter.py
"""
Front matter handling: locating the leading ``---`` block of a document,
parsing it into a typed FrontMatter, and removing it from the body text.
"""
import re
from typing import Any, Dict, Mapping, Optional, Tuple

import structlog
import yaml

from llmstxt.core.models import FrontMatter

log = structlog.get_logger(__name__)

FRONT_MATTER_DELIMITER = "---"
TRUTHY_STRINGS = {"true", "yes", "on", "1"}
KNOWN_KEYS = ("sidebar_position", "draft", "hidden", "unlisted")
KNOWN_KEY_LINE = re.compile(r"^(" + "|".join(KNOWN_KEYS) + r")\s*:.*$")


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONT_MATTER_DELIMITER


def split_front_matter(raw_text: str) -> Optional[Tuple[str, str]]:
    """Returns ``(block, remainder)`` or None when the text has no closed block.

    The opening delimiter must be the very first line; the block ends at the
    next line consisting solely of the delimiter.
    """
    lines = raw_text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return None
    for idx in range(1, len(lines)):
        if _is_delimiter(lines[idx]):
            return "".join(lines[1:idx]), "".join(lines[idx + 1:])
    return None


def strip_metadata(raw_text: str) -> str:
    # pure text transform: drop the front matter block, trailing blank lines and outer whitespace.
    parts = split_front_matter(raw_text)
    if parts is None:
        return raw_text.strip()
    _, remainder = parts
    return remainder.strip()


def coerce_position(value: Any) -> Optional[int]:
    # integer ordering hint, or None when the value is not integer-like.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def coerce_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return False


def load_yaml_mapping(text: str, source: str) -> Optional[Mapping[str, Any]]:
    # parses a yaml document into a mapping; malformed or non-mapping input yields None.
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        log.debug("yaml_parse_failed", source=source, error=str(e))
        return None
    if not isinstance(data, dict):
        if data is not None:
            log.debug("yaml_not_a_mapping", source=source, data_type=type(data).__name__)
        return None
    return {str(k): v for k, v in data.items()}


def scan_known_keys(block: str, source: str) -> Dict[str, Any]:
    """Recovers the recognised top-level keys one line at a time.

    Used when the block as a whole is not valid YAML, so that one bad line
    (an unquoted colon in a title, say) does not discard the visibility
    flags or the position on the other lines.
    """
    recovered: Dict[str, Any] = {}
    for line in block.splitlines():
        if not KNOWN_KEY_LINE.match(line):
            continue
        try:
            data = yaml.safe_load(line)
        except yaml.YAMLError:
            log.debug("front_matter_line_unparsable", source=source, line=line)
            continue
        if isinstance(data, dict):
            recovered.update(data)
    if recovered:
        log.debug("front_matter_keys_recovered", source=source, keys=sorted(recovered))
    return recovered


def parse_front_matter(raw_text: str, source: str = "<text>") -> Optional[FrontMatter]:
    """Parses the metadata block of a document.

    Returns None when there is no block at all. A block that exists but is
    not valid YAML still yields the recognised keys found on its own
    well-formed lines; fields with the wrong type are left absent.
    """
    parts = split_front_matter(raw_text)
    if parts is None:
        return None
    block, _ = parts
    data = load_yaml_mapping(block, source)
    if data is None:
        data = scan_known_keys(block, source)

    position = coerce_position(data.get("sidebar_position"))
    if "sidebar_position" in data and position is None:
        log.debug("sidebar_position_unparsable", source=source, value=repr(data["sidebar_position"]))

    return FrontMatter(
        sidebar_position=position,
        draft=coerce_flag(data.get("draft")),
        hidden=coerce_flag(data.get("hidden")),
        unlisted=coerce_flag(data.get("unlisted")),
        extra={k: v for k, v in data.items() if k not in KNOWN_KEYS},
    )
