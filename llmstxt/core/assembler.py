# llmstxt/core/assembler.py
"""
Turns the walker's ordered documents into the llms.txt artifact: applies the
visibility policy, strips front matter, formats one section per document
and writes the joined result in a single write.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import pathspec
import structlog

from llmstxt.core.discovery.walker import walk
from llmstxt.core.frontmatter import strip_metadata
from llmstxt.core.models import Document
from llmstxt.core.output import ensure_parent_dir, write_to_file
from llmstxt.util import relative_label

log = structlog.get_logger(__name__)

SECTION_SEPARATOR = "\n\n---\n\n"
SECTION_HEADER_PREFIX = "// File: "


@dataclass
class AssembledContent:
    # result of one assembly: the joined text plus the labels that went in or were skipped.
    text: str = ""
    included: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def should_include(document: Document, is_development: bool) -> bool:
    # hidden and unlisted are always excluded; drafts only appear in development.
    front_matter = document.front_matter
    if front_matter is None:
        return True
    if front_matter.hidden or front_matter.unlisted:
        return False
    if front_matter.draft:
        return is_development
    return True


def format_section(document: Document, root: Path) -> str:
    label = relative_label(document.path, root)
    return f"{SECTION_HEADER_PREFIX}{label}\n\n{strip_metadata(document.raw_text)}"


def build_content(
    root: Path,
    is_development: bool,
    exclude_spec: Optional[pathspec.PathSpec] = None,
) -> AssembledContent:
    root = Path(root)
    result = AssembledContent()
    sections: List[str] = []
    for document in walk(root, exclude_spec=exclude_spec):
        label = relative_label(document.path, root)
        if not should_include(document, is_development):
            log.debug("document_skipped_by_visibility", document=label)
            result.skipped.append(label)
            continue
        sections.append(format_section(document, root))
        result.included.append(label)
    result.text = SECTION_SEPARATOR.join(sections)
    return result


def assemble(
    root: Path,
    output_path: Path,
    is_development: bool,
    exclude_spec: Optional[pathspec.PathSpec] = None,
) -> AssembledContent:
    """Generates the artifact for ``root`` and writes it to ``output_path``.

    The whole text is built in memory before the single write, so a failure
    while reading any document leaves an existing output file untouched.
    """
    output_path = Path(output_path)
    ensure_parent_dir(output_path)
    result = build_content(root, is_development, exclude_spec=exclude_spec)
    write_to_file(output_path, result.text)
    log.info("llms_txt_assembled", output=str(output_path), included=len(result.included),
             skipped=len(result.skipped), development=is_development)
    return result
