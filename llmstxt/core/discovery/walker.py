# llmstxt/core/discovery/walker.py
import os
from pathlib import Path
from typing import Iterator, List, Optional
import pathspec
import structlog

from llmstxt.core.frontmatter import coerce_position, load_yaml_mapping, parse_front_matter
from llmstxt.core.models import DirectoryEntry, Document, EntryKind
from llmstxt.core.discovery.pattern_matching import is_path_excluded
from llmstxt.exceptions import translate_os_error
from llmstxt.util import read_text_file

log = structlog.get_logger(__name__)

DOCUMENT_EXTENSIONS = (".md", ".mdx")
# checked in this order; the first existing sidecar wins.
CATEGORY_SIDECAR_NAMES = ("_category_.yml", "_category_.yaml", "_category_.json")


def read_category_position(directory: Path) -> Optional[int]:
    """Reads ``position`` from the category sidecar inside ``directory``.

    A missing, unreadable or malformed sidecar yields None; it never fails
    the walk.
    """
    for sidecar_name in CATEGORY_SIDECAR_NAMES:
        sidecar = directory / sidecar_name
        if not os.path.isfile(sidecar):
            continue
        try:
            text = read_text_file(sidecar)
        except OSError as e:
            log.debug("category_sidecar_unreadable", path=str(sidecar), error=str(e))
            return None
        data = load_yaml_mapping(text, source=str(sidecar))
        if data is None:
            log.debug("category_sidecar_unparsable", path=str(sidecar))
            return None
        return coerce_position(data.get("position"))
    return None


def load_document(file_path: Path) -> Document:
    # reads a document and its front matter; read failures are raised as discovery errors.
    try:
        raw_text = read_text_file(file_path)
    except OSError as e:
        raise translate_os_error(e) from e
    return Document(
        path=file_path,
        raw_text=raw_text,
        front_matter=parse_front_matter(raw_text, source=str(file_path)),
    )


def _sort_key(entry: DirectoryEntry):
    # undefined keys sort after every defined key.
    return (entry.order_key is None, entry.order_key if entry.order_key is not None else 0)


def list_ordered(
    directory: Path,
    root: Optional[Path] = None,
    exclude_spec: Optional[pathspec.PathSpec] = None,
) -> List[DirectoryEntry]:
    """Lists the immediate children of ``directory`` in sidebar order.

    Subdirectories become categories keyed by their sidecar ``position``;
    ``.md``/``.mdx`` files become documents keyed by ``sidebar_position``.
    Everything else is skipped. Children are listed by name first, so ties
    on the order key fall back to lexicographic name order.
    """
    directory = Path(directory)
    root = Path(root) if root is not None else directory
    try:
        with os.scandir(directory) as it:
            dir_entries = sorted(it, key=lambda d: d.name)
    except OSError as e:
        raise translate_os_error(e) from e

    entries: List[DirectoryEntry] = []
    for dir_entry in dir_entries:
        child = Path(dir_entry.path)
        # only real directories are descended into; symlinked directories are skipped.
        if dir_entry.is_dir(follow_symlinks=False):
            if is_path_excluded(child.relative_to(root), exclude_spec, is_dir=True):
                log.debug("category_excluded", path=str(child))
                continue
            entries.append(DirectoryEntry(
                kind=EntryKind.CATEGORY,
                path=child,
                order_key=read_category_position(child),
            ))
        elif dir_entry.name.endswith(DOCUMENT_EXTENSIONS) and dir_entry.is_file():
            if is_path_excluded(child.relative_to(root), exclude_spec):
                log.debug("document_excluded", path=str(child))
                continue
            document = load_document(child)
            entries.append(DirectoryEntry(
                kind=EntryKind.DOCUMENT,
                path=child,
                order_key=document.order_key,
                document=document,
            ))

    entries.sort(key=_sort_key)
    log.debug("walk_directory_listed", directory=str(directory), entries=len(entries))
    return entries


def _walk_from(
    directory: Path,
    root: Path,
    exclude_spec: Optional[pathspec.PathSpec],
) -> List[Document]:
    leaves: List[Document] = []
    for entry in list_ordered(directory, root=root, exclude_spec=exclude_spec):
        if entry.kind is EntryKind.CATEGORY:
            leaves.extend(_walk_from(entry.path, root, exclude_spec))
        elif entry.document is not None:
            leaves.append(entry.document)
    return leaves


def walk(directory: Path, exclude_spec: Optional[pathspec.PathSpec] = None) -> Iterator[Document]:
    """Yields every document under ``directory`` depth-first, pre-order.

    Each level is fully listed and ordered before descending, and a
    category's documents are emitted contiguously at the category's
    position among its siblings.
    """
    directory = Path(directory)
    log.info("docs_walk_started", root=str(directory))
    leaves = _walk_from(directory, directory, exclude_spec)
    log.info("docs_walk_finished", root=str(directory), documents=len(leaves))
    yield from leaves
