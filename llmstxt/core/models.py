# llmstxt/core/models.py
"""Transient data built during one generation run and discarded afterwards."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class EntryKind(Enum):
    DOCUMENT = "document"
    CATEGORY = "category"


@dataclass(frozen=True)
class FrontMatter:
    """Typed view of a document's leading metadata block.

    Fields that are missing or fail to parse are left at their defaults:
    an unparsable ``sidebar_position`` is ``None`` and an unrecognised flag
    value is ``False``. Unknown keys are kept in ``extra`` untouched.
    """

    sidebar_position: Optional[int] = None
    draft: bool = False
    hidden: bool = False
    unlisted: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Document:
    path: Path
    raw_text: str
    front_matter: Optional[FrontMatter] = None

    @property
    def order_key(self) -> Optional[int]:
        return self.front_matter.sidebar_position if self.front_matter else None


@dataclass
class DirectoryEntry:
    # one immediate child of a directory being listed.
    kind: EntryKind
    path: Path
    order_key: Optional[int] = None
    document: Optional[Document] = None

    @property
    def name(self) -> str:
        return self.path.name
