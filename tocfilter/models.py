"""Core data models shared across tocfilter components."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


@dataclass
class TocOptions:
    """Options controlling one table-of-contents build."""

    min_level: int = MIN_HEADING_LEVEL
    max_level: int = MAX_HEADING_LEVEL
    chapter_numbers: bool = False
    prefix: str = ""
    heading_ids: bool = False

    def includes(self, level: int) -> bool:
        return self.min_level <= level <= self.max_level

    def merged(self, **overrides: object) -> "TocOptions":
        """Return a copy with the non-None overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


@dataclass
class HeadingRecord:
    """A heading tag matched in the source document."""

    level: int
    tag: str
    attributes: str
    raw_inner: str
    full_match: str
    start: int
    end: int
    display: str = ""
    anchor: str = ""


@dataclass
class ContentDocument:
    """Host content item whose text is rewritten in place."""

    text: Optional[str] = None


@dataclass
class RenderOutcome:
    """Result of rendering a document on disk."""

    path: Optional[Path]
    text: str
    diff: str
    changed: bool
    dry_run: bool
    written: bool = False
