"""Chapter numbering and anchor slugs for extracted headings."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List

from ..models import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, HeadingRecord, TocOptions

_TAG_PATTERN = re.compile(r"<[^>]*>")
_NON_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase, drop markup and collapse everything outside ``[a-z0-9]`` to hyphens."""
    slug = text.lower()
    slug = _TAG_PATTERN.sub("", slug)
    slug = _NON_SLUG_PATTERN.sub("-", slug)
    return slug.strip("-")


class ChapterCounter:
    """Per-level heading counters for one TOC build.

    Advancing a level resets every deeper level to zero. The number of a
    heading is the list of non-zero counters from level 1 to its own level,
    so a jump from ``h1`` to ``h3`` yields ``1.1`` rather than ``1.0.1``.
    """

    def __init__(self) -> None:
        self._counts: Dict[int, int] = {
            level: 0 for level in range(MIN_HEADING_LEVEL, MAX_HEADING_LEVEL + 1)
        }

    def advance(self, level: int) -> List[int]:
        self._counts[level] += 1
        for deeper in range(level + 1, MAX_HEADING_LEVEL + 1):
            self._counts[deeper] = 0
        return self.parts(level)

    def parts(self, level: int) -> List[int]:
        return [
            self._counts[current]
            for current in range(MIN_HEADING_LEVEL, level + 1)
            if self._counts[current] > 0
        ]


class HeadingAnnotator:
    """Assigns display text and anchors to headings in document order."""

    def annotate(self, headings: Iterable[HeadingRecord], options: TocOptions) -> List[HeadingRecord]:
        counter = ChapterCounter() if options.chapter_numbers else None
        annotated: List[HeadingRecord] = []
        for heading in headings:
            slug = slugify(heading.raw_inner)
            if counter is not None:
                parts = [str(part) for part in counter.advance(heading.level)]
                display_number = f"{options.prefix} {'.'.join(parts)}. "
                heading.anchor = f"{'-'.join(parts)}-{slug}"
                heading.display = display_number + heading.raw_inner
            else:
                heading.anchor = slug
                heading.display = heading.raw_inner
            annotated.append(heading)
        return annotated


__all__ = ["ChapterCounter", "HeadingAnnotator", "slugify"]
