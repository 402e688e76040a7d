"""Heading extraction by pattern matching.

Headings are found with a tolerant regular expression rather than an HTML
parser. The inner content is matched non-greedily and may not span lines,
so nested headings of the same level, or unbalanced tags, pair up however
the pattern happens to pair them.
"""

from __future__ import annotations

import re
from typing import List

from ..models import HeadingRecord, TocOptions

_HEADING_PATTERN = re.compile(r"<(h[1-6])([^>]*)>(.*?)</\1>", re.IGNORECASE)


class HeadingExtractor:
    """Collects ``h1``-``h6`` tags within the configured level window."""

    def extract(self, text: str, options: TocOptions) -> List[HeadingRecord]:
        headings: List[HeadingRecord] = []
        for match in _HEADING_PATTERN.finditer(text):
            tag = match.group(1)
            level = int(tag[1])
            if not options.includes(level):
                continue
            headings.append(
                HeadingRecord(
                    level=level,
                    tag=tag,
                    attributes=match.group(2),
                    raw_inner=match.group(3),
                    full_match=match.group(0),
                    start=match.start(),
                    end=match.end(),
                )
            )
        return headings


__all__ = ["HeadingExtractor"]
