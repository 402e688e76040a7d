"""Nested-list table-of-contents rendering."""

from __future__ import annotations

from typing import List, Sequence

from ..models import HeadingRecord

_OPEN_LIST = "\n<ul>\n"
_CLOSE_ITEM = "\n</li>\n"
_CLOSE_ITEM_AND_LIST = "\n</li>\n</ul>\n"


class TableOfContentsBuilder:
    """Builds nested ``<ul>`` markup from annotated headings.

    Depth is relative to the shallowest heading present, so a document
    using only ``h2`` and ``h3`` produces two list levels, not three.
    """

    def build(self, headings: Sequence[HeadingRecord]) -> str:
        if not headings:
            return ""
        base_level = min(heading.level for heading in headings)
        parts: List[str] = []
        previous = 0
        for heading in headings:
            current = heading.level - base_level + 1
            if current > previous:
                parts.append(_OPEN_LIST * (current - previous))
            elif current < previous:
                parts.append(_CLOSE_ITEM_AND_LIST * (previous - current))
                parts.append(_CLOSE_ITEM)
            elif parts:
                parts.append(_CLOSE_ITEM)
            parts.append(f'<li><a href="#{heading.anchor}">{heading.display}</a>')
            previous = current
        parts.append(_CLOSE_ITEM_AND_LIST * previous)
        return "".join(parts)


__all__ = ["TableOfContentsBuilder"]
