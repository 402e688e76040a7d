"""Locating the ``{toc ...}`` marker and reading its options."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..models import TocOptions

_MARKER_PATTERN = re.compile(r"\{toc(?:\s+(.*?))?\}", re.IGNORECASE)
_PARAM_PATTERN = re.compile(r"""(\w+)\s*=\s*(["']?)(.*?)\2(\s|$)""")


@dataclass
class TocMarker:
    """The first marker found in a document."""

    start: int
    end: int
    raw: str
    params: Dict[str, str] = field(default_factory=dict)


class MarkerParser:
    """Finds the TOC marker and turns its parameter string into options."""

    def find(self, text: str) -> Optional[TocMarker]:
        """Return the first marker in ``text`` or ``None`` when there is none."""
        match = _MARKER_PATTERN.search(text)
        if match is None:
            return None
        return TocMarker(
            start=match.start(),
            end=match.end(),
            raw=match.group(0),
            params=self.parse_params(match.group(1) or ""),
        )

    @staticmethod
    def parse_params(param_string: str) -> Dict[str, str]:
        """Parse ``key=value`` / ``key="value"`` pairs; later keys win."""
        params: Dict[str, str] = {}
        for match in _PARAM_PATTERN.finditer(param_string):
            params[match.group(1)] = match.group(3)
        return params

    def options_for(self, marker: TocMarker, defaults: TocOptions) -> TocOptions:
        """Overlay marker parameters onto ``defaults``."""
        params = marker.params
        chapter_numbers = None
        if "chapternumbers" in params:
            chapter_numbers = params["chapternumbers"].lower() == "true"
        return defaults.merged(
            min_level=_as_int(params.get("minlevel")),
            max_level=_as_int(params.get("maxlevel")),
            chapter_numbers=chapter_numbers,
            prefix=params.get("prefix"),
        )


def _as_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


__all__ = ["MarkerParser", "TocMarker"]
