"""Table-of-contents filter for HTML fragments."""

from .models import ContentDocument, HeadingRecord, RenderOutcome, TocOptions
from .orchestrator import Orchestrator, render_toc

__all__ = [
    "ContentDocument",
    "HeadingRecord",
    "Orchestrator",
    "RenderOutcome",
    "TocOptions",
    "render_toc",
]
