"""Heading extraction, annotation and TOC rendering stages."""

from .annotator import ChapterCounter, HeadingAnnotator, slugify
from .extractor import HeadingExtractor
from .markers import MarkerParser, TocMarker
from .toc import TableOfContentsBuilder

__all__ = [
    "ChapterCounter",
    "HeadingAnnotator",
    "HeadingExtractor",
    "MarkerParser",
    "TableOfContentsBuilder",
    "TocMarker",
    "slugify",
]
