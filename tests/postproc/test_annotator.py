"""Tests for chapter numbering and anchor slugs."""

from __future__ import annotations

import pytest

from tocfilter.models import TocOptions
from tocfilter.postproc.annotator import ChapterCounter, HeadingAnnotator, slugify
from tocfilter.postproc.extractor import HeadingExtractor


def _annotate(text: str, **options: object):
    toc_options = TocOptions(**options)  # type: ignore[arg-type]
    headings = HeadingExtractor().extract(text, toc_options)
    return HeadingAnnotator().annotate(headings, toc_options)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello, World!", "hello-world"),
        ("<em>Bold</em> Move", "bold-move"),
        ("  --Already-Slug--  ", "already-slug"),
        ("Café Crème", "caf-cr-me"),
        ("Step 2: Configure", "step-2-configure"),
        ("!!!", ""),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slugify(text) == expected


@pytest.mark.parametrize("text", ["Hello, World!", "a--b", "<b>X</b> y_z", "already-a-slug"])
def test_slugify_is_idempotent(text: str) -> None:
    once = slugify(text)
    assert slugify(once) == once


def test_chapter_counter_resets_deeper_levels() -> None:
    counter = ChapterCounter()
    assert counter.advance(1) == [1]
    assert counter.advance(2) == [1, 1]
    assert counter.advance(2) == [1, 2]
    assert counter.advance(3) == [1, 2, 1]
    assert counter.advance(1) == [2]
    assert counter.advance(2) == [2, 1]


def test_chapter_counter_skips_missing_levels() -> None:
    counter = ChapterCounter()
    counter.advance(1)
    assert counter.advance(3) == [1, 1]


def test_annotate_without_numbers_uses_slug_and_raw_text() -> None:
    headings = _annotate("<h1>Getting Started</h1><h2><code>run()</code> API</h2>")
    assert [h.anchor for h in headings] == ["getting-started", "run-api"]
    assert [h.display for h in headings] == ["Getting Started", "<code>run()</code> API"]


def test_annotate_with_numbers() -> None:
    headings = _annotate(
        "<h1>A</h1><h2>B</h2><h2>C</h2><h3>D</h3><h2>E</h2><h1>F</h1><h2>G</h2>",
        chapter_numbers=True,
    )
    assert [h.anchor for h in headings] == ["1-a", "1-1-b", "1-2-c", "1-2-1-d", "1-3-e", "2-f", "2-1-g"]
    assert [h.display for h in headings] == [
        " 1. A",
        " 1.1. B",
        " 1.2. C",
        " 1.2.1. D",
        " 1.3. E",
        " 2. F",
        " 2.1. G",
    ]


def test_annotate_with_prefix() -> None:
    headings = _annotate("<h1>Intro</h1><h2>Setup</h2>", chapter_numbers=True, prefix="Chapter")
    assert [h.display for h in headings] == ["Chapter 1. Intro", "Chapter 1.1. Setup"]
    assert [h.anchor for h in headings] == ["1-intro", "1-1-setup"]


def test_annotate_prefix_ignored_without_numbers() -> None:
    headings = _annotate("<h1>Intro</h1>", prefix="Chapter")
    assert headings[0].display == "Intro"


def test_skipped_levels_do_not_consume_counters() -> None:
    headings = _annotate(
        "<h1>Top</h1><h2>A</h2><h4>Deep</h4><h3>B</h3><h2>C</h2>",
        chapter_numbers=True,
        min_level=2,
        max_level=3,
    )
    assert [h.anchor for h in headings] == ["1-a", "1-1-b", "2-c"]


def test_empty_slug_is_accepted() -> None:
    assert _annotate("<h2>!!!</h2>")[0].anchor == ""
    assert _annotate("<h2>!!!</h2>", chapter_numbers=True)[0].anchor == "1-"


def test_duplicate_titles_share_anchor_without_numbers() -> None:
    headings = _annotate("<h2>Overview</h2><h2>Overview</h2>")
    assert [h.anchor for h in headings] == ["overview", "overview"]
