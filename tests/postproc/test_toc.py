"""Tests for nested TOC list rendering."""

from __future__ import annotations

import re

from tocfilter.models import HeadingRecord
from tocfilter.postproc.toc import TableOfContentsBuilder

_LIST_TAG = re.compile(r"</?ul>")


def _heading(level: int, name: str) -> HeadingRecord:
    full = f"<h{level}>{name}</h{level}>"
    return HeadingRecord(
        level=level,
        tag=f"h{level}",
        attributes="",
        raw_inner=name,
        full_match=full,
        start=0,
        end=len(full),
        display=name,
        anchor=name.lower(),
    )


def _max_depth(html: str) -> int:
    depth = deepest = 0
    for tag in _LIST_TAG.findall(html):
        depth += -1 if tag.startswith("</") else 1
        deepest = max(deepest, depth)
    assert depth == 0
    return deepest


def test_build_empty_returns_empty_string() -> None:
    assert TableOfContentsBuilder().build([]) == ""


def test_build_flat_list() -> None:
    html = TableOfContentsBuilder().build([_heading(2, "A"), _heading(2, "B")])
    assert html == (
        '\n<ul>\n<li><a href="#a">A</a>'
        '\n</li>\n<li><a href="#b">B</a>'
        "\n</li>\n</ul>\n"
    )


def test_build_nested_list() -> None:
    html = TableOfContentsBuilder().build(
        [_heading(1, "Intro"), _heading(2, "Setup"), _heading(2, "Usage"), _heading(1, "End")]
    )
    assert html == (
        '\n<ul>\n<li><a href="#intro">Intro</a>'
        '\n<ul>\n<li><a href="#setup">Setup</a>'
        '\n</li>\n<li><a href="#usage">Usage</a>'
        "\n</li>\n</ul>\n"
        '\n</li>\n<li><a href="#end">End</a>'
        "\n</li>\n</ul>\n"
    )


def test_build_uses_relative_levels() -> None:
    html = TableOfContentsBuilder().build([_heading(3, "A"), _heading(4, "B"), _heading(3, "C")])
    assert _max_depth(html) == 2
    assert html.startswith('\n<ul>\n<li><a href="#a">A</a>')


def test_build_level_jump_opens_one_list_per_level() -> None:
    html = TableOfContentsBuilder().build([_heading(1, "A"), _heading(4, "B")])
    assert _max_depth(html) == 4
    assert html.count("<li>") == 2
