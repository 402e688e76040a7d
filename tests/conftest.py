from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def html_document(tmp_path: Path) -> Path:
    """Write a small HTML document with a numbered TOC marker."""
    document = tmp_path / "page.html"
    document.write_text(
        "<p>{toc chapternumbers=true}</p>\n<h1>Intro</h1>\n<h2>Setup</h2>\n<h2>Usage</h2>\n",
        encoding="utf-8",
    )
    return document
