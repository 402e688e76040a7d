"""Pipeline orchestration: marker detection, TOC splicing and heading anchors."""

from __future__ import annotations

import difflib
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .config import TocFilterConfig
from .logging import get_logger
from .models import ContentDocument, HeadingRecord, RenderOutcome, TocOptions
from .postproc.annotator import HeadingAnnotator
from .postproc.extractor import HeadingExtractor
from .postproc.markers import MarkerParser, TocMarker
from .postproc.toc import TableOfContentsBuilder

_ID_ATTRIBUTE = re.compile(r"(?:^|\s)id\s*=", re.IGNORECASE)


class Orchestrator:
    """Coordinates the extract, annotate and build stages for one document at a time."""

    def __init__(
        self,
        config: TocFilterConfig | None = None,
        marker_parser: MarkerParser | None = None,
        extractor: HeadingExtractor | None = None,
        annotator: HeadingAnnotator | None = None,
        toc_builder: TableOfContentsBuilder | None = None,
    ) -> None:
        self.config = config
        self.marker_parser = marker_parser or MarkerParser()
        self.extractor = extractor or HeadingExtractor()
        self.annotator = annotator or HeadingAnnotator()
        self.toc_builder = toc_builder or TableOfContentsBuilder()
        self.logger = get_logger("orchestrator")

    @property
    def encoding(self) -> str:
        return self.config.output.encoding if self.config is not None else "utf-8"

    @property
    def defaults(self) -> TocOptions:
        return self.config.toc if self.config is not None else TocOptions()

    def render(self, text: str, options: TocOptions | None = None) -> str:
        """Replace the first TOC marker in ``text`` and anchor the headings it lists.

        ``options`` are the defaults the marker's own parameters are layered
        onto. Text without a marker is returned unchanged.
        """
        marker = self.marker_parser.find(text)
        if marker is None:
            return text

        effective = self.marker_parser.options_for(marker, options or self.defaults)
        headings = self.extractor.extract(text, effective)
        self.logger.debug(
            "Marker %r at offset %d; %d headings within levels %d-%d",
            marker.raw,
            marker.start,
            len(headings),
            effective.min_level,
            effective.max_level,
        )
        headings = self.annotator.annotate(headings, effective)
        toc_html = self.toc_builder.build(headings)
        return self._splice(text, marker, toc_html, headings, effective)

    def prepare_content(self, document: ContentDocument) -> None:
        """Content hook: rewrite ``document.text`` in place when it is set."""
        if document.text is None:
            return
        document.text = self.render(document.text)

    def render_file(
        self,
        path: Path,
        *,
        output: Path | None = None,
        dry_run: bool = False,
        options: TocOptions | None = None,
    ) -> RenderOutcome:
        """Render a document on disk, writing to ``output`` or back in place."""
        source = Path(path).expanduser()
        if not source.is_file():
            raise FileNotFoundError(f"Document not found: {source}")
        original = source.read_text(encoding=self.encoding)
        target = Path(output).expanduser() if output is not None else source
        return self.render_text(
            original,
            name=source.name,
            output=target,
            dry_run=dry_run,
            options=options,
            overwrite=target != source,
        )

    def render_text(
        self,
        text: str,
        *,
        name: str = "<stdin>",
        output: Path | None = None,
        dry_run: bool = False,
        options: TocOptions | None = None,
        overwrite: bool = True,
    ) -> RenderOutcome:
        """Render ``text`` and write it to ``output`` unless ``dry_run``.

        With ``overwrite`` false the output is only written when rendering
        changed something, so an in-place render of a marker-free file leaves
        it untouched.
        """
        rendered = self.render(text, options)
        changed = rendered != text
        diff = self._diff(text, rendered, name)

        written = False
        if output is not None and not dry_run and (overwrite or changed):
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(rendered, encoding=self.encoding)
            written = True
            self.logger.info("Rendered %s -> %s", name, output)
        elif output is not None and dry_run:
            self.logger.debug("Dry-run: skipped writing %s", output)

        return RenderOutcome(
            path=output,
            text=rendered,
            diff=diff,
            changed=changed,
            dry_run=dry_run,
            written=written,
        )

    def _splice(
        self,
        text: str,
        marker: TocMarker,
        toc_html: str,
        headings: Sequence[HeadingRecord],
        options: TocOptions,
    ) -> str:
        # Offsets come from the original text, so each heading consumes exactly
        # its own occurrence even when several share identical markup.
        replacements: List[Tuple[int, int, str]] = [(marker.start, marker.end, toc_html)]
        for heading in headings:
            if heading.start < marker.end and marker.start < heading.end:
                self.logger.debug("Heading %r overlaps the marker; left unchanged", heading.full_match)
                continue
            replacements.append((heading.start, heading.end, self._anchored_heading(heading, options)))
        replacements.sort(key=lambda item: item[0])

        pieces: List[str] = []
        position = 0
        for start, end, replacement in replacements:
            pieces.append(text[position:start])
            pieces.append(replacement)
            position = end
        pieces.append(text[position:])
        return "".join(pieces)

    @staticmethod
    def _anchored_heading(heading: HeadingRecord, options: TocOptions) -> str:
        attributes = heading.attributes
        if options.heading_ids and heading.anchor and not _ID_ATTRIBUTE.search(attributes):
            attributes = f'{attributes} id="{heading.anchor}"'
        anchor_tag = f'<a name="{heading.anchor}"></a>'
        return f"{anchor_tag}<{heading.tag}{attributes}>{heading.display}</{heading.tag}>"

    @staticmethod
    def _diff(before: str, after: str, name: str) -> str:
        diff = difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"a/{name}",
            tofile=f"b/{name}",
        )
        return "".join(diff)


def render_toc(text: str, options: Optional[TocOptions] = None) -> str:
    """Render ``text`` with a default orchestrator."""
    return Orchestrator().render(text, options)


__all__ = ["Orchestrator", "render_toc"]
