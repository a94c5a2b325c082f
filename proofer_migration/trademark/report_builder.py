"""
report_builder.py - Proofer PDF Report Builder
==============================================
Renders the Proofer review content (note_content.py) as a paginated PDF
attached to the migrated order.

Layout (PyMuPDF):
  - "Migrated from Proofer" title, bold, REPORT_TITLE_FONT_SIZE
  - per section: bold heading, then one block per item
        label  (bold)
        value  (regular, wrapped to the text width, one block per line)
  - a thin horizontal rule where the note has its "=====" divider
  - footer "Processing Order ID: <id>" (+ " | Generated on <ts>" when the
    caller supplies a timestamp; the clock is never read here)

Fonts:
  Helvetica ("helv" / "hebo") for every character it has a glyph for; any
  other character (CJK, most non-Latin scripts) is drawn with the built-in
  universal CJK font, so answers survive into the PDF unchanged.  Each line
  is split into same-font runs and written with a fitz.TextWriter.

Text is wrapped and paginated manually from the run widths, so long intake
notes flow onto as many pages as needed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, List, Optional, Tuple, Union

import fitz  # PyMuPDF - for writing the report PDF

from ..settings import settings
from .models import ReportGenerationError
from .note_content import NoteContent, build_note_content, field_lookup_from

logger = logging.getLogger(__name__)

REGULAR_FONT = "helv"
BOLD_FONT = "hebo"
FALLBACK_FONT = "cjk"

TEXT_COLOR = (0, 0, 0)
MUTED_COLOR = (0.4, 0.4, 0.4)
RULE_COLOR = (0.6, 0.6, 0.6)

LINE_SPACING = 1.35       # line height as a multiple of the font size
ITEM_INDENT_PT = 12.0     # bullets are indented under their heading


def get_proofer_pdf_filename(processing_order_id: Any) -> str:
    """Attachment filename for an order's Proofer report."""
    return f"{processing_order_id}_Proofer data.pdf"


# =============================================================================
# Fonts & measuring
# =============================================================================

@lru_cache(maxsize=None)
def _font(fontname: str) -> fitz.Font:
    return fitz.Font(fontname)


def text_runs(text: str, fontname: str) -> List[Tuple[str, str]]:
    """Split text into (run, font) pieces; glyphs missing from fontname use FALLBACK_FONT."""
    primary = _font(fontname)
    runs: List[Tuple[str, str]] = []
    for ch in text:
        run_font = fontname if primary.has_glyph(ord(ch)) else FALLBACK_FONT
        if runs and runs[-1][1] == run_font:
            runs[-1] = (runs[-1][0] + ch, run_font)
        else:
            runs.append((ch, run_font))
    return runs


def text_width(text: str, fontname: str, fontsize: float) -> float:
    return sum(
        _font(run_font).text_length(run, fontsize=fontsize)
        for run, run_font in text_runs(text, fontname)
    )


def wrap_text(text: str, width: float, fontname: str, fontsize: float) -> List[str]:
    """
    Greedy word wrap to `width` points.

    Words wider than a full line are broken by character.  An empty string
    yields one empty line.
    """
    def fits(candidate: str) -> bool:
        return text_width(candidate, fontname, fontsize) <= width

    lines: List[str] = []
    current = ""
    for word in text.replace("\t", "    ").split(" "):
        candidate = f"{current} {word}" if current else word
        if fits(candidate):
            current = candidate
            continue
        if current:
            lines.append(current)
        # Break an over-long word across lines
        while len(word) > 1 and not fits(word):
            cut = len(word) - 1
            while cut > 1 and not fits(word[:cut]):
                cut -= 1
            lines.append(word[:cut])
            word = word[cut:]
        current = word
    lines.append(current)
    return lines


# =============================================================================
# Layout
# =============================================================================

class _ReportWriter:
    """Cursor over a growing fitz document; starts a new page when full."""

    def __init__(self, doc: fitz.Document):
        self.doc = doc
        self.width, self.height = settings.get_page_size()
        self.margin = settings.REPORT_MARGIN_PT
        self.font_size = settings.REPORT_FONT_SIZE
        self.page = None
        self.y = 0.0
        self._new_page()

    def _new_page(self):
        self.page = self.doc.new_page(width=self.width, height=self.height)
        self.y = self.margin

    def _ensure_room(self, height: float):
        if self.y + height > self.height - self.margin:
            self._new_page()

    def _draw(self, x: float, line: str, fontname: str, size: float, color):
        if not line:
            return
        writer = fitz.TextWriter(self.page.rect, color=color)
        # positions are baselines
        pos = fitz.Point(x, self.y + size)
        for run, run_font in text_runs(line, fontname):
            _, pos = writer.append(pos, run, font=_font(run_font), fontsize=size)
        writer.write_text(self.page)

    def text(self, text: str, bold: bool = False, size: Optional[float] = None,
             indent: float = 0.0, color=TEXT_COLOR):
        size = size or self.font_size
        fontname = BOLD_FONT if bold else REGULAR_FONT
        line_height = size * LINE_SPACING
        usable = self.width - 2 * self.margin - indent
        for line in wrap_text(text, usable, fontname, size):
            self._ensure_room(line_height)
            self._draw(self.margin + indent, line, fontname, size, color)
            self.y += line_height

    def centered(self, text: str, size: float, color=MUTED_COLOR):
        line_height = size * LINE_SPACING
        self._ensure_room(line_height)
        x = max(self.margin, (self.width - text_width(text, REGULAR_FONT, size)) / 2)
        self._draw(x, text, REGULAR_FONT, size, color)
        self.y += line_height

    def space(self, lines: float = 1.0):
        self.y += self.font_size * LINE_SPACING * lines

    def rule(self):
        self._ensure_room(self.font_size)
        mid = self.y + self.font_size / 2
        self.page.draw_line(
            fitz.Point(self.margin, mid),
            fitz.Point(self.width - self.margin, mid),
            color=RULE_COLOR,
            width=0.5,
        )
        self.y += self.font_size


def _format_timestamp(generated_at: Union[datetime, str]) -> str:
    if isinstance(generated_at, datetime):
        return generated_at.strftime("%Y-%m-%d %H:%M:%S")
    return str(generated_at)


def footer_text(processing_order_id: Any, generated_at: Union[datetime, str, None] = None) -> str:
    text = f"Processing Order ID: {processing_order_id}"
    if generated_at:
        text += f" | Generated on {_format_timestamp(generated_at)}"
    return text


def render_report(
    content: NoteContent,
    processing_order_id: Any,
    generated_at: Union[datetime, str, None] = None,
) -> bytes:
    """Render resolved review content to PDF bytes."""
    doc = fitz.open()
    try:
        writer = _ReportWriter(doc)

        writer.text(content.title, bold=True, size=settings.REPORT_TITLE_FONT_SIZE)
        writer.space()

        for section in content.sections:
            writer.text(section.heading, bold=True)
            writer.space(0.25)
            for items in section.lists:
                for item in items:
                    if item.label is not None:
                        writer.text(item.label, bold=True, indent=ITEM_INDENT_PT)
                    for line in item.lines:
                        writer.text(line, indent=ITEM_INDENT_PT)
                    writer.space(0.25)
            writer.rule()

        writer.space()
        writer.centered(footer_text(processing_order_id, generated_at), size=settings.REPORT_FONT_SIZE - 2)
        page_count = doc.page_count
        pdf_bytes = doc.tobytes(garbage=3, deflate=True)
    finally:
        doc.close()

    logger.debug("Rendered Proofer report: %d page(s), %d bytes", page_count, len(pdf_bytes))
    return pdf_bytes


def generate_proofer_pdf(
    proofer_data: Any,
    processing_order_id: Any,
    generated_at: Union[datetime, str, None] = None,
) -> bytes:
    """
    Generate the Proofer report PDF for one order.

    Args:
        proofer_data:        Proofer questionnaire answers (dict or ProoferData).
        processing_order_id: Order the report belongs to (shown in the footer).
        generated_at:        Optional timestamp printed in the footer.

    Returns:
        The PDF document as bytes.

    Raises:
        ReportGenerationError: the input could not be read or rendering failed.
    """
    try:
        content = build_note_content(field_lookup_from(proofer_data))
        pdf_bytes = render_report(content, processing_order_id, generated_at)
    except Exception as exc:
        logger.error("Proofer report failed for order %s: %s", processing_order_id, exc)
        raise ReportGenerationError(f"Failed to generate PDF: {exc}") from exc

    logger.info("Generated Proofer report for order %s (%d bytes)", processing_order_id, len(pdf_bytes))
    return pdf_bytes
