import re
from datetime import datetime

import fitz
import pytest

from proofer_migration.trademark import report_builder
from proofer_migration.trademark.models import ReportGenerationError
from proofer_migration.trademark.note_builder import build_internal_note_from_proofer
from proofer_migration.trademark.note_content import NOTE_SECTIONS
from proofer_migration.trademark.report_builder import (
    FALLBACK_FONT,
    footer_text,
    generate_proofer_pdf,
    get_proofer_pdf_filename,
    text_runs,
    text_width,
    wrap_text,
)


def _pdf_text(pdf_bytes):
    doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    try:
        return doc.page_count, "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()


def test_filename():
    assert get_proofer_pdf_filename(12345) == "12345_Proofer data.pdf"


def test_footer_text():
    assert footer_text(42) == "Processing Order ID: 42"
    assert footer_text(42, datetime(2024, 5, 1, 9, 30)) == (
        "Processing Order ID: 42 | Generated on 2024-05-01 09:30:00"
    )


def test_wrap_text_respects_width():
    text = "word " * 60
    lines = wrap_text(text.strip(), 200, "helv", 10)
    assert len(lines) > 1
    for line in lines:
        assert text_width(line, "helv", 10) <= 200
    assert " ".join(lines) == text.strip()


def test_wrap_text_breaks_long_words():
    lines = wrap_text("x" * 400, 100, "helv", 10)
    assert len(lines) > 1
    assert "".join(lines) == "x" * 400


def test_report_contains_sections_and_values():
    pdf_bytes = generate_proofer_pdf(
        {"fieldAnswers": [
            {"fieldName": "Contact_Name", "fieldValue": "Jane Doe"},
            {"fieldName": "list_goods_or_services", "fieldValue": "Coffee\n=====\nTea"},
        ]},
        "ORD-1",
    )
    assert pdf_bytes.startswith(b"%PDF")

    _, text = _pdf_text(pdf_bytes)
    assert "Migrated from Proofer" in text
    assert "Address & Contact Information" in text
    assert "Contact Name:" in text
    assert "Jane Doe" in text
    assert "Coffee" in text and "Tea" in text
    assert "=====" not in text
    assert "Processing Order ID: ORD-1" in text
    assert "Generated on" not in text


def test_long_notes_paginate():
    long_note = "\n".join(f"Intake line {i}" for i in range(300))
    pdf_bytes = generate_proofer_pdf(
        {"fieldAnswers": [{"fieldName": "applicant_information_internal_note_LT", "fieldValue": long_note}]},
        "ORD-2",
    )
    page_count, text = _pdf_text(pdf_bytes)
    assert page_count > 1
    assert "Intake line 299" in text


def test_render_failure_is_wrapped(monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(report_builder, "render_report", broken)
    with pytest.raises(ReportGenerationError, match="Failed to generate PDF: disk full"):
        generate_proofer_pdf({}, "ORD-3")


def test_invalid_input_is_wrapped():
    with pytest.raises(ReportGenerationError):
        generate_proofer_pdf({"fieldAnswers": 5}, "ORD-4")


def _squash(text):
    return re.sub(r"\s+", " ", text).strip()


def _bold_texts(node):
    if node.get("type") == "text":
        return [node["text"]] if node["format"] == 1 else []
    out = []
    for child in node.get("children", []):
        out += _bold_texts(child)
    return out


def test_report_mirrors_note_order_and_dividers():
    payload = {"fieldAnswers": [{"fieldName": "Contact_Name", "fieldValue": "Jane Doe"}]}
    note = build_internal_note_from_proofer(payload)
    pdf_bytes = generate_proofer_pdf(payload, "ORD-5")

    doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    try:
        text = _squash(" ".join(page.get_text() for page in doc))
        rules = sum(len(page.get_drawings()) for page in doc)
    finally:
        doc.close()

    # Title, section headings and item labels in note order
    position = 0
    for expected in _bold_texts(note["root"]):
        found = text.find(_squash(expected), position)
        assert found >= 0, f"{expected!r} missing or out of order"
        position = found + len(_squash(expected))

    assert rules == len(NOTE_SECTIONS)


def test_non_latin_text_is_kept():
    assert text_runs("José 太陽", "helv") == [("José ", "helv"), ("太陽", FALLBACK_FONT)]

    pdf_bytes = generate_proofer_pdf(
        {"fieldAnswers": [{"fieldName": "Contact_Name", "fieldValue": "José 太陽 Ñandú"}]},
        "ORD-6",
    )
    _, text = _pdf_text(pdf_bytes)
    assert "José 太陽 Ñandú" in text


def test_document_is_closed_when_rendering_fails(monkeypatch):
    opened = []
    real_open = fitz.open

    def tracking_open(*args, **kwargs):
        doc = real_open(*args, **kwargs)
        opened.append(doc)
        return doc

    def broken_rule(self):
        raise RuntimeError("rule failed")

    monkeypatch.setattr(report_builder.fitz, "open", tracking_open)
    monkeypatch.setattr(report_builder._ReportWriter, "rule", broken_rule)

    with pytest.raises(ReportGenerationError, match="rule failed"):
        generate_proofer_pdf({}, "ORD-7")

    assert len(opened) == 1
    assert opened[0].is_closed
