import json

import pytest

from proofer_migration.trademark.models import TrademarkMappingError
from proofer_migration.trademark.note_builder import (
    build_internal_note_from_proofer,
    is_migrated_note,
)
from proofer_migration.trademark.note_content import (
    DIVIDER_TEXT,
    MIGRATED_FROM_PROOFER_TEXT,
    NOTE_SECTIONS,
    clean_divider_lines,
)


def _note(*answers):
    return build_internal_note_from_proofer({
        "fieldAnswers": [{"fieldName": k, "fieldValue": v} for k, v in answers],
    })


def _texts(node):
    if node.get("type") == "text":
        return [node["text"]]
    out = []
    for child in node.get("children", []):
        out += _texts(child)
    return out


def _find_item(note, label):
    for block in note["root"]["children"]:
        if block["type"] != "list":
            continue
        for item in block["children"]:
            first = item["children"][0] if item["children"] else None
            if first and first.get("text") == label:
                return item
    raise AssertionError(f"no list item labelled {label!r}")


def test_clean_divider_lines():
    assert clean_divider_lines("Line1\r\n==========\r\nLine2") == "Line1\nLine2"
    assert clean_divider_lines("  ===  \nKeep = this\rCase") == "Keep = this\nCase"
    assert clean_divider_lines(None) == ""


def test_note_header_and_section_layout():
    note = _note()
    root = note["root"]
    assert root["type"] == "root"
    assert root["direction"] == "ltr"

    title, blank = root["children"][:2]
    assert title["children"] == [{
        "detail": 0, "format": 1, "mode": "normal", "style": "",
        "text": MIGRATED_FROM_PROOFER_TEXT, "type": "text", "version": 1,
    }]
    assert blank["type"] == "paragraph" and blank["children"] == []

    headings = [
        block["children"][0]["text"]
        for block in root["children"][2:]
        if block["type"] == "paragraph" and block["children"][0]["format"] == 1
    ]
    assert headings == [section.heading for section in NOTE_SECTIONS]

    dividers = [
        block for block in root["children"]
        if block["type"] == "paragraph" and _texts(block) == [DIVIDER_TEXT]
    ]
    assert len(dividers) == len(NOTE_SECTIONS)
    assert root["children"][-1] is dividers[-1]


def test_list_items_are_numbered_within_each_list():
    note = _note()
    lists = [block for block in note["root"]["children"] if block["type"] == "list"]
    # 16 sections, the foreign trademark section has two lists
    assert len(lists) == len(NOTE_SECTIONS) + 1
    for block in lists:
        assert block["listType"] == "bullet"
        assert block["tag"] == "ul"
        assert [item["value"] for item in block["children"]] == list(range(1, len(block["children"]) + 1))


def test_divider_lines_are_stripped_from_multiline_values():
    note = _note(("list_goods_or_services", "Line1\n==========\nLine2"))
    item = _find_item(note, "Description of goods and/or Services:")

    assert [child["type"] for child in item["children"]] == [
        "text", "linebreak", "text", "linebreak", "text",
    ]
    assert _texts(item) == ["Description of goods and/or Services:", "Line1", "Line2"]


def test_intake_note_has_no_label():
    note = _note(("applicant_information_internal_note_LT", "First\r\nSecond"))
    intake_list = next(block for block in note["root"]["children"] if block["type"] == "list")
    item = intake_list["children"][0]
    assert _texts(item) == ["First", "Second"]
    assert item["children"][0]["format"] == 0


def test_empty_values():
    note = _note()
    single = _find_item(note, "Contact Name:")
    assert single["children"][1] == {"type": "linebreak", "version": 1}
    assert single["children"][2]["text"] == ""

    multiline = _find_item(note, "Description of goods and/or Services:")
    assert len(multiline["children"]) == 2


def test_checkbox_and_yes_choice_values():
    note = _note(
        ("AS_stippling_for_shading_CB", "1"),
        ("AS_stippling_as_feature_of_the_mark_CB", "0"),
        ("foreign_application_MC", "Yes"),
        ("foreign_registration_MC", "yes"),
    )
    assert _texts(_find_item(note, "Stippling for Shading:"))[-1] == "Yes"
    assert _texts(_find_item(note, "Stippling as a Feature of the Mark:"))[-1] == "No"
    assert _texts(_find_item(note, "Foreign Application:"))[-1] == "Yes"
    assert _texts(_find_item(note, "Foreign Registration:"))[-1] == "No"


def test_note_tolerates_missing_or_null_answers():
    for payload in (None, {}, {"fieldAnswers": None}):
        note = build_internal_note_from_proofer(payload)
        assert is_migrated_note(note)


def test_note_is_json_serializable_and_deterministic():
    payload = {"fieldAnswers": [{"fieldName": "Contact_Name", "fieldValue": "Jane Doe"}]}
    first = json.dumps(build_internal_note_from_proofer(payload))
    assert first == json.dumps(build_internal_note_from_proofer(payload))
    assert "Jane Doe" in first


def test_malformed_input_is_wrapped():
    with pytest.raises(TrademarkMappingError) as excinfo:
        build_internal_note_from_proofer({"fieldAnswers": "nope"})
    assert excinfo.value.stage == "note"


def test_is_migrated_note():
    assert not is_migrated_note(None)
    assert not is_migrated_note({"root": {"type": "root", "children": []}})
    other = {"root": {"children": [{"type": "paragraph", "children": [{"type": "text", "text": "hello"}]}]}}
    assert not is_migrated_note(other)
