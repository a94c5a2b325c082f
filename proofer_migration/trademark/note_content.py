"""
note_content.py  -  Proofer Review Content (shared by note & report)
====================================================================
Describes WHAT the operator-facing summary of a Proofer questionnaire
contains, independent of how it is rendered.

Two serializers consume the resolved content:
  note_builder.py    -> rich-text editor JSON tree (internal note)
  report_builder.py  -> paginated PDF (attachment)

Both therefore show the same sections, labels, field order and divider
placement.

Content structure
-----------------
  title     "Migrated from Proofer"
  (blank)
  for each section in NOTE_SECTIONS:
      heading            bold paragraph
      one or more lists  bullet items: bold label + value
      divider            "=============================================="

Field kinds
-----------
  TEXT        raw answer
  MULTILINE   raw answer rendered line by line
  CHECKBOX    "Yes" when the answer is "1", otherwise "No"
  YES_CHOICE  "Yes" when the answer is "Yes", otherwise "No"

Every value is cleaned before rendering: \\r\\n and \\r become \\n, lines made
only of "=" characters are dropped, and surrounding whitespace is removed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from .mapper_utils import build_field_lookup
from .models import FieldLookup, ProoferData


MIGRATED_FROM_PROOFER_TEXT = "Migrated from Proofer"
DIVIDER_TEXT = "=============================================="

_DIVIDER_LINE = re.compile(r"^=+$")
_LINE_BREAKS = re.compile(r"\r\n|\r")


class FieldKind(str, Enum):
    TEXT       = "text"
    MULTILINE  = "multiline"
    CHECKBOX   = "checkbox"
    YES_CHOICE = "yes_choice"


@dataclass(frozen=True)
class NoteField:
    """One labelled questionnaire answer in the summary (label None = value only)."""
    label:      Optional[str]
    field_name: str
    kind:       FieldKind = FieldKind.TEXT


@dataclass(frozen=True)
class NoteSection:
    heading: str
    lists:   Tuple[Tuple[NoteField, ...], ...]


def _f(label: Optional[str], field_name: str, kind: FieldKind = FieldKind.TEXT) -> NoteField:
    return NoteField(label=label, field_name=field_name, kind=kind)


# =============================================================================
# Section table  (order is significant)
# =============================================================================

NOTE_SECTIONS: Tuple[NoteSection, ...] = (
    NoteSection("Intake Notes", (
        (
            _f(None, "applicant_information_internal_note_LT", FieldKind.MULTILINE),
        ),
    )),
    NoteSection("Applicant Information", (
        (
            _f("Name of Sole Proprietor Petitioner:", "Name_of_Petitioner"),
            _f("Partner's name, Citizenship OR where legally organized, Entity type "
               "(Use comma to separate):", "US_applicants_only_partnership"),
        ),
    )),
    NoteSection("Address & Contact Information", (
        (
            _f("Contact Name:", "Contact_Name"),
        ),
    )),
    NoteSection("Mark & Filing Format", (
        (
            _f("Literal Element. Otherwise leave blank:", "Literal_Element_Only"),
            _f("If Logo is in Color, please complete the color list, otherwise leave blank "
               "if is Black & White:", "mark_detail_color"),
        ),
    )),
    NoteSection("Goods & Services", (
        (
            _f("Number of Classes:", "total___classes_"),
            _f("Description of goods and/or Services:", "list_goods_or_services", FieldKind.MULTILINE),
        ),
    )),
    NoteSection("Goods and Services for Used in Commerce", (
        (
            _f("International Class Number:", "gs_uic_international_class_number_MC"),
            _f("Date of First Use Anywhere:", "gs_uic_date_of_first_use_anywhere_ST"),
            _f("Date of First Use in Commerce:", "gs_uic_date_of_first_use_in_commerce_ST"),
            _f("Specimen Description:", "gs_uic_specimen_description_ST"),
            _f("Specimen URL:", "gs_uic_specimen_url_ST"),
            _f("Date of Specimen URL:", "gs_uic_date_of_specimen_url_ST"),
            _f("G&S Used in Commerce Filing Basis Internal Note:",
               "gs_uic_G_S_filing_basis_internal_note_LT", FieldKind.MULTILINE),
        ),
    )),
    NoteSection("Form Type", (
        (
            _f("Form Type:", "form_type_MC"),
        ),
    )),
    NoteSection("Additional Statement", (
        (
            _f("Additional Trademark Statement?", "additional_trademark_statement_MC"),
        ),
    )),
    NoteSection("Translation (English Translation & Wording)", (
        (
            _f("The following wording within the mark, has no any meaning in a foreign language:",
               "AS_non_trans_in_foreign_language_ST"),
        ),
    )),
    NoteSection("Transliteration", (
        (
            _f("Non-Latin characters in mark transliterate to following words & have no "
               "meaning in foreign language:", "AS_non_latin_chars_in_the_mark_no_mean_ST"),
        ),
    )),
    NoteSection("Meaning or significance of wording, letter(s), or number(s)", (
        (
            _f("Please input here the word(s) appearing in the mark that has no significance "
               "nor is it a term of art:", "AS_WLN_in_the_mark_no_mean_ST"),
            _f("The following word(s) have no meaning in a foreign language:",
               "AS_WLN_in_the_mark_no_mean_foreign_lang_ST"),
        ),
    )),
    NoteSection("Name(s), Portrait(s), Signature(s) of Individual(s)", (
        (
            _f("Please input the name of whom consent(s) to register is made of record:",
               "AS_individual_name_with_consent_ST"),
            _f("Check if name(s)/portrait(s)/and/or signature(s) in mark does not identify "
               "living individual:", "AS_NPS_identifies_individual_CB", FieldKind.CHECKBOX),
        ),
    )),
    NoteSection("Use of the mark in another form", (
        (
            _f("Date of Use of the Mark in another Form Anywhere at least as (MM/DD/YYYY):",
               "AS_mark_date_of_use_anywhere_ST"),
            _f("Date of Use of the Mark in Commerce at least as (MM/DD/YYYY):",
               "AS_mark_date_of_use_in_commerce_ST"),
        ),
    )),
    NoteSection("Concurrent & Miscellaneous", (
        (
            _f("Concurrent Use Information:", "AS_concurrent_use_info_ST"),
        ),
    )),
    NoteSection("Stippling Information", (
        (
            _f("Stippling as a Feature of the Mark:", "AS_stippling_as_feature_of_the_mark_CB",
               FieldKind.CHECKBOX),
            _f("Stippling for Shading:", "AS_stippling_for_shading_CB", FieldKind.CHECKBOX),
        ),
    )),
    NoteSection("Foreign Trademark Information", (
        # Foreign application
        (
            _f("Foreign Application:", "foreign_application_MC", FieldKind.YES_CHOICE),
            _f("Country of Foreign Filing:", "country_of_foreign_filing_"),
            _f("Foreign Application Number:", "foreign_application_number_"),
            _f("Date of Foreign Filing:", "date_of_foreign_filing_"),
            _f("At this time, the applicant intends to rely on Section 44(e) as a basis for "
               "registration:", "foreign_application_rely_on_44e_cb", FieldKind.CHECKBOX),
            _f("At this time, the applicant has another basis for registration (Section 1(a) "
               "or Section 1(b)):", "foreign_application_rely_on_others_cb", FieldKind.CHECKBOX),
        ),
        # Foreign registration
        (
            _f("Foreign Registration:", "foreign_registration_MC", FieldKind.YES_CHOICE),
            _f("Country of Foreign Registration:", "country_of_foreign_regis_"),
            _f("Foreign Registration Number:", "foreign_regis_number_"),
            _f("Foreign Registration Date:", "foreign_regis_date_"),
            _f("Foreign Registration Expiration (Required):", "foreign_regis_expiry_"),
            _f("Foreign Registration Renewal Date (Insert date, if applicable):",
               "foreign_regis_renewal_date_"),
            _f("The FR includes a claim of Standard Characters or the country of origin Std "
               "Character equivalent:", "foreign_regis_includes_standard_characters_cb",
               FieldKind.CHECKBOX),
        ),
    )),
)


# =============================================================================
# Resolved content
# =============================================================================

@dataclass
class NoteItem:
    """A resolved bullet: optional bold label and the value split into lines."""
    label: Optional[str]
    lines: List[str]


@dataclass
class ResolvedSection:
    heading: str
    lists:   List[List[NoteItem]] = field(default_factory=list)


@dataclass
class NoteContent:
    title:    str
    sections: List[ResolvedSection]


def clean_divider_lines(text: Optional[str]) -> str:
    """
    Normalize line breaks to \\n, drop lines consisting only of "=", and
    strip the result.  Case and inner whitespace are preserved.
    """
    if not text:
        return ""
    normalized = _LINE_BREAKS.sub("\n", text)
    kept = [line for line in normalized.split("\n") if not _DIVIDER_LINE.match(line.strip())]
    return "\n".join(kept).strip()


def _raw_value(fields: FieldLookup, name: str) -> str:
    value = fields.get(name)
    if value is None or value == "":
        return ""
    return str(value)


def resolve_field(fields: FieldLookup, note_field: NoteField) -> NoteItem:
    raw = _raw_value(fields, note_field.field_name)

    if note_field.kind == FieldKind.CHECKBOX:
        return NoteItem(note_field.label, ["Yes" if raw == "1" else "No"])
    if note_field.kind == FieldKind.YES_CHOICE:
        return NoteItem(note_field.label, ["Yes" if raw == "Yes" else "No"])

    cleaned = clean_divider_lines(raw)
    if note_field.kind == FieldKind.MULTILINE:
        return NoteItem(note_field.label, cleaned.split("\n") if cleaned else [])
    # Single-line answers always render one (possibly empty) text run
    return NoteItem(note_field.label, cleaned.split("\n") if cleaned else [""])


def build_note_content(fields: FieldLookup) -> NoteContent:
    """Resolve NOTE_SECTIONS against one questionnaire's field lookup."""
    sections = [
        ResolvedSection(
            heading=section.heading,
            lists=[[resolve_field(fields, f) for f in field_list] for field_list in section.lists],
        )
        for section in NOTE_SECTIONS
    ]
    return NoteContent(title=MIGRATED_FROM_PROOFER_TEXT, sections=sections)


def field_lookup_from(proofer_data: Any) -> FieldLookup:
    """Validate Proofer data and index its flat answers."""
    data = ProoferData.from_payload(proofer_data)
    return build_field_lookup(data.field_answers)
