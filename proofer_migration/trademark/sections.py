"""
sections.py - TRADEMARK_EXPERT Section Builders
===============================================
One pure function per target section:

  build_attorney           -> attorney
  build_mark_selection     -> markSelection
  build_goods_and_services -> goodsAndServices
  build_signatory          -> signatory

Owners live in owners.py, additional information in
additional_information.py.

Every builder takes (fields, groups), tolerates any missing answer, and
never raises for absent data.
"""

from __future__ import annotations

import logging
from typing import Optional

from .lookup_tables import (
    FILING_BASIS_BY_PHRASE,
    INTEND_TO_USE_MARK_MAP,
    SIGNATORY_TITLE_TO_POSITION_MAP,
    TYPE_OF_MARK_TO_PROTECT_MAP,
    YES_OR_NO_MAP,
)
from .mapper_utils import parse_used_trademark_in_commerce, safe_lookup, split_full_name
from .models import FieldLookup, GroupLookup

logger = logging.getLogger(__name__)


# Usage-intent answers; the intent-to-use note is read first
ITU_FILING_BASIS_NOTE = "gs_itu_G_S_filing_basis_internal_note_LT"
UIC_FILING_BASIS_NOTE = "gs_uic_G_S_filing_basis_internal_note_LT"

SIGNATORY_GROUP = "signatory_info_GRP"


# =============================================================================
# Attorney
# =============================================================================

def build_attorney(fields: FieldLookup, groups: GroupLookup) -> dict:
    """Attorney name split from attorney_full_name_ST; {} when unanswered."""
    full_name = fields.text("attorney_full_name_ST")
    if full_name is None:
        return {}
    return split_full_name(str(full_name))


# =============================================================================
# Mark Selection
# =============================================================================

def build_mark_selection(fields: FieldLookup, groups: GroupLookup) -> dict:
    return {
        "markFormat": safe_lookup(TYPE_OF_MARK_TO_PROTECT_MAP, fields.text("type_of_mark_to_protect_MC")),
        "standardCharacterMark": {
            "markText": fields.text("mark"),
        },
        "designMark":                 build_design_mark(fields),
        "nameAndLikeness":            build_name_and_likeness(fields),
        "persons":                    build_persons(fields),
        "translationTransliteration": build_translation_transliteration(fields),
        "translationAndTransliterationIntakeQuestionnaire": {
            "translationAndTransliteration_IntakePlaceholder": fields.text("foreign_language_words"),
        },
    }


def build_design_mark(fields: FieldLookup) -> dict:
    color_description = fields.text("mark_detail_color")
    return {
        "colorClaim":       "yes" if color_description else "no",
        "colorDescription": color_description,
        "literalElement":   fields.text("Literal_Element_Only"),
        "logoDescription":  fields.text("mark_detail"),
    }


def build_name_and_likeness(fields: FieldLookup) -> dict:
    return {
        "containsNameLikeness": safe_lookup(YES_OR_NO_MAP, fields.text("name_consent")),
    }


def build_persons(fields: FieldLookup) -> list:
    """One consent entry when a consenting individual is named."""
    name_with_consent = fields.text("AS_individual_name_with_consent_ST")
    if not name_with_consent:
        return []
    return [{"hasConsent": "yes", "nameConsent": name_with_consent}]


def build_translation_transliteration(fields: FieldLookup) -> list:
    """
    One entry per populated pair:

      translation pair      foreign_language_words / AS_eng_translation_is_ST
      transliteration pair  AS_non_latin_chars_in_the_mark_ST /
                            AS_non_latin_chars_in_the_mark_mean_ST

    With neither pair answered, a single entry carries only the
    hasNonEnglishWords flag.
    """
    has_non_english_words = safe_lookup(YES_OR_NO_MAP, fields.text("foreign_language"))

    foreign_wording = fields.text("foreign_language_words")
    english_translation = fields.text("AS_eng_translation_is_ST")
    non_latin_chars = fields.text("AS_non_latin_chars_in_the_mark_ST")
    non_latin_meaning = fields.text("AS_non_latin_chars_in_the_mark_mean_ST")

    entries = []

    if foreign_wording or english_translation:
        entry: dict = {"hasNonEnglishWords": has_non_english_words}
        if foreign_wording:
            entry["foreignWording"] = foreign_wording
        if english_translation:
            entry["hasEnglishTranslation"] = "yes"
            entry["englishTranslation"] = english_translation
        entries.append(entry)

    if non_latin_chars or non_latin_meaning:
        non_latin: dict = {}
        if non_latin_chars:
            non_latin["hasNonLatinCharacters"] = "yes"
        non_latin["nonLatinTransliteration"] = non_latin_meaning
        non_latin["nonLatinLanguage"] = non_latin_chars
        entries.append({
            "hasNonEnglishWords": has_non_english_words,
            "nonLatinCharacters": non_latin,
        })

    if not entries:
        entries.append({"hasNonEnglishWords": has_non_english_words})
    return entries


# =============================================================================
# Goods & Services
# =============================================================================

def _usage_answer(fields: FieldLookup) -> Optional[str]:
    value = fields.first(ITU_FILING_BASIS_NOTE, UIC_FILING_BASIS_NOTE)
    return str(value) if value is not None else None


def determine_filing_basis(fields: FieldLookup) -> Optional[str]:
    """"yes" = currently in use, "no" = intent to use, None = undetermined."""
    phrase = safe_lookup(INTEND_TO_USE_MARK_MAP, _usage_answer(fields))
    if phrase is None:
        return None
    return FILING_BASIS_BY_PHRASE.get(phrase)


def build_client_trademark_use(fields: FieldLookup) -> Optional[str]:
    """
    "Label: value" lines for the answered fields, in fixed order.

    The Filing Basis line is parsed from the intake note's
    "Used trademark in commerce: Yes|No" line.
    """
    filing_basis = safe_lookup(
        INTEND_TO_USE_MARK_MAP,
        parse_used_trademark_in_commerce(fields.text("applicant_information_internal_note_LT")),
    )

    labelled = [
        ("Filing Basis",                  filing_basis),
        ("Date of First Sale",            fields.text("date_of_first_sale")),
        ("Class Number",                  fields.text("class_number")),
        ("List Goods or Services",        fields.text("list_goods_or_services")),
        ("URL Associated with Trademark", fields.text("url_associated_with_trademark")),
    ]
    lines = [f"{label}: {value}" for label, value in labelled if value]
    return "\n".join(lines) if lines else None


def build_goods_and_services(fields: FieldLookup, groups: GroupLookup) -> dict:
    usage_answer = _usage_answer(fields)
    # Unrecognized usage text is passed through as-is
    plan_to_use = safe_lookup(INTEND_TO_USE_MARK_MAP, usage_answer) or usage_answer

    return {
        "filingBasis": determine_filing_basis(fields),
        "howDoesTheClientPlanToUseTheirTrademarkSection": {
            "howDoesTheClientPlanToUseTheirTrademark": plan_to_use,
        },
        "additionalDataSection": {
            "clientTrademarkUse": build_client_trademark_use(fields),
            "competitorExample":  fields.text("competitor_example"),
        },
    }


# =============================================================================
# Signatory
# =============================================================================

def build_signatory(fields: FieldLookup, groups: GroupLookup) -> dict:
    """
    Signatory read from signatory_info_GRP first, flat fields second.

    Group sub-fields are matched by fieldName substring:
      signature_ST   -> signatoryName
      title_MC       -> signatoryPosition (normalized)
      other_title_ST -> otherSignatoryPosition (verbatim, only when present)
    """
    signatory_name = (
        groups.find_value(SIGNATORY_GROUP, "signature_ST")
        or fields.text("signatory_name")
    )
    signatory_title = (
        groups.find_value(SIGNATORY_GROUP, "title_MC")
        or fields.text("signatory_title")
    )
    other_position = (
        groups.find_value(SIGNATORY_GROUP, "other_title_ST")
        or fields.text("signatory_title_other")
    )

    position = safe_lookup(SIGNATORY_TITLE_TO_POSITION_MAP, signatory_title)
    if signatory_title and position is None and not other_position:
        logger.warning("Unrecognized signatory title %r; kept as otherSignatoryPosition",
                       signatory_title)
        other_position = signatory_title

    signatory: dict = {
        "signatoryName":     signatory_name,
        "signatoryPosition": position,
    }
    if other_position:
        signatory["otherSignatoryPosition"] = other_position
    return signatory
