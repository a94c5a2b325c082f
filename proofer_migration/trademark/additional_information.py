"""
additional_information.py - Additional Information Section Builder
==================================================================
Builds TRADEMARK_EXPERT `additionalInformation`, a gated composite:

  additionalInformation = {
      "selectAdditionalInformation": [tag, ...],
      <subsection for each selected tag>,
  }

Each tag is tested independently against the answers.  A subsection is
emitted only when its tag is selected, and the whole object is omitted
(returned as {}) when no tag is selected.

Tag                   Subsection key               Trigger
--------------------  ---------------------------  ----------------------------------------
disclaimer            disclaimerSection            AS_disclaimer_ST
priorRegistration     priorRegistrationSection     any of 4 prior registration slots
meaningSignificance   meaningSignificanceSection   AS_WLN_in_mark_ST / ..._term_of_art_ST
section2f             section2f                    AS_2_f_claim_nature_MC = Whole | In Part
concurrentUse         concurrentUseSection         AS_concurrent_use_info_ST
moreInformation       moreInformationSection       AS_more_information_LT
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .lookup_tables import CLAIM_NATURE_MAP
from .mapper_utils import safe_lookup, split_registration_numbers
from .models import ClaimNature, FieldLookup, GroupLookup

logger = logging.getLogger(__name__)


PRIOR_REGISTRATION_FIELDS = (
    "AS_prior_registration_number_1_ST",
    "AS_prior_registration_number_2_ST",
    "AS_prior_registration_number_3_ST",
    # 4th slot may hold a comma-separated list of registration numbers
    "AS_prior_registration_number_4_ST",
)

CLAIM_NATURE_FIELD = "AS_2_f_claim_nature_MC"

# Section 2(f) basis fields: (prior registration, five years of use, evidence)
_WHOLE_BASIS_FIELDS = (
    "AS_2fc_whole_is_based_on_active_prior_registration_ST",
    "AS_2fc_whole_is_based_on_five_years_of_use_ST",
    "AS_2fc_whole_is_based_on_evidence_ST",
)
_IN_PART_BASIS_FIELDS = (
    "AS_2fc_inpart_is_based_on_active_prior_registration_ST",
    "AS_2fc_inpart_is_based_on_five_years_of_use_ST",
    "AS_2fc_inpart_is_based_on_avidence_ST",
)
IN_PART_PORTION_FIELD = "AS_2fc_inpart_claimed_portion_ST"


# =============================================================================
# Disclaimer
# =============================================================================

def has_disclaimer(fields: FieldLookup) -> bool:
    return fields.has("AS_disclaimer_ST")


def build_disclaimer_section(fields: FieldLookup) -> dict:
    return {"disclaimerText": fields.text("AS_disclaimer_ST")}


# =============================================================================
# Prior registrations
# =============================================================================

def prior_registration_numbers(fields: FieldLookup) -> List[str]:
    """Registration numbers from the 4 slots, in slot order."""
    numbers: List[str] = []
    for name in PRIOR_REGISTRATION_FIELDS[:-1]:
        value = fields.text(name)
        if value is not None and str(value).strip():
            numbers.append(str(value).strip())
    numbers.extend(split_registration_numbers(fields.text(PRIOR_REGISTRATION_FIELDS[-1])))
    return numbers


def has_prior_registrations(fields: FieldLookup) -> bool:
    return bool(prior_registration_numbers(fields))


def build_prior_registration_section(fields: FieldLookup) -> dict:
    return {
        "priorRegistrations": [
            {"registrationNumber": number} for number in prior_registration_numbers(fields)
        ],
    }


# =============================================================================
# Meaning / significance of wording
# =============================================================================

def has_meaning_significance(fields: FieldLookup) -> bool:
    return fields.has("AS_WLN_in_mark_ST") or fields.has("AS_WLN_in_mark_term_of_art_ST")


def build_meaning_significance_section(fields: FieldLookup) -> dict:
    return {
        "meanings": [
            {
                "wordOrPhrase": fields.text("AS_WLN_in_mark_ST"),
                "meaning":      fields.text("AS_WLN_in_mark_term_of_art_ST"),
            },
        ],
    }


# =============================================================================
# Section 2(f)
# =============================================================================

def claim_nature(fields: FieldLookup) -> Optional[ClaimNature]:
    raw = fields.text(CLAIM_NATURE_FIELD)
    nature = safe_lookup(CLAIM_NATURE_MAP, str(raw).strip() if raw is not None else None)
    if raw is not None and nature is None:
        logger.warning("Unrecognized 2(f) claim nature %r; section2f not selected", raw)
    return nature


def has_section_2f(fields: FieldLookup) -> bool:
    return claim_nature(fields) is not None


def _section_2f_basis(fields: FieldLookup, basis_fields: Tuple[str, str, str]) -> dict:
    """
    Shared basis block: the first answered basis sets conditionPriorRegistration
    (prior registration, then five years of use, then other evidence).
    """
    prior_reg_field, five_years_field, evidence_field = basis_fields
    prior_reg = fields.text(prior_reg_field)
    five_years = fields.text(five_years_field)
    evidence = fields.text(evidence_field)

    condition = None
    if prior_reg:
        condition = "priorRegistration"
    elif five_years:
        condition = "fiveYearsUse"
    elif evidence:
        condition = "otherEvidence"

    basis: dict = {}
    if condition:
        basis["conditionPriorRegistration"] = condition
    if prior_reg:
        basis["priorRegistrationsText"] = prior_reg
    if five_years:
        basis["fiveYearsUseText"] = five_years
    if evidence:
        basis["otherEvidenceDoc"] = evidence
    return basis


def build_section_2f_whole(fields: FieldLookup) -> dict:
    """2(f) claim for the mark as a whole."""
    return {"claimScope": "entire_mark", **_section_2f_basis(fields, _WHOLE_BASIS_FIELDS)}


def build_section_2f_in_part(fields: FieldLookup) -> dict:
    """2(f) claim for a portion of the mark; claimedPortion names that portion."""
    section = {"claimScope": "portion", **_section_2f_basis(fields, _IN_PART_BASIS_FIELDS)}
    portion = fields.text(IN_PART_PORTION_FIELD)
    if portion:
        section["claimedPortion"] = portion
    return section


_SECTION_2F_BUILDERS = {
    ClaimNature.WHOLE:   build_section_2f_whole,
    ClaimNature.IN_PART: build_section_2f_in_part,
}


def build_section_2f(fields: FieldLookup) -> dict:
    nature = claim_nature(fields)
    if nature is None:
        return {}
    return _SECTION_2F_BUILDERS[nature](fields)


# =============================================================================
# Concurrent use / more information
# =============================================================================

def has_concurrent_use(fields: FieldLookup) -> bool:
    return fields.has("AS_concurrent_use_info_ST")


def build_concurrent_use_section(fields: FieldLookup) -> dict:
    return {"concurrentUseInformation": fields.text("AS_concurrent_use_info_ST")}


def has_more_information(fields: FieldLookup) -> bool:
    return fields.has("AS_more_information_LT")


def build_more_information_section(fields: FieldLookup) -> dict:
    return {"moreInformation": fields.text("AS_more_information_LT")}


# =============================================================================
# Gated composite
# =============================================================================

Predicate = Callable[[FieldLookup], bool]
SubsectionBuilder = Callable[[FieldLookup], dict]

# (tag, subsection key, trigger, builder) in output order
ADDITIONAL_INFORMATION_SECTIONS: List[Tuple[str, str, Predicate, SubsectionBuilder]] = [
    ("disclaimer",          "disclaimerSection",          has_disclaimer,           build_disclaimer_section),
    ("priorRegistration",   "priorRegistrationSection",   has_prior_registrations,  build_prior_registration_section),
    ("meaningSignificance", "meaningSignificanceSection", has_meaning_significance, build_meaning_significance_section),
    ("section2f",           "section2f",                  has_section_2f,           build_section_2f),
    ("concurrentUse",       "concurrentUseSection",       has_concurrent_use,       build_concurrent_use_section),
    ("moreInformation",     "moreInformationSection",     has_more_information,     build_more_information_section),
]


def select_additional_information(fields: FieldLookup) -> List[str]:
    """Tags whose trigger fires, in table order."""
    return [tag for tag, _, trigger, _ in ADDITIONAL_INFORMATION_SECTIONS if trigger(fields)]


def build_additional_information(fields: FieldLookup, groups: GroupLookup) -> dict:
    tags = select_additional_information(fields)
    if not tags:
        return {}

    section: dict = {"selectAdditionalInformation": tags}
    for tag, key, _, builder in ADDITIONAL_INFORMATION_SECTIONS:
        if tag in tags:
            section[key] = builder(fields)
    return section
