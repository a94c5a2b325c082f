"""
owners.py - Owner Section Builder
=================================
Builds TRADEMARK_EXPERT `owners` from the applicant part of the Proofer
questionnaire.

The discriminator is applicant_type_MC:

  "Joint Individuals"  -> exactly two individual owners, read from the
                          joint owner group (groupIndex 1 and 2)
  "Individual"         -> one individual owner from flat fields
  anything else        -> one juristic owner from flat fields
  (absent)             -> no owners

Unrecognized applicant types still produce one juristic owner; the raw
value is carried in ownerSelection.entityTypeOther.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..settings import settings
from .lookup_tables import ALTERNATE_NAME_RULES, ENTITY_TYPE_NAME_TO_ID, STATE_NAME_TO_ID
from .mapper_utils import (
    first_matching_rule,
    format_phone_number,
    get_country_name_by_id,
    safe_lookup,
)
from .models import FieldLookup, GroupLookup, OwnerType

logger = logging.getLogger(__name__)


APPLICANT_TYPE_FIELD = "applicant_type_MC"
JOINT_INDIVIDUALS = "joint individuals"

# Repeated group holding both joint owners; instance = owner number
JOINT_OWNER_GROUP = "joint_owner_info_GRP"
JOINT_OWNER_NUMBERS = (1, 2)

# Flat domicile fields; any one present means the applicant answered the
# domicile questions.
DOMICILE_FIELDS = (
    "domicile_street_address_ST",
    "domicile_country_ST",
    "domicile_country_outside_US_ST",
    "domicile_city_ST",
    "domicile_state_ST",
    "domicile_zip_code_ST",
)

# Raw (owner answer, domicile answers) pairs compared for "different domicile";
# the first answered domicile field of each pair is used.
_ADDRESS_DOMICILE_FIELDS = (
    ("street_address", ("domicile_street_address_ST",)),
    ("City",           ("domicile_city_ST",)),
    ("State",          ("domicile_state_ST",)),
    ("zip_code",       ("domicile_zip_code_ST",)),
    ("country",        ("domicile_country_ST", "domicile_country_outside_US_ST")),
)


# =============================================================================
# Entry point
# =============================================================================

def build_owners(fields: FieldLookup, groups: GroupLookup) -> list:
    """Build the owners array (0, 1 or 2 entries)."""
    applicant_type = fields.text(APPLICANT_TYPE_FIELD)
    if applicant_type is None:
        return []

    applicant_type = str(applicant_type)
    if applicant_type.lower() == JOINT_INDIVIDUALS:
        return build_joint_individual_owners(fields, groups, applicant_type)

    owner_type = (
        OwnerType.INDIVIDUAL if applicant_type.lower() == "individual" else OwnerType.JURISTIC
    )
    return [_build_single_owner(fields, applicant_type, owner_type)]


# =============================================================================
# Single owner (flat fields)
# =============================================================================

def _build_single_owner(fields: FieldLookup, applicant_type: str, owner_type: OwnerType) -> dict:
    owner_item: dict = {
        "ownerSelection": build_owner_selection(fields, applicant_type, owner_type),
    }

    if owner_type == OwnerType.INDIVIDUAL:
        owner_item["individualOwner"] = {
            "citizenshipCountry": get_country_name_by_id(fields.text("country_of_citizenship_")),
            "firstName":          fields.text("First_Name_of_Petitioner"),
            "middleName":         fields.text("applicant_middle_name_ST"),
            "lastName":           fields.text("Last_Name_of_Petitioner"),
        }
    else:
        owner_item["owner"] = {
            "corporationName":    fields.text("Name_of_Applicant"),
            "incorporationState": safe_lookup(STATE_NAME_TO_ID, fields.text("State")),
        }

    sole_proprietor_citizenship = get_country_name_by_id(fields.text("country_of_citizenship_"))
    if sole_proprietor_citizenship:
        owner_item["soleProprietor"] = {
            "soleProprietorCountryOfCitizenship": sole_proprietor_citizenship,
        }

    owner_item.update(build_alternate_name(fields))

    owner_item["ownerAddress"] = build_owner_address(fields)

    if has_different_domicile(fields):
        owner_item["differentDomicile"] = "yes"
        owner_item["domicileAddress"] = build_domicile_address(fields)

    owner_item["ownerEmailAddress"] = fields.text("e_mail_address")
    owner_item["ownerPhoneNumber"] = format_phone_number(fields.text("petitioner_s_telephone_number"))
    return owner_item


def build_owner_selection(fields: FieldLookup, applicant_type: str, owner_type: OwnerType) -> dict:
    """
    ownerSelection block.

    Applicant types missing from the entity-type table are passed through as
    entityTypeOther (free form) with no entityType.
    """
    country = fields.first("country", "entity_country") or settings.DEFAULT_OWNER_COUNTRY
    entity_type = safe_lookup(ENTITY_TYPE_NAME_TO_ID, applicant_type)

    selection: dict = {
        "ownerType":            owner_type.value,
        "incorporationCountry": get_country_name_by_id(country),
    }
    if entity_type:
        selection["entityType"] = entity_type
    selection["foreignEntityType_FreeForm"] = entity_type or applicant_type
    if not entity_type:
        logger.warning("Unrecognized applicant type %r; passing through as entityTypeOther",
                       applicant_type)
        selection["entityTypeOther"] = applicant_type
    return selection


def build_alternate_name(fields: FieldLookup) -> dict:
    """
    DBA / TA / AKA classification of DBA_AKA_TA_FKA_Choice_MC.

    Returns {} when neither the choice nor the alternate name was answered.
    A choice matching no rule is kept verbatim as dbaTypeOther.
    """
    choice = fields.text("DBA_AKA_TA_FKA_Choice_MC")
    alternate_name = fields.text("DBA_AKA_TA_FKA_Value_ST")

    result: dict = {}
    if choice:
        dba_type = first_matching_rule(str(choice), ALTERNATE_NAME_RULES)
        if dba_type:
            result["dbaType"] = dba_type
        else:
            result["dbaTypeOther"] = choice
    if alternate_name:
        result["alternateName"] = alternate_name
    return result


def build_owner_address(fields: FieldLookup) -> dict:
    """Owner address; a recognized US state implies United States."""
    owner_state = safe_lookup(STATE_NAME_TO_ID, fields.text("State"))
    owner_country = "United States" if owner_state else get_country_name_by_id(fields.text("country"))

    return {
        "ownerAddressLine1": fields.text("street_address"),
        "ownerCountry":      owner_country,
        "ownerCity":         fields.text("City"),
        "ownerState":        owner_state,
        "ownerZipCode":      fields.text("zip_code"),
    }


def build_domicile_address(fields: FieldLookup) -> dict:
    domicile_country = fields.first("domicile_country_ST", "domicile_country_outside_US_ST")

    return {
        "domicileAddressLine1": fields.text("domicile_street_address_ST"),
        "domicileCountry":      get_country_name_by_id(domicile_country),
        "domicileCity":         fields.text("domicile_city_ST"),
        "domicileState":        safe_lookup(STATE_NAME_TO_ID, fields.text("domicile_state_ST")),
        "domicileZipCode":      fields.text("domicile_zip_code_ST"),
    }


def has_different_domicile(fields: FieldLookup) -> bool:
    """
    True when domicile answers exist AND at least one of line 1 / city /
    state / zip / country differs from the owner answers.

    Raw answers are compared with plain inequality; state and country
    tables are not applied, so "Texas" and "TX" differ.
    """
    if not any(fields.has(name) for name in DOMICILE_FIELDS):
        return False

    return any(
        fields.text(owner_field) != fields.first(*domicile_fields)
        for owner_field, domicile_fields in _ADDRESS_DOMICILE_FIELDS
    )


# =============================================================================
# Joint individuals (group-indexed)
# =============================================================================

def build_joint_individual_owners(
    fields: FieldLookup,
    groups: GroupLookup,
    applicant_type: str,
) -> list:
    """
    Always two individual owners, one per owner number.

    Missing group answers leave the corresponding properties None; the
    DBA / TA / AKA block only applies to owner #1.
    """
    owners = []
    for owner_number in JOINT_OWNER_NUMBERS:
        owner_item = _build_joint_owner(fields, groups, applicant_type, owner_number)
        if owner_number == 1:
            owner_item.update(build_alternate_name(fields))
        owners.append(owner_item)
    return owners


def _joint_value(groups: GroupLookup, sub_field: str, owner_number: int) -> Optional[str]:
    return groups.find_value(JOINT_OWNER_GROUP, sub_field, owner_number)


def _build_joint_owner(
    fields: FieldLookup,
    groups: GroupLookup,
    applicant_type: str,
    owner_number: int,
) -> dict:
    owner_state = safe_lookup(STATE_NAME_TO_ID, _joint_value(groups, "state_ST", owner_number))
    owner_country = (
        "United States" if owner_state
        else get_country_name_by_id(_joint_value(groups, "country_ST", owner_number))
    )

    return {
        "ownerSelection": build_owner_selection(fields, applicant_type, OwnerType.INDIVIDUAL),
        "individualOwner": {
            "citizenshipCountry": get_country_name_by_id(
                _joint_value(groups, "citizenship_ST", owner_number)
            ),
            "firstName":  _joint_value(groups, "first_name_ST", owner_number),
            "middleName": _joint_value(groups, "middle_name_ST", owner_number),
            "lastName":   _joint_value(groups, "last_name_ST", owner_number),
        },
        "ownerAddress": {
            "ownerAddressLine1": _joint_value(groups, "street_address_ST", owner_number),
            "ownerCountry":      owner_country,
            "ownerCity":         _joint_value(groups, "city_ST", owner_number),
            "ownerState":        owner_state,
            "ownerZipCode":      _joint_value(groups, "zip_code_ST", owner_number),
        },
        "ownerEmailAddress": _joint_value(groups, "email_ST", owner_number),
        "ownerPhoneNumber":  format_phone_number(_joint_value(groups, "phone_ST", owner_number)),
    }
