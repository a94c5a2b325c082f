"""
mapper_utils.py - Mapper Utilities
==================================
Pure helpers shared by the section builders and the note / report builders:

  - build_field_lookup / build_group_lookup   answer indexers
  - safe_lookup                               case-insensitive table lookup
  - first_matching_rule                       ordered substring rule evaluation
  - format_phone_number                       best-effort US phone formatting
  - split_full_name                           first / middle / last split
  - get_country_name_by_id                    country code or name -> name
  - parse_used_trademark_in_commerce          intake-note line parser
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import ValidationError

from .lookup_tables import COUNTRY_ID_TO_NAME, COUNTRY_NAMES_LOWER
from .models import FieldAnswer, FieldLookup, GroupAnswer, GroupEntry, GroupLookup

logger = logging.getLogger(__name__)

V = TypeVar("V")
A = TypeVar("A", FieldAnswer, GroupAnswer)

_NON_DIGITS = re.compile(r"[^\d]")
_USED_IN_COMMERCE = re.compile(r"Used trademark in commerce:\s*(Yes|No)", re.IGNORECASE)


# =============================================================================
# Indexers
# =============================================================================

def _clean(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _as_answer(answer: Any, model: Type[A]) -> Optional[A]:
    """
    Accept a validated answer model or a raw dict.

    Entries that are not mappings, or fail validation (e.g. a groupIndex of
    "first"), are logged and skipped -> None.
    """
    if isinstance(answer, model):
        return answer
    if not isinstance(answer, Mapping):
        logger.warning("Skipping non-object answer entry %r", answer)
        return None
    try:
        return model.model_validate(answer)
    except ValidationError as exc:
        logger.warning("Skipping malformed answer %r: %s", answer, exc.errors()[0]["msg"])
        return None


def build_field_lookup(answers: Optional[Iterable[Any]]) -> FieldLookup:
    """
    Index flat answers into fieldName -> trimmed fieldValue.

    - None / non-list input -> empty lookup
    - answers without a fieldName, or without a fieldValue at all, are skipped
    - an explicit "" or null fieldValue IS stored
    - duplicate names: last one in source order wins
    """
    lookup = FieldLookup()
    if not isinstance(answers, (list, tuple)):
        return lookup

    for raw in answers:
        answer = _as_answer(raw, FieldAnswer)
        if answer is None:
            continue
        if not answer.field_name or not answer.has_value:
            continue
        lookup[answer.field_name] = _clean(answer.field_value)
    return lookup


def build_group_lookup(group_answers: Optional[Iterable[Any]]) -> GroupLookup:
    """
    Index repeated-group answers into groupName -> [GroupEntry, ...].

    An answer belongs to a group only when it carries both a groupName and a
    groupIndex.  Entries keep source order; instance membership is read from
    GroupEntry.group_index.
    """
    lookup = GroupLookup()
    if not isinstance(group_answers, (list, tuple)):
        return lookup

    for raw in group_answers:
        answer = _as_answer(raw, GroupAnswer)
        if answer is None:
            continue
        if not answer.group_name or answer.group_index is None:
            continue
        lookup.setdefault(answer.group_name, []).append(
            GroupEntry(
                field_name=answer.field_name or "",
                field_value=_clean(answer.field_value),
                group_index=answer.group_index,
            )
        )
    return lookup


# =============================================================================
# Table lookups
# =============================================================================

def safe_lookup(table: Optional[Mapping[str, V]], key: Any) -> Optional[V]:
    """Case-insensitive exact-match lookup; None when key or table is missing."""
    if not key or not table:
        return None
    return table.get(str(key).lower())


def first_matching_rule(value: Optional[str], rules: Sequence[Tuple[str, V]]) -> Optional[V]:
    """
    Evaluate an ordered (token, result) rule table against value.

    Returns the result of the first rule whose token occurs in value
    (case-insensitive substring), or None.
    """
    if not value:
        return None
    lowered = value.lower()
    for token, result in rules:
        if token in lowered:
            return result
    return None


# =============================================================================
# Formatting
# =============================================================================

def format_phone_number(phone_number: Optional[str]) -> Optional[str]:
    """
    Format a phone number to +1XXXXXXXXXX when the digits allow it.

    Recognized shapes:
      "+1" prefix with 11 digits -> unchanged
      10 digits                  -> "+1" + digits
      11 digits starting with 1  -> "+" + digits
    Anything else is returned unchanged.
    """
    if not phone_number:
        return None

    phone_number = str(phone_number)
    digits = _NON_DIGITS.sub("", phone_number)

    if phone_number.startswith("+1") and len(digits) == 11:
        return phone_number
    if len(digits) == 10:
        return f"+1{digits}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"
    return phone_number


def split_full_name(full_name: Optional[str]) -> dict:
    """
    Split a full name into firstName / middleName / lastName.

      "Doe"              -> last only
      "Jane Doe"         -> first + last
      "Jane Q Public Doe"-> first, middle "Q Public", last
    """
    if not full_name or not full_name.strip():
        return {"firstName": None, "middleName": None, "lastName": None}

    parts = full_name.split()

    if len(parts) == 1:
        return {"firstName": None, "middleName": None, "lastName": parts[0]}
    if len(parts) == 2:
        return {"firstName": parts[0], "middleName": None, "lastName": parts[1]}
    return {
        "firstName":  parts[0],
        "middleName": " ".join(parts[1:-1]),
        "lastName":   parts[-1],
    }


def get_country_name_by_id(country: Optional[str]) -> Optional[str]:
    """
    Resolve a country code or name to a country name.

    Code lookup first; an input that already is a known country name is
    returned with its original casing; anything else -> None.
    """
    if not country:
        return None

    lowered = str(country).lower()
    name = COUNTRY_ID_TO_NAME.get(lowered)
    if name:
        return name
    if lowered in COUNTRY_NAMES_LOWER:
        return country
    return None


def parse_used_trademark_in_commerce(internal_note: Optional[str]) -> Optional[str]:
    """Return "Yes" / "No" from a 'Used trademark in commerce: ...' line, if any."""
    if not internal_note:
        return None
    match = _USED_IN_COMMERCE.search(str(internal_note))
    if match:
        return match.group(1).strip()
    return None


def split_registration_numbers(raw: Optional[str]) -> List[str]:
    """Split a comma-separated registration list; trims and drops empties."""
    if not raw:
        return []
    return [part.strip() for part in str(raw).split(",") if part.strip()]
