"""
mapper.py - Proofer -> TRADEMARK_EXPERT Document Mapper
=======================================================
Transforms Proofer questionnaire data into the TRADEMARK_EXPERT answer
data of the IP product service.

Input (Proofer questionnaire field group answers):
  {
    "fieldAnswers": [{"fieldName": "mark", "fieldValue": "Acme"}, ...],
    "groupAnswers": [{"groupName": "signatory_info_GRP",
                      "fieldName": "signatory_info_GRP_signature_ST_1",
                      "fieldValue": "Jane Doe", "groupIndex": 1}, ...]
  }

Output (TRADEMARK_EXPERT):
  {
    "attorney":              {...}    (omitted when unanswered)
    "owners":                [...]    (0, 1 or 2 entries)
    "markSelection":         {...}
    "goodsAndServices":      {...}
    "signatory":             {...}
    "additionalInformation": {...}    (omitted when no tag is selected)
  }

map_proofer_to_trademark_expert() is a pure function of its input.  Any
exception raised while mapping is re-raised once as TrademarkMappingError
naming the failed stage, so a batch driver records one failure per order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Tuple

from pydantic import ValidationError

from .additional_information import build_additional_information
from .mapper_utils import build_field_lookup, build_group_lookup
from .models import FieldLookup, GroupLookup, ProoferData, TrademarkMappingError
from .owners import build_owners
from .sections import (
    build_attorney,
    build_goods_and_services,
    build_mark_selection,
    build_signatory,
)

logger = logging.getLogger(__name__)


SectionBuilder = Callable[[FieldLookup, GroupLookup], Any]

# Output order of the target record
SECTION_BUILDERS: List[Tuple[str, SectionBuilder]] = [
    ("attorney",              build_attorney),
    ("owners",                build_owners),
    ("markSelection",         build_mark_selection),
    ("goodsAndServices",      build_goods_and_services),
    ("signatory",             build_signatory),
    ("additionalInformation", build_additional_information),
]

# Sections dropped from the record when their builder returns {}
OPTIONAL_SECTIONS = frozenset({"attorney", "additionalInformation"})


def assemble_trademark_record(fields: FieldLookup, groups: GroupLookup) -> dict:
    """
    Run every section builder in output order and apply the
    omit-empty-section rule.

    A builder failure is raised as TrademarkMappingError naming the section.
    """
    record: dict = {}
    for section, builder in SECTION_BUILDERS:
        try:
            value = builder(fields, groups)
        except Exception as exc:
            raise TrademarkMappingError(section, str(exc)) from exc
        if section in OPTIONAL_SECTIONS and not value:
            logger.debug("Section %s empty; omitted", section)
            continue
        record[section] = value
    return record


def map_proofer_to_trademark_expert(proofer_data: Any) -> dict:
    """
    Map Proofer questionnaire data to TRADEMARK_EXPERT format.

    Args:
        proofer_data: dict matching the input contract, or a ProoferData.

    Returns:
        JSON-serializable TRADEMARK_EXPERT dict.

    Raises:
        TrademarkMappingError: input violates the contract or a builder failed.
    """
    try:
        data = ProoferData.from_payload(proofer_data)
    except ValidationError as exc:
        logger.error("Proofer data rejected: %s", exc)
        raise TrademarkMappingError("input", str(exc)) from exc

    fields = build_field_lookup(data.field_answers)
    groups = build_group_lookup(data.group_answers)
    logger.debug("Indexed %d field answers and %d groups", len(fields), len(groups))

    try:
        record = assemble_trademark_record(fields, groups)
    except TrademarkMappingError as exc:
        logger.error("Proofer mapping failed during %s: %s", exc.stage, exc.original_message)
        raise

    logger.info(
        "Mapped Proofer data: owners=%d, additionalInformation=%s",
        len(record["owners"]),
        record.get("additionalInformation", {}).get("selectAdditionalInformation", []),
    )
    return record
