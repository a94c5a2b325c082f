"""
models.py - Proofer / Trademark Data Models
===========================================
Pydantic models and data structures for mapping Proofer questionnaire
answers onto the TRADEMARK_EXPERT answer data of the IP product service.

Contains:
  - OwnerType:            individual / juristic enum
  - ClaimNature:          Section 2(f) claim nature enum (whole / in part)
  - FieldAnswer:          one flat questionnaire answer (input contract)
  - GroupAnswer:          one repeated-group questionnaire answer (input contract)
  - ProoferData:          Pydantic input model {fieldAnswers, groupAnswers}
  - GroupEntry:           one indexed entry inside a GroupLookup
  - FieldLookup:          fieldName -> trimmed value map
  - GroupLookup:          groupName -> ordered GroupEntry list
  - TrademarkMappingError / ReportGenerationError
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================
# Enums
# =============================================================

class OwnerType(str, Enum):
    """Owner classification used by ownerSelection.ownerType."""
    INDIVIDUAL = "individual"
    JURISTIC   = "juristic"


class ClaimNature(str, Enum):
    """Section 2(f) acquired-distinctiveness claim nature."""
    WHOLE   = "whole"     # claim covers the mark as a whole
    IN_PART = "in_part"   # claim covers only a portion of the mark


# =============================================================
# Errors
# =============================================================

class TrademarkMappingError(Exception):
    """
    Raised once per document when the mapper cannot produce a record.

    `stage` names the mapping step that failed ("input", "owners", ...);
    `original_message` keeps the message of the underlying exception so a
    migration driver can write it straight into its results report.
    """

    def __init__(self, stage: str, original_message: str):
        self.stage = stage
        self.original_message = original_message
        super().__init__(
            f"Failed to map Proofer data during '{stage}': {original_message}"
        )


class ReportGenerationError(Exception):
    """Raised when the Proofer PDF report cannot be rendered."""


# =============================================================
# Input contract (Pydantic)
# =============================================================

class FieldAnswer(BaseModel):
    """
    A single flat questionnaire answer.

    fieldValue is typed Any: non-string values pass through the indexer
    unmodified. Whether fieldValue was sent at all (vs. sent as null) is
    read from model_fields_set.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    field_name:  Optional[str] = Field(default=None, alias="fieldName")
    field_value: Any           = Field(default=None, alias="fieldValue")

    @property
    def has_value(self) -> bool:
        return "field_value" in self.model_fields_set


class GroupAnswer(FieldAnswer):
    """A questionnaire answer that belongs to one instance of a repeated group."""

    group_name:  Optional[str] = Field(default=None, alias="groupName")
    group_index: Optional[int] = Field(default=None, alias="groupIndex")


class ProoferData(BaseModel):
    """
    Proofer questionnaire field group answers, as returned by the answer bank.

    Both arrays may be empty, null or missing entirely.  Only the array shape
    is checked here; each entry is validated by the indexers
    (mapper_utils.build_field_lookup / build_group_lookup), which skip a
    malformed entry instead of rejecting the whole document.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    field_answers: List[Any] = Field(default_factory=list, alias="fieldAnswers")
    group_answers: List[Any] = Field(default_factory=list, alias="groupAnswers")

    @field_validator("field_answers", "group_answers", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_payload(cls, payload: Any) -> "ProoferData":
        """Validate a raw dict (or pass through an existing model)."""
        if isinstance(payload, cls):
            return payload
        if payload is None:
            return cls()
        return cls.model_validate(payload)


# =============================================================
# Lookups
# =============================================================

@dataclass(frozen=True)
class GroupEntry:
    """One field of one repeated-group instance."""
    field_name:  str
    field_value: Any
    group_index: int


class FieldLookup(Dict[str, Any]):
    """
    fieldName -> trimmed fieldValue.

    Plain dict semantics are kept (an explicit "" is stored), with two
    accessors used by the section builders:
      text(name)  -> the value, or None when absent / blank
      has(name)   -> True when text(name) is not None
    """

    def text(self, name: str) -> Optional[Any]:
        value = self.get(name)
        if value is None or value == "":
            return None
        return value

    def has(self, name: str) -> bool:
        return self.text(name) is not None

    def first(self, *names: str) -> Optional[Any]:
        """Return the first non-blank value among names, in order."""
        for name in names:
            value = self.text(name)
            if value is not None:
                return value
        return None


class GroupLookup(Dict[str, List[GroupEntry]]):
    """groupName -> GroupEntry list in source order."""

    def entries(self, group_name: str, group_index: Optional[int] = None) -> List[GroupEntry]:
        """All entries of a group, optionally restricted to one instance."""
        entries = self.get(group_name) or []
        if group_index is None:
            return list(entries)
        return [e for e in entries if e.group_index == group_index]

    def find_value(
        self,
        group_name: str,
        sub_field: str,
        group_index: Optional[int] = None,
    ) -> Optional[Any]:
        """
        Value of the first entry whose fieldName contains sub_field.

        Blank values count as absent.
        """
        for entry in self.entries(group_name, group_index):
            if sub_field in entry.field_name:
                if entry.field_value is None or entry.field_value == "":
                    return None
                return entry.field_value
        return None
