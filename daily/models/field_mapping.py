"""
Field Mapping Model
===================
Pydantic model associating each semantic slot of the daily report with the
opaque Google Forms field identifier (the number after ``entry.``).

Fields:
    date            — report date question
    issue_link      — GitHub issue URL question
    issue_title     — issue title question (filled from gh, never typed)
    progress_note   — free-text progress question
    project_name    — project question
    hours_spent     — hours question

A mapping is only usable when every slot is filled; see is_complete().
"""
from typing import List

from pydantic import BaseModel

from .form_field import FormField

# Slot order used for positional mapping and for building submissions
SLOT_ORDER = (
    "date",
    "issue_link",
    "issue_title",
    "progress_note",
    "project_name",
    "hours_spent",
)


class FieldMapping(BaseModel):
    date: str = ""
    issue_link: str = ""
    issue_title: str = ""
    progress_note: str = ""
    project_name: str = ""
    hours_spent: str = ""

    def is_complete(self) -> bool:
        return all(getattr(self, slot) for slot in SLOT_ORDER)

    @classmethod
    def from_fields(cls, fields: List[FormField]) -> "FieldMapping":
        """
        Map discovered fields to slots by position.

        The first six fields go to SLOT_ORDER in order. With fewer than six
        the result is an empty, incomplete mapping.
        """
        if len(fields) < len(SLOT_ORDER):
            return cls()
        return cls(**{slot: fields[i].id for i, slot in enumerate(SLOT_ORDER)})
