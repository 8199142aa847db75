"""
Screen State
Dataclasses holding everything the two screens render and mutate.
Fields: input values, focus index, fetched issue title, errors, in-flight flags.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from daily.core.field_registry import CONFIRM_IDX, FIELDS
from daily.models.field_mapping import FieldMapping


@dataclass
class WizardState:
    # Destination form
    form_url: str
    field_mappings: FieldMapping

    # One entry per FIELDS item
    values: List[str] = field(default_factory=lambda: [f.initial_value() for f in FIELDS])
    focus: int = 0                      # CONFIRM_IDX means the submit step

    # Filled by gh when the issue link field is left with enter
    issue_title: str = ""

    # Displayable errors
    error: Optional[str] = None         # last action / lookup / submit error
    field_error: Optional[str] = None   # inline validator result for the hours field

    # In-flight flags (at most one background operation at a time)
    fetching: bool = False
    submitting: bool = False

    # Terminal "done" display
    completed: bool = False
    done_message: str = ""

    @property
    def busy(self) -> bool:
        return self.fetching or self.submitting

    @property
    def on_confirm(self) -> bool:
        return self.focus == CONFIRM_IDX


@dataclass
class SetupState:
    value: str = ""
    error: Optional[str] = None
    loading: bool = False
    form_url: str = ""          # canonical formResponse URL once accepted
