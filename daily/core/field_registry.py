"""
Field Registry
==============
Static, ordered list of the wizard's input fields.

Each FieldDescriptor carries what the renderer needs (name, placeholder)
and what the state machine needs (character limit, default value,
validator). The order here is the order of the wizard steps; the confirm
step sits one past the last field at CONFIRM_IDX.

Validators take the raw text and return an error string, or None when
the value is acceptable.
"""
import math
from dataclasses import dataclass
from typing import Callable, Optional

from daily.core.constants import MIN_HOURS, MAX_HOURS
from daily.utils.dates import today_display
from daily.utils.error_messages import HOURS_NOT_A_NUMBER, HOURS_OUT_OF_RANGE


def validate_hours(value: str) -> Optional[str]:
    """
    Validate the hours-spent text.

    An empty string means "not entered yet" and is accepted here; the
    confirm step is where a missing value gets rejected.
    """
    if value == "":
        return None
    # float() allows digit separators ("1_0"); hours are plain decimals
    if "_" in value:
        return HOURS_NOT_A_NUMBER
    try:
        hours = float(value)
    except ValueError:
        return HOURS_NOT_A_NUMBER
    if math.isnan(hours):
        return HOURS_NOT_A_NUMBER
    if hours < MIN_HOURS or hours > MAX_HOURS:
        return HOURS_OUT_OF_RANGE
    return None


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    placeholder: str
    char_limit: int
    default: Optional[Callable[[], str]] = None
    validator: Optional[Callable[[str], Optional[str]]] = None

    def initial_value(self) -> str:
        return self.default() if self.default is not None else ""

    def validate(self, value: str) -> Optional[str]:
        return self.validator(value) if self.validator is not None else None


FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor("Date (DD/MM/YYYY)", "DD/MM/YYYY", 10, default=today_display),
    FieldDescriptor("GitHub Issue Link", "https://github.com/...", 200),
    FieldDescriptor("Project Name", "N/A", 100, default=lambda: "N/A"),
    FieldDescriptor("Progress Note", "What did you work on today?", 1000),
    FieldDescriptor("Hours Spent", "0.0", 5, validator=validate_hours),
)

DATE_IDX = 0
ISSUE_LINK_IDX = 1
PROJECT_NAME_IDX = 2
PROGRESS_NOTE_IDX = 3
HOURS_IDX = 4
CONFIRM_IDX = len(FIELDS)


def get_field(index: int) -> FieldDescriptor:
    """Descriptor for a wizard step. Raises IndexError for the confirm step."""
    if index < 0 or index >= len(FIELDS):
        raise IndexError(f"no field at step {index}")
    return FIELDS[index]


def field_count() -> int:
    return len(FIELDS)
