"""
Wizard Agent
============
State transitions for the multi-field daily report wizard.

Steps:
    0..N-1  one per FIELDS entry (see core/field_registry.py)
    N       confirm / submit (CONFIRM_IDX)

Navigation:
    enter, tab, down      → next step, confirm wraps to 0
    shift+tab, up         → previous step, 0 wraps to confirm
    ctrl+c, esc           → quit

While a submission is in flight only the quit keys act; the values
being sent cannot be edited and no issue lookup can start.

Side effects are never performed here. A transition mutates the state
and may return ONE command (FetchIssueTitle / SubmitReport / Quit) for the
UI to execute; the command's completion comes back as an event.
"""
import logging
from typing import Optional, Tuple

from daily.core.field_registry import (
    CONFIRM_IDX,
    FIELDS,
    HOURS_IDX,
    ISSUE_LINK_IDX,
    PROGRESS_NOTE_IDX,
    PROJECT_NAME_IDX,
    DATE_IDX,
    validate_hours,
)
from daily.models.daily_report import DailyReport
from daily.models.events import (
    Event,
    FetchIssueTitle,
    IssueTitleFetched,
    KeyPress,
    OptionalCommand,
    Quit,
    SubmitCompleted,
    SubmitReport,
)
from daily.models.field_mapping import FieldMapping
from daily.state.wizard_state import WizardState
from daily.utils import error_messages as msg

logger = logging.getLogger(__name__)

FORWARD_KEYS = {"tab", "down"}
BACKWARD_KEYS = {"shift+tab", "up"}
QUIT_KEYS = {"ctrl+c", "esc"}


def new_wizard_state(form_url: str, field_mappings: FieldMapping) -> WizardState:
    """Fresh wizard at the first field, defaults (today's date, N/A) pre-filled."""
    return WizardState(form_url=form_url, field_mappings=field_mappings)


def edit_text(value: str, key: str, text: str, char_limit: int) -> Optional[str]:
    """
    Apply an editing key to a single-line value.

    Returns the new value, or None if the key is not an editing key.
    Inserted text has newlines stripped and is cut at char_limit.
    """
    if key == "backspace":
        return value[:-1]
    if key == "ctrl+u":
        return ""
    if key == "rune":
        clean = text.replace("\r", "").replace("\n", " ")
        room = max(char_limit - len(value), 0)
        return value + clean[:room]
    return None


# ---------------------------------------------------------------------------
# Focus movement
# ---------------------------------------------------------------------------
def focus_next(state: WizardState) -> None:
    state.focus = 0 if state.focus >= CONFIRM_IDX else state.focus + 1


def focus_prev(state: WizardState) -> None:
    state.focus = CONFIRM_IDX if state.focus <= 0 else state.focus - 1


# ---------------------------------------------------------------------------
# Confirm step
# ---------------------------------------------------------------------------
def validate_for_submit(state: WizardState) -> Optional[str]:
    """First reason the report cannot be submitted, or None."""
    values = state.values
    if not values[ISSUE_LINK_IDX].strip():
        return msg.ISSUE_LINK_REQUIRED
    if not state.issue_title:
        return msg.ISSUE_TITLE_NOT_FETCHED
    if not values[PROGRESS_NOTE_IDX].strip():
        return msg.PROGRESS_NOTE_REQUIRED
    if not values[HOURS_IDX].strip():
        return msg.HOURS_REQUIRED
    hours_error = validate_hours(values[HOURS_IDX].strip())
    if hours_error == msg.HOURS_NOT_A_NUMBER:
        return msg.INVALID_HOURS
    if hours_error:
        return f"hours spent {hours_error}"
    return None


def build_report(state: WizardState) -> DailyReport:
    values = state.values
    return DailyReport(
        date=values[DATE_IDX].strip(),
        issue_link=values[ISSUE_LINK_IDX].strip(),
        issue_title=state.issue_title,
        progress_note=values[PROGRESS_NOTE_IDX].strip(),
        project_name=values[PROJECT_NAME_IDX].strip(),
        hours=float(values[HOURS_IDX].strip()),
    )


def _handle_submit(state: WizardState) -> OptionalCommand:
    if state.fetching:
        state.error = msg.LOOKUP_IN_FLIGHT
        return None

    problem = validate_for_submit(state)
    if problem:
        logger.info("Submit blocked: %s", problem)
        state.error = problem
        return None

    state.error = None
    state.submitting = True
    return SubmitReport(
        report=build_report(state),
        form_url=state.form_url,
        field_mappings=state.field_mappings,
    )


# ---------------------------------------------------------------------------
# Transition function
# ---------------------------------------------------------------------------
def _handle_key(state: WizardState, event: KeyPress) -> OptionalCommand:
    key = event.key

    if state.completed:
        if key == "enter" or key in QUIT_KEYS:
            return Quit()
        return None

    if key in QUIT_KEYS:
        return Quit()

    # The report being sent is frozen until the submission completes
    if state.submitting:
        if key == "enter" and state.on_confirm:
            state.error = msg.SUBMIT_IN_FLIGHT
        return None

    if key == "enter":
        if state.on_confirm:
            return _handle_submit(state)
        if state.focus == ISSUE_LINK_IDX and state.values[ISSUE_LINK_IDX].strip() and not state.busy:
            state.fetching = True
            state.error = None
            issue_ref = state.values[ISSUE_LINK_IDX]
            focus_next(state)
            return FetchIssueTitle(issue_ref=issue_ref)
        focus_next(state)
        return None

    if key in FORWARD_KEYS:
        focus_next(state)
        return None

    if key in BACKWARD_KEYS:
        focus_prev(state)
        return None

    if state.on_confirm:
        return None

    descriptor = FIELDS[state.focus]
    edited = edit_text(state.values[state.focus], key, event.text, descriptor.char_limit)
    if edited is None or edited == state.values[state.focus]:
        return None

    state.values[state.focus] = edited
    if state.focus == ISSUE_LINK_IDX:
        # A stale title must not be submitted with a different link
        state.issue_title = ""
    if descriptor.validator is not None:
        state.field_error = descriptor.validate(edited)
    return None


def update_wizard(state: WizardState, event: Event) -> Tuple[WizardState, OptionalCommand]:
    """
    Apply one event to the wizard.

    Returns
    -------
    (WizardState, command | None)
        The (mutated) state and at most one command to execute.
    """
    if isinstance(event, KeyPress):
        return state, _handle_key(state, event)

    if isinstance(event, IssueTitleFetched):
        state.fetching = False
        if event.issue_ref and event.issue_ref != state.values[ISSUE_LINK_IDX]:
            logger.info("Discarding title for %s, link changed during lookup", event.issue_ref.strip())
            return state, None
        if event.error:
            state.error = event.error
        elif event.title:
            state.issue_title = event.title
            state.error = None
        else:
            state.error = msg.ISSUE_TITLE_EMPTY
        return state, None

    if isinstance(event, SubmitCompleted):
        state.submitting = False
        if event.success:
            state.completed = True
            state.done_message = event.message
            state.error = None
        else:
            state.error = event.error
        return state, None

    logger.debug("Wizard ignoring %s", type(event).__name__)
    return state, None
