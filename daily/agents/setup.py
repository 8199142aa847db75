"""
Setup Agent
===========
State transitions for the first-run setup screen.

Flow:
    enter (URL typed)   → validate URL, return DiscoverForm
    FormFieldsFetched   → map fields, return PersistConfig (or show error)
    ConfigSaved         → hand over to a fresh WizardState

Every error keeps the user on the setup screen with the URL still in
the input, so fixing a typo and pressing enter again is the retry path.
"""
import logging
from typing import Tuple, Union

from daily.agents.wizard import edit_text, new_wizard_state
from daily.models.app_config import AppConfig
from daily.models.events import (
    ConfigSaved,
    DiscoverForm,
    Event,
    FormFieldsFetched,
    KeyPress,
    OptionalCommand,
    PersistConfig,
    Quit,
)
from daily.models.field_mapping import FieldMapping
from daily.services.form_discovery import build_form_response_url, extract_form_id
from daily.state.wizard_state import SetupState, WizardState
from daily.utils import error_messages as msg

logger = logging.getLogger(__name__)

URL_CHAR_LIMIT = 300
QUIT_KEYS = {"ctrl+c", "esc"}


def new_setup_state() -> SetupState:
    return SetupState()


def _handle_enter(state: SetupState) -> OptionalCommand:
    input_url = state.value.strip()
    if not input_url or "forms" not in input_url:
        state.error = msg.INVALID_FORM_URL
        return None

    form_id = extract_form_id(input_url)
    if not form_id:
        state.error = msg.INVALID_FORM_URL
        return None

    state.form_url = build_form_response_url(form_id)
    state.loading = True
    state.error = None
    logger.info("Setup accepted form %s", form_id)
    return DiscoverForm(form_url=state.form_url)


def update_setup(state: SetupState, event: Event) -> Tuple[Union[SetupState, WizardState], OptionalCommand]:
    """
    Apply one event to the setup screen.

    Returns
    -------
    (SetupState | WizardState, command | None)
        A WizardState is returned once the config has been saved.
    """
    if isinstance(event, KeyPress):
        if event.key in QUIT_KEYS:
            return state, Quit()
        if state.loading:
            return state, None
        if event.key == "enter":
            return state, _handle_enter(state)
        edited = edit_text(state.value, event.key, event.text, URL_CHAR_LIMIT)
        if edited is not None:
            state.value = edited
        return state, None

    if isinstance(event, FormFieldsFetched):
        if event.error:
            state.error = event.error
            state.loading = False
            return state, None
        mapping = FieldMapping.from_fields(event.fields)
        if not mapping.is_complete():
            logger.warning("Form only has %d usable field(s)", len(event.fields))
            state.error = msg.FORM_TOO_SMALL
            state.loading = False
            return state, None
        return state, PersistConfig(config=AppConfig(form_url=state.form_url, field_mappings=mapping))

    if isinstance(event, ConfigSaved):
        if event.error:
            state.error = msg.with_detail(msg.CONFIG_WRITE_FAILED, event.error)
            state.loading = False
            return state, None
        logger.info("Setup complete, starting wizard")
        return new_wizard_state(event.config.form_url, event.config.field_mappings), None

    logger.debug("Setup ignoring %s", type(event).__name__)
    return state, None
