"""
Transitions
Single entry point routing every event to the screen that is showing.
"""
from typing import Tuple, Union

from daily.agents.setup import update_setup
from daily.agents.wizard import update_wizard
from daily.models.events import Event, OptionalCommand
from daily.state.wizard_state import SetupState, WizardState

ScreenState = Union[SetupState, WizardState]


def update(state: ScreenState, event: Event) -> Tuple[ScreenState, OptionalCommand]:
    if isinstance(state, SetupState):
        return update_setup(state, event)
    return update_wizard(state, event)
