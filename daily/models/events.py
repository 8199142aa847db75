"""
Events and Commands
===================
Tagged variants flowing through the wizard's single transition function.

Events go IN to transitions.update():
    KeyPress            — one key from the terminal (normalised name + text)
    IssueTitleFetched   — completion of a gh lookup
    SubmitCompleted     — completion of a browser hand-off or POST
    FormFieldsFetched   — completion of form discovery (setup screen)
    ConfigSaved         — completion of the config write (setup screen)

Commands come OUT of transitions.update() and are executed by the
CommandRunner, which answers each one with exactly one completion event:
    FetchIssueTitle  → IssueTitleFetched
    SubmitReport     → SubmitCompleted
    DiscoverForm     → FormFieldsFetched
    PersistConfig    → ConfigSaved
    Quit             — handled by the UI, no completion event

Key names used in KeyPress.key:
    enter, tab, shift+tab, up, down, esc, ctrl+c, backspace, ctrl+u, rune
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .app_config import AppConfig
from .daily_report import DailyReport
from .field_mapping import FieldMapping
from .form_field import FormField


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class KeyPress:
    key: str
    text: str = ""


@dataclass(frozen=True)
class IssueTitleFetched:
    title: str = ""
    error: str = ""
    issue_ref: str = ""     # reference the lookup was started for


@dataclass(frozen=True)
class SubmitCompleted:
    success: bool
    error: str = ""
    message: str = ""


@dataclass(frozen=True)
class FormFieldsFetched:
    fields: List[FormField] = field(default_factory=list)
    error: str = ""


@dataclass(frozen=True)
class ConfigSaved:
    config: AppConfig
    error: str = ""


Event = Union[KeyPress, IssueTitleFetched, SubmitCompleted, FormFieldsFetched, ConfigSaved]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FetchIssueTitle:
    issue_ref: str


@dataclass(frozen=True)
class SubmitReport:
    report: DailyReport
    form_url: str
    field_mappings: FieldMapping


@dataclass(frozen=True)
class DiscoverForm:
    form_url: str


@dataclass(frozen=True)
class PersistConfig:
    config: AppConfig


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[FetchIssueTitle, SubmitReport, DiscoverForm, PersistConfig, Quit]
OptionalCommand = Optional[Command]
