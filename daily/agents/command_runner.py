"""
Command Runner
==============
Executes the commands returned by the transition function and answers each
with its completion event.

    FetchIssueTitle  → IssueAgent.fetch_title        → IssueTitleFetched
    SubmitReport     → build_submitter(...).submit  → SubmitCompleted
    DiscoverForm     → fetch_form_fields            → FormFieldsFetched
    PersistConfig    → ConfigStore.save             → ConfigSaved

run() never raises for an expected failure; those become the event's
error string. Quit is not a runnable command.
"""
import logging
from typing import Optional

from daily.agents.issue_agent import IssueAgent
from daily.agents.submission_agent import SUBMIT_MODES, build_submitter
from daily.core.config import REPORTER_EMAIL, SUBMIT_MODE
from daily.models.events import (
    Command,
    ConfigSaved,
    DiscoverForm,
    Event,
    FetchIssueTitle,
    FormFieldsFetched,
    IssueTitleFetched,
    PersistConfig,
    SubmitCompleted,
    SubmitReport,
)
from daily.services.config_store import ConfigStore
from daily.services.form_discovery import fetch_form_fields

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs one command at a time on behalf of the UI."""

    def __init__(
        self,
        config_store: Optional[ConfigStore] = None,
        issue_agent: Optional[IssueAgent] = None,
        submit_mode: str = SUBMIT_MODE,
        email: str = REPORTER_EMAIL,
    ) -> None:
        if submit_mode not in SUBMIT_MODES:
            raise ValueError(f"unknown submit mode '{submit_mode}', expected one of {', '.join(SUBMIT_MODES)}")
        self.config_store = config_store or ConfigStore()
        self.issue_agent = issue_agent or IssueAgent()
        self.submit_mode = submit_mode
        self.email = email

    async def run(self, command: Command) -> Event:
        logger.debug("Running %s", type(command).__name__)

        if isinstance(command, FetchIssueTitle):
            result = await self.issue_agent.fetch_title(command.issue_ref)
            return IssueTitleFetched(title=result.title, error=result.error, issue_ref=command.issue_ref)

        if isinstance(command, SubmitReport):
            submitter = build_submitter(self.submit_mode, command.form_url, command.field_mappings, self.email)
            result = await submitter.submit(command.report)
            return SubmitCompleted(success=result.success, error=result.error, message=result.message)

        if isinstance(command, DiscoverForm):
            result = await fetch_form_fields(command.form_url)
            return FormFieldsFetched(fields=result.fields, error=result.error)

        if isinstance(command, PersistConfig):
            try:
                self.config_store.save(command.config)
            except OSError as e:
                logger.error("Config write failed: %s", e)
                return ConfigSaved(config=command.config, error=str(e))
            return ConfigSaved(config=command.config)

        raise ValueError(f"{type(command).__name__} is not a runnable command")


def failure_event(command: Command, error: str) -> Event:
    """Completion event reporting that a command blew up unexpectedly."""
    if isinstance(command, FetchIssueTitle):
        return IssueTitleFetched(error=error, issue_ref=command.issue_ref)
    if isinstance(command, SubmitReport):
        return SubmitCompleted(success=False, error=error)
    if isinstance(command, DiscoverForm):
        return FormFieldsFetched(error=error)
    if isinstance(command, PersistConfig):
        return ConfigSaved(config=command.config, error=error)
    raise ValueError(f"{type(command).__name__} is not a runnable command")
