"""
CLI Entry Point
===============
Starts logging, reads config.json and opens either the setup screen or
the wizard.

    - config complete and form ID recognisable → wizard at field 0
    - anything else                            → setup screen

The only fatal path is failing to build or run the terminal session; that
prints "Error running program: ..." and exits non-zero.
"""
import logging
import sys
from typing import Optional

from daily.agents.command_runner import CommandRunner
from daily.agents.setup import new_setup_state
from daily.agents.submission_agent import SUBMIT_LABELS
from daily.agents.transitions import ScreenState
from daily.agents.wizard import new_wizard_state
from daily.core.config import LOG_LEVEL, SUBMIT_MODE, THEME
from daily.models.app_config import AppConfig
from daily.services.config_store import ConfigStore
from daily.services.form_discovery import build_form_response_url, extract_form_id
from daily.ui.app import DailyApp
from daily.ui.theme import get_theme
from daily.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def initial_state(config: AppConfig) -> ScreenState:
    """Pick the first screen from whatever config.json held."""
    if config.is_ready():
        form_id = extract_form_id(config.form_url)
        if form_id:
            logger.info("Config complete, opening wizard")
            return new_wizard_state(build_form_response_url(form_id), config.field_mappings)
        logger.warning("Stored form URL %s is not recognisable, rerunning setup", config.form_url)
    return new_setup_state()


def main(config_store: Optional[ConfigStore] = None) -> int:
    try:
        setup_logging(level=getattr(logging, LOG_LEVEL, logging.INFO))
    except OSError as e:
        print(f"Error running program: could not set up logging: {e}", file=sys.stderr)
        return 1

    store = config_store or ConfigStore()
    state = initial_state(store.load())

    try:
        runner = CommandRunner(config_store=store, submit_mode=SUBMIT_MODE)
        app = DailyApp(
            state,
            runner,
            theme=get_theme(THEME),
            submit_label=SUBMIT_LABELS[SUBMIT_MODE],
        )
        app.run()
    except Exception as e:
        logger.exception("Terminal session failed")
        print(f"Error running program: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
