"""
Error Messages
==============
Standardised displayable error strings.

Every failure the wizard can recover from ends up as one of these strings
on the current screen state. Keeping them here gives the state machine,
the services and the tests a single source for the exact wording.
"""


# ---------------------------------------------------------------------------
# Validation (inline, never fatal)
# ---------------------------------------------------------------------------
HOURS_NOT_A_NUMBER = "must be a number"
HOURS_OUT_OF_RANGE = "must be between 0 and 12"
ISSUE_LINK_REQUIRED = "issue link is required"
ISSUE_TITLE_NOT_FETCHED = "issue title not fetched - run 'gh auth login' first"
PROGRESS_NOTE_REQUIRED = "progress note is required"
HOURS_REQUIRED = "hours spent is required"
INVALID_HOURS = "invalid hours value"
LOOKUP_IN_FLIGHT = "still fetching the issue title - try again in a moment"
SUBMIT_IN_FLIGHT = "submission already in progress"

# ---------------------------------------------------------------------------
# External calls
# ---------------------------------------------------------------------------
ISSUE_TITLE_EMPTY = "issue title is empty"
GH_NOT_FOUND = "gh CLI not found - install it from https://cli.github.com"
BROWSER_OPEN_FAILED = "could not open a browser"

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------
INVALID_FORM_URL = "invalid Google Forms URL"
MARKER_NOT_FOUND = "FB_PUBLIC_LOAD_DATA_ not found"
DATA_MALFORMED = "could not parse form data"
FORM_TOO_SMALL = "form needs at least 6 fields"
CONFIG_WRITE_FAILED = "could not save config"


def with_detail(message: str, detail: object) -> str:
    """
    Append a detail to a standard message.

    Parameters
    ----------
    message : str
        One of the constants above.
    detail : object
        Exception or text describing the underlying cause.

    Returns
    -------
    str
        ``"<message>: <detail>"``, or just the message if detail is empty.
    """
    text = str(detail or "").strip()
    return f"{message}: {text}" if text else message
