"""
Constants
Centralised storage for Google Forms markers, URL shapes and field limits.
"""
CONFIG_FILE_NAME = "config.json"

FORMS_BASE_URL = "https://docs.google.com/forms/d/e/{form_id}/formResponse"
FORM_ID_PATTERN = r"forms/d/e/([a-zA-Z0-9_-]+)"
FORM_RESPONSE_PATH = "/formResponse"
VIEW_FORM_PATH = "/viewform"

# Embedded JSON blob inside the public form page
FORM_DATA_MARKER = "var FB_PUBLIC_LOAD_DATA_ = "
FORM_DATA_END = ";</script>"

ENTRY_PREFIX = "entry."
EMAIL_FIELD = "emailAddress"

# Statuses Google returns for an accepted formResponse POST
SUBMIT_SUCCESS_STATUSES = frozenset({200, 302, 303})

MIN_HOURS = 0.0
MAX_HOURS = 12.0

DISPLAY_DATE_FORMAT = "%d/%m/%Y"
