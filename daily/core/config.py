"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    DAILY_CONFIG_DIR     — Directory holding config.json (default: ~/.config/daily)
    DAILY_LOG_DIR        — Directory for log files (default: <config dir>/logs)
    DAILY_LOG_LEVEL      — Root log level name (default: INFO)
    DAILY_LOG_CONSOLE    — Also log to stderr (default: false)
    DAILY_SUBMIT_MODE    — "browser" (pre-filled form) or "post" (direct submit)
    DAILY_EMAIL          — Email address sent with direct submissions
    DAILY_HTTP_TIMEOUT   — Seconds allowed for form discovery / submission
    DAILY_GH_BINARY      — GitHub CLI executable (default: gh)
    DAILY_THEME          — "default" or "high-contrast"

Console Logging:
    The wizard runs full-screen. Anything written to stderr while it is
    running lands on top of the rendered form, so console logging stays
    off unless explicitly requested.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

CONFIG_DIR = Path(os.getenv("DAILY_CONFIG_DIR", "~/.config/daily")).expanduser()
LOG_DIR = Path(os.getenv("DAILY_LOG_DIR", str(CONFIG_DIR / "logs"))).expanduser()
LOG_LEVEL = os.getenv("DAILY_LOG_LEVEL", "INFO").upper()
LOG_TO_CONSOLE = os.getenv("DAILY_LOG_CONSOLE", "false").lower() in ("1", "true", "yes")

# Submission strategy: "browser" or "post"
SUBMIT_MODE = os.getenv("DAILY_SUBMIT_MODE", "browser").lower()
REPORTER_EMAIL = os.getenv("DAILY_EMAIL", "")

# Timeout in seconds for the form page scrape and direct submission
HTTP_TIMEOUT = float(os.getenv("DAILY_HTTP_TIMEOUT", 10))

GH_BINARY = os.getenv("DAILY_GH_BINARY", "gh")

THEME = os.getenv("DAILY_THEME", "default")
