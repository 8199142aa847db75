"""
Date Helpers
============
The wizard shows and edits dates as DD/MM/YYYY. Google Forms date
questions take YYYY-MM-DD, both in a pre-fill URL and in a direct
formResponse POST, so every outbound date goes through to_iso_date().
"""
from datetime import date
from typing import Optional

from daily.core.constants import DISPLAY_DATE_FORMAT


def today_display(today: Optional[date] = None) -> str:
    """Current date in the DD/MM/YYYY display format."""
    return (today or date.today()).strftime(DISPLAY_DATE_FORMAT)


def to_iso_date(ddmmyyyy: str) -> str:
    """
    Reorder a DD/MM/YYYY string into YYYY-MM-DD.

    Components are moved, never parsed, so "1/2/2026" becomes "2026-2-1".
    Anything that does not split into exactly three parts is returned as is.
    """
    parts = ddmmyyyy.split("/")
    if len(parts) == 3:
        return f"{parts[2]}-{parts[1]}-{parts[0]}"
    return ddmmyyyy
