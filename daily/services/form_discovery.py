"""
Form Discovery Service
======================
Turns a user-supplied Google Forms URL into the form's field identifiers.

Steps:
    1. extract_form_id()          — pull the public form ID out of any form URL
    2. build_form_response_url()  — canonical /formResponse URL (stored in config)
    3. fetch_form_fields()        — GET the /viewform page and parse it

The GET has a bounded timeout and no retries. Transport errors and
unexpected statuses come back as a DiscoveryResult with an error string.
"""
import logging
import re
from typing import Optional

import httpx

from daily.core.config import HTTP_TIMEOUT
from daily.core.constants import (
    FORMS_BASE_URL,
    FORM_ID_PATTERN,
    FORM_RESPONSE_PATH,
    VIEW_FORM_PATH,
)
from daily.parser.form_parser import DiscoveryResult, parse_form_fields
from daily.utils.error_messages import with_detail

logger = logging.getLogger(__name__)


def extract_form_id(url: str) -> Optional[str]:
    """Extract the public form ID from a docs.google.com/forms/d/e/<id>/... URL."""
    match = re.search(FORM_ID_PATTERN, url or "")
    if match:
        return match.group(1)
    return None


def build_form_response_url(form_id: str) -> str:
    return FORMS_BASE_URL.format(form_id=form_id)


def to_view_url(form_url: str) -> str:
    """Swap the submission path for the viewable one."""
    return form_url.replace(FORM_RESPONSE_PATH, VIEW_FORM_PATH, 1)


async def fetch_form_fields(form_url: str, timeout: float = HTTP_TIMEOUT) -> DiscoveryResult:
    """
    Fetch the form's viewform page and extract its fields.

    Parameters
    ----------
    form_url : str
        Canonical formResponse URL.
    timeout : float
        Seconds allowed for the whole request.

    Returns
    -------
    DiscoveryResult
        Parsed fields, or an error message suitable for display.
    """
    view_url = to_view_url(form_url)
    logger.info("Discovering form fields from %s", view_url)

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        try:
            response = await client.get(view_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Form page returned HTTP %d", e.response.status_code)
            return DiscoveryResult(error=f"form page returned HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error("Form page request failed: %s", e)
            return DiscoveryResult(error=with_detail("could not reach form", str(e) or type(e).__name__))

    return parse_form_fields(response.text)
