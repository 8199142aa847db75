"""
Submission Agent
================
Delivers a DailyReport to the Google Form.

Strategies (chosen once, by DAILY_SUBMIT_MODE):
    browser — build a pre-filled /viewform URL and open it in the default
              browser. Success only means the browser was launched; the
              user still presses Submit on the form.
    post    — POST the same entry.<id> values (plus emailAddress) to
              /formResponse. 200, 302 and 303 count as accepted.

Date convention:
    Both strategies send the date as YYYY-MM-DD (see utils/dates.py).
    Hours always go out with one decimal.
"""
import asyncio
import logging
import webbrowser
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlencode

import httpx

from daily.core.config import HTTP_TIMEOUT
from daily.core.constants import ENTRY_PREFIX, EMAIL_FIELD, SUBMIT_SUCCESS_STATUSES
from daily.models.daily_report import DailyReport
from daily.models.field_mapping import FieldMapping, SLOT_ORDER
from daily.services.form_discovery import to_view_url
from daily.utils.error_messages import BROWSER_OPEN_FAILED, with_detail

logger = logging.getLogger(__name__)

SUBMIT_MODES = ("browser", "post")
SUBMIT_LABELS = {
    "browser": "Open Pre-filled Form",
    "post": "Submit Report",
}


@dataclass
class SubmissionResult:
    success: bool
    status_code: Optional[int] = None
    error: str = ""
    message: str = ""


def _entry_pairs(mapping: FieldMapping, report: DailyReport) -> Dict[str, str]:
    values = report.slot_values()
    return {ENTRY_PREFIX + getattr(mapping, slot): values[slot] for slot in SLOT_ORDER}


def build_prefill_url(form_url: str, mapping: FieldMapping, report: DailyReport) -> str:
    """
    Build the pre-filled viewform URL.

    ``usp=pp_url`` comes first, then one ``entry.<id>`` per slot in
    SLOT_ORDER.
    """
    params = {"usp": "pp_url"}
    params.update(_entry_pairs(mapping, report))
    return f"{to_view_url(form_url)}?{urlencode(params)}"


def build_submission_payload(mapping: FieldMapping, report: DailyReport, email: str = "") -> Dict[str, str]:
    """Form-encoded body for a direct formResponse POST."""
    payload = _entry_pairs(mapping, report)
    payload[EMAIL_FIELD] = email
    return payload


class BrowserSubmitter:
    """Opens the pre-filled form in the user's default browser."""

    success_message = "✓ Pre-filled form opened in browser!"

    def __init__(self, form_url: str, mapping: FieldMapping) -> None:
        self.form_url = form_url
        self.mapping = mapping

    async def submit(self, report: DailyReport) -> SubmissionResult:
        url = build_prefill_url(self.form_url, self.mapping, report)
        logger.info("Opening pre-filled form (%d chars)", len(url))
        loop = asyncio.get_running_loop()
        try:
            opened = await loop.run_in_executor(None, webbrowser.open, url)
        except webbrowser.Error as e:
            logger.error("Browser hand-off failed: %s", e)
            return SubmissionResult(success=False, error=with_detail(BROWSER_OPEN_FAILED, e))
        if not opened:
            logger.error("No runnable browser found")
            return SubmissionResult(success=False, error=BROWSER_OPEN_FAILED)
        return SubmissionResult(success=True, message=self.success_message)


class FormPostSubmitter:
    """Posts the report straight to the form's formResponse endpoint."""

    success_message = "✓ Daily report submitted!"

    def __init__(self, form_url: str, mapping: FieldMapping, email: str = "", timeout: float = HTTP_TIMEOUT) -> None:
        self.form_url = form_url
        self.mapping = mapping
        self.email = email
        self.timeout = timeout

    async def submit(self, report: DailyReport) -> SubmissionResult:
        payload = build_submission_payload(self.mapping, report, self.email)
        logger.info("Submitting report to %s", self.form_url)

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=False) as client:
            try:
                response = await client.post(self.form_url, data=payload)
            except httpx.HTTPError as e:
                logger.error("Submission request failed: %s", e)
                return SubmissionResult(
                    success=False,
                    error=with_detail("submission failed", str(e) or type(e).__name__),
                )

        if response.status_code in SUBMIT_SUCCESS_STATUSES:
            logger.info("Submission accepted with HTTP %d", response.status_code)
            return SubmissionResult(success=True, status_code=response.status_code, message=self.success_message)

        logger.error("Submission rejected with HTTP %d", response.status_code)
        return SubmissionResult(
            success=False,
            status_code=response.status_code,
            error=f"submission failed: HTTP {response.status_code}",
        )


def build_submitter(mode: str, form_url: str, mapping: FieldMapping, email: str = ""):
    """
    Create the submitter for a mode.

    Raises
    ------
    ValueError
        If mode is not one of SUBMIT_MODES.
    """
    if mode == "browser":
        return BrowserSubmitter(form_url, mapping)
    if mode == "post":
        return FormPostSubmitter(form_url, mapping, email=email)
    raise ValueError(f"unknown submit mode '{mode}', expected one of {', '.join(SUBMIT_MODES)}")
