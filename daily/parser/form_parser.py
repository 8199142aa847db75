"""
Form Parser
===========
Extracts question labels and field identifiers from a public Google Form page.

Page shape:
    The viewform HTML embeds the whole form definition as a JSON array
    literal assigned to ``FB_PUBLIC_LOAD_DATA_`` inside a <script> tag:

        var FB_PUBLIC_LOAD_DATA_ = [null, ["desc", [QUESTION, ...], ...], ...];</script>

    Each QUESTION is a list where:
        question[1]        — display label
        question[4][0][0]  — numeric field identifier (the N in entry.N)

Failure modes:
    - Marker absent                → MARKER_NOT_FOUND, no fields
    - Unterminated blob / bad JSON
      / unexpected nesting         → DATA_MALFORMED, no fields
    - A single odd question        → skipped, parsing continues

No network access here; see services/form_discovery.py for the fetch.
"""
import json
import math
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from daily.core.constants import FORM_DATA_MARKER, FORM_DATA_END
from daily.models.form_field import FormField
from daily.utils.error_messages import MARKER_NOT_FOUND, DATA_MALFORMED

logger = logging.getLogger(__name__)


@dataclass
class DiscoveryResult:
    """Fields found on a form page, or the reason none were."""
    fields: List[FormField] = field(default_factory=list)
    error: str = ""

    @property
    def success(self) -> bool:
        return not self.error


def _extract_blob(html: str) -> Optional[str]:
    start = html.find(FORM_DATA_MARKER)
    if start == -1:
        return None
    start += len(FORM_DATA_MARKER)
    end = html.find(FORM_DATA_END, start)
    if end == -1:
        return ""
    return html[start:end]


def _question_list(data: Any) -> Optional[List[Any]]:
    """Return data[1][1] if the payload has the expected nesting."""
    if not isinstance(data, list) or len(data) < 2:
        return None
    form_data = data[1]
    if not isinstance(form_data, list) or len(form_data) < 2:
        return None
    questions = form_data[1]
    if not isinstance(questions, list):
        return None
    return questions


def _parse_question(question: Any) -> Optional[FormField]:
    if not isinstance(question, list) or len(question) < 5:
        return None
    label = question[1] if isinstance(question[1], str) else ""
    entry_wrapper = question[4]
    if not isinstance(entry_wrapper, list) or not entry_wrapper:
        return None
    entry_inner = entry_wrapper[0]
    if not isinstance(entry_inner, list) or not entry_inner:
        return None
    raw_id = entry_inner[0]
    # bool is an int subclass; JSON true/false is never a field id
    if isinstance(raw_id, bool) or not isinstance(raw_id, (int, float)) or not math.isfinite(raw_id):
        return None
    return FormField(id=str(int(raw_id)), label=label)


def parse_form_fields(html: str) -> DiscoveryResult:
    """
    Parse a viewform page into its ordered list of fields.

    Parameters
    ----------
    html : str
        Raw HTML of the form's viewform page.

    Returns
    -------
    DiscoveryResult
        Fields in document order, or an error with no fields.
    """
    blob = _extract_blob(html)
    if blob is None:
        logger.warning("Form page has no %s marker", FORM_DATA_MARKER.strip())
        return DiscoveryResult(error=MARKER_NOT_FOUND)
    if not blob:
        logger.warning("Form data blob is not terminated by %s", FORM_DATA_END)
        return DiscoveryResult(error=DATA_MALFORMED)

    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        logger.warning("Form data blob is not valid JSON: %s", e)
        return DiscoveryResult(error=DATA_MALFORMED)

    questions = _question_list(data)
    if questions is None:
        logger.warning("Form data has no question list at [1][1]")
        return DiscoveryResult(error=DATA_MALFORMED)

    fields: List[FormField] = []
    for position, question in enumerate(questions):
        parsed = _parse_question(question)
        if parsed is None:
            logger.debug("Skipping malformed question at position %d", position)
            continue
        fields.append(parsed)

    logger.info("Parsed %d field(s) from %d question(s)", len(fields), len(questions))
    return DiscoveryResult(fields=fields)
