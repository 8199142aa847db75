"""
Shared fixtures: Google Form page builders, a field mapping and a sample report.
"""
import json

import pytest

from daily.models.daily_report import DailyReport
from daily.models.field_mapping import FieldMapping

FORM_ID = "1FAIpQLSf_test-Form_ID"
FORM_URL = f"https://docs.google.com/forms/d/e/{FORM_ID}/formResponse"
VIEW_URL = f"https://docs.google.com/forms/d/e/{FORM_ID}/viewform"


def make_question(entry_id, label="Question"):
    """One question in FB_PUBLIC_LOAD_DATA_ shape: [item_id, label, desc, type, [[entry_id, ...]]]."""
    return [100000 + int(entry_id) % 1000, label, None, 0, [[entry_id, None, 0]]]


def make_form_html(questions):
    data = [None, ["Daily report form", questions, None], "/forms", "Daily"]
    return (
        "<html><head><title>Daily</title></head><body>"
        '<script type="text/javascript" nonce="abc">'
        f"var FB_PUBLIC_LOAD_DATA_ = {json.dumps(data)};</script>"
        "</body></html>"
    )


@pytest.fixture
def six_question_html():
    labels = ["Date", "Issue Link", "Issue Title", "Progress", "Project", "Hours"]
    questions = [make_question(1000000001 + i, label) for i, label in enumerate(labels)]
    return make_form_html(questions)


@pytest.fixture
def mapping():
    return FieldMapping(
        date="101",
        issue_link="102",
        issue_title="103",
        progress_note="104",
        project_name="105",
        hours_spent="106",
    )


@pytest.fixture
def report():
    return DailyReport(
        date="19/10/2026",
        issue_link="https://github.com/acme/widgets/issues/42",
        issue_title="Fix flaky login test",
        progress_note="Reproduced and fixed the race",
        project_name="N/A",
        hours=7.5,
    )
