"""
Daily Report Model
==================
Pydantic model for the values collected by the wizard, ready to send.

Fields:
    date            — as typed, DD/MM/YYYY (converted on the way out)
    issue_link      — GitHub issue URL or owner/repo#N
    issue_title     — title resolved through gh
    progress_note   — free text
    project_name    — free text, "N/A" by default
    hours           — parsed hours, already range-checked by the wizard
"""
from pydantic import BaseModel

from daily.utils.dates import to_iso_date


class DailyReport(BaseModel):
    date: str
    issue_link: str
    issue_title: str
    progress_note: str
    project_name: str
    hours: float

    def slot_values(self) -> dict[str, str]:
        """Outbound text per mapping slot, in the formats the form expects."""
        return {
            "date": to_iso_date(self.date),
            "issue_link": self.issue_link,
            "issue_title": self.issue_title,
            "progress_note": self.progress_note,
            "project_name": self.project_name,
            "hours_spent": f"{self.hours:.1f}",
        }
