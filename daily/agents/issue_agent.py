"""
Issue Agent
===========
Resolves a GitHub issue reference to its title through the gh CLI.

Accepted references:
    - full URL            https://github.com/owner/repo/issues/123
    - short form          owner/repo#123
    - anything else gh issue view understands (passed through)

Every failure comes back as a displayable error string in
IssueLookupResult; nothing here raises for a missing, unauthenticated or
confused gh. The child process runs under asyncio so quitting the wizard
mid-lookup kills it instead of waiting for it.
"""
import asyncio
import logging
import re
from dataclasses import dataclass
from typing import List

from daily.core.config import GH_BINARY
from daily.utils.error_messages import GH_NOT_FOUND, ISSUE_TITLE_EMPTY

logger = logging.getLogger(__name__)

SHORT_REF_PATTERN = re.compile(r"^([\w.-]+/[\w.-]+)#(\d+)$")


@dataclass
class IssueLookupResult:
    title: str = ""
    error: str = ""

    @property
    def success(self) -> bool:
        return not self.error


class IssueAgent:
    """
    Agent wrapping ``gh issue view`` for title lookups.
    """

    def __init__(self, gh_binary: str = GH_BINARY) -> None:
        self.gh_binary = gh_binary

    def build_command(self, issue_ref: str) -> List[str]:
        """Build the gh argv for a reference, expanding owner/repo#N."""
        ref = issue_ref.strip()
        match = SHORT_REF_PATTERN.match(ref)
        if match:
            repo, number = match.groups()
            target = [number, "--repo", repo]
        else:
            target = [ref]
        return [self.gh_binary, "issue", "view", *target, "--json", "title", "-q", ".title"]

    async def fetch_title(self, issue_ref: str) -> IssueLookupResult:
        """
        Look up an issue title.

        Parameters
        ----------
        issue_ref : str
            URL or short reference typed by the user.

        Returns
        -------
        IssueLookupResult
            The trimmed title, or an error string.
        """
        argv = self.build_command(issue_ref)
        logger.info("Fetching issue title for %s", issue_ref.strip())

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except FileNotFoundError:
            logger.error("gh executable not found: %s", self.gh_binary)
            return IssueLookupResult(error=GH_NOT_FOUND)
        except OSError as e:
            logger.error("Could not start gh: %s", e)
            return IssueLookupResult(error=f"gh: {e}")

        try:
            output, _ = await proc.communicate()
        except asyncio.CancelledError:
            if proc.returncode is None:
                proc.kill()
            raise

        text = (output or b"").decode("utf-8", errors="replace").strip()

        if proc.returncode != 0:
            logger.warning("gh exited with %s: %s", proc.returncode, text)
            if text:
                return IssueLookupResult(error=f"gh: {text}")
            return IssueLookupResult(error=f"gh: exit status {proc.returncode}")

        if not text:
            return IssueLookupResult(error=ISSUE_TITLE_EMPTY)

        logger.info("Issue title resolved (%d chars)", len(text))
        return IssueLookupResult(title=text)
