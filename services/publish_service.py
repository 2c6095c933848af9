"""
Publish Service - commits approved cards into the showcase page on GitHub
"""
import logging
import random
from typing import Optional

import httpx

from config.settings import settings
from models.submission import DocumentSnapshot, Submission
from services.card_renderer import render_project_card
from utils.shared_utils import decode_base64_text, encode_base64_text

logger = logging.getLogger(__name__)

USER_AGENT = "ClaudeCreations-AutoSubmit"

# Indentation that keeps the anchor at its original column after a splice
CARD_SEPARATOR = "\n\n            "


class PublishError(Exception):
    """Reading or writing the showcase page failed."""


class AnchorNotFoundError(PublishError):
    """The page no longer contains the insertion anchor."""


def insert_before_anchor(document: str, fragment: str, anchor: str) -> str:
    """
    Splice `fragment` in front of the last occurrence of `anchor`.

    Raises:
        AnchorNotFoundError: If the anchor is not present in the document
    """
    index = document.rfind(anchor)
    if index == -1:
        raise AnchorNotFoundError("Could not find insertion point in HTML")
    return document[:index] + fragment + CARD_SEPARATOR + document[index:]


def build_commit_message(submission: Submission) -> str:
    return (
        f"Add project: {submission.project_name}\n\n"
        f"Submitted by {submission.creator_name}\n"
        f"Auto-approved by Claude Haiku"
    )


class GitHubContentsClient:
    """Minimal client for one file of the GitHub contents API."""

    def __init__(
        self,
        token: Optional[str] = None,
        repo: Optional[str] = None,
        path: Optional[str] = None,
        branch: Optional[str] = None,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token if token is not None else settings.github_token
        self.repo = repo or settings.github_repo
        self.path = path or settings.github_path
        self.branch = branch or settings.github_branch
        self.api_url = (api_url or settings.github_api_url).rstrip("/")
        self.transport = transport

    @property
    def contents_url(self) -> str:
        return f"{self.api_url}/repos/{self.repo}/contents/{self.path}"

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }

    async def get_snapshot(self) -> DocumentSnapshot:
        """
        Fetch the current file content and its SHA.

        Raises:
            PublishError: If GitHub does not answer with a success status
        """
        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.get(self.contents_url, headers=self._headers())

        if not response.is_success:
            raise PublishError(f"Failed to get file ({response.status_code}): {response.text}")

        file_data = response.json()
        return DocumentSnapshot(content=decode_base64_text(file_data["content"]), sha=file_data["sha"])

    async def put_content(self, content: str, sha: str, message: str) -> dict:
        """
        Write new file content, conditioned on `sha` still being current.

        Raises:
            PublishError: If GitHub rejects the write, including a stale SHA
        """
        payload = {
            "message": message,
            "content": encode_base64_text(content),
            "sha": sha,
            "branch": self.branch,
        }
        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.put(self.contents_url, headers=self._headers(), json=payload)

        if not response.is_success:
            raise PublishError(f"Failed to update GitHub ({response.status_code}): {response.text}")

        return response.json()


class PublishService:
    """Service class for the read-modify-write cycle on the showcase page"""

    def __init__(
        self,
        contents_client: Optional[GitHubContentsClient] = None,
        anchor: Optional[str] = None,
        rng=random,
    ):
        self.contents_client = contents_client or GitHubContentsClient()
        self.anchor = anchor or settings.insertion_anchor
        self.rng = rng

    async def publish(self, submission: Submission) -> str:
        """
        Add the submission's card to the page and commit it.

        One read and at most one write; nothing is retried. The write carries
        the SHA from the read, so a concurrent change makes it fail.

        Args:
            submission: An approved submission

        Returns:
            str: The new document content that was committed

        Raises:
            PublishError: On read/write failure or when the anchor is missing
        """
        snapshot = await self.contents_client.get_snapshot()
        card = render_project_card(submission, self.rng)
        new_content = insert_before_anchor(snapshot.content, card, self.anchor)

        logger.info(f"Committing card for '{submission.project_name}' at sha {snapshot.sha}")
        await self.contents_client.put_content(new_content, snapshot.sha, build_commit_message(submission))
        logger.info(f"Published '{submission.project_name}' to {self.contents_client.repo}")
        return new_content
