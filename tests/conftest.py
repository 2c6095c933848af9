"""
Pytest configuration and fixtures for testing
"""
import base64
import json
import os
import random
import tempfile
from pathlib import Path

import httpx
import pytest

# Keep test runs from writing ./logs in the working tree
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "claude-creations-test-logs"))

from services.moderation_service import ModerationService  # noqa: E402
from services.publish_service import GitHubContentsClient, PublishService  # noqa: E402

ANCHOR = '</div>\n\n        <div class="load-more-container">'

SAMPLE_PAGE = """<!DOCTYPE html>
<html lang="en">
<body>
        <div class="projects-grid">
            <!-- Project Card - Café Visualizer -->
            <article class="project-card" data-category="visualizer">Naïve café ✨ 日本語</article>

        </div>

        <div class="load-more-container">
            <button class="load-more">Load more</button>
        </div>
</body>
</html>
"""


def wrap_base64(text: str) -> str:
    """Encode text the way GitHub returns it: base64 wrapped at 60 columns."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60)) + "\n"


class FakeAnthropic:
    """Stands in for the Messages API; records every request it receives."""

    def __init__(self, text='{"approved": true, "reason": "Genuine project"}', status=200):
        self.text = text
        self.status = status
        self.body = None
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status, json=self.body)
        if self.status >= 400:
            return httpx.Response(self.status, json={"type": "error", "error": {"message": "overloaded"}})
        return httpx.Response(self.status, json={"content": [{"type": "text", "text": self.text}]})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeGitHub:
    """
    Stands in for the contents API of a single file.

    PUT requests are rejected with 409 when their sha does not match the
    current one, like GitHub does. Setting `race=True` changes the file
    between the GET and the PUT.
    """

    def __init__(self, content=SAMPLE_PAGE, sha="sha-1"):
        self.content = content
        self.sha = sha
        self.get_status = 200
        self.race = False
        self.requests = []
        self.puts = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            if self.get_status != 200:
                return httpx.Response(self.get_status, json={"message": "Not Found"})
            response = httpx.Response(200, json={"content": wrap_base64(self.content), "sha": self.sha})
            if self.race:
                self.sha = self.sha + "-concurrent"
            return response

        if request.method == "PUT":
            body = json.loads(request.content)
            self.puts.append(body)
            if body["sha"] != self.sha:
                return httpx.Response(409, json={"message": f"{request.url.path} does not match {body['sha']}"})
            self.content = base64.b64decode(body["content"]).decode("utf-8")
            self.sha = self.sha + "-next"
            return httpx.Response(200, json={"content": {"sha": self.sha}, "commit": {"message": body["message"]}})

        return httpx.Response(405)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def submission_payload():
    """A complete, valid form payload as the browser sends it"""
    return {
        "projectName": "Waveform Garden",
        "creatorName": "@sam",
        "email": "sam@example.com",
        "projectUrl": "https://github.com/sam/waveform-garden",
        "imageUrl": "",
        "category": "visualizer",
        "description": "An audio visualizer that grows plants from your music, built with Claude Code.",
        "firstProject": True,
    }


@pytest.fixture
def fake_anthropic():
    return FakeAnthropic()


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def moderation_service(fake_anthropic):
    return ModerationService(
        api_key="test-claude-key",
        api_url="https://anthropic.test",
        transport=fake_anthropic.transport,
    )


@pytest.fixture
def publish_service(fake_github):
    contents_client = GitHubContentsClient(
        token="test-github-token",
        repo="owner/showcase",
        path="index.html",
        branch="main",
        api_url="https://github.test",
        transport=fake_github.transport,
    )
    return PublishService(contents_client=contents_client, anchor=ANCHOR, rng=random.Random(7))
