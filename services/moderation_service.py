"""
Moderation Service - asks Claude whether a submission may be published
"""
import json
import logging
import re
from typing import Any, Dict, Optional

import httpx

from config.settings import settings
from models.submission import ModerationVerdict, Submission

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"

REASON_UNAVAILABLE = "moderation service unavailable"
REASON_UNPARSABLE = "could not parse moderation response"

_CODE_FENCE = re.compile(r"```json\n?|\n?```")

MODERATION_PROMPT = """You are a content moderator for Claude Creations, a website showcasing projects built with Claude AI.

Review this submission and determine if it should be approved or rejected.

REJECT if ANY of these apply:
- Contains profanity, slurs, hate speech, or offensive language
- Appears to be spam, advertising, or trolling
- Contains suspicious, malicious, or phishing links
- Is clearly not a real project (gibberish, test submission, jokes)
- Contains harmful, illegal, violent, or sexually inappropriate content
- Promotes scams or fraudulent activity
- Is a duplicate or very low-effort submission

APPROVE if:
- It appears to be a legitimate project built with Claude, Claude Code, or AI assistance
- The description makes sense and describes an actual project
- Even simple or small projects are fine if they're genuine

Submission to review:
- Project Name: {project_name}
- Creator: {creator_name}
- Description: {description}
- URL: {project_url}

Respond with ONLY a JSON object in this exact format, no other text:
{{"approved": true, "reason": "brief reason"}}
or
{{"approved": false, "reason": "brief reason why rejected"}}"""


def build_moderation_prompt(
    project_name: str,
    creator_name: str,
    description: str,
    project_url: Optional[str] = None,
) -> str:
    return MODERATION_PROMPT.format(
        project_name=project_name,
        creator_name=creator_name,
        description=description,
        project_url=project_url or "Not provided",
    )


def parse_verdict(text: str) -> Dict[str, Any]:
    """
    Parse the model's freeform reply into a verdict.

    The reply may be wrapped in a ```json fence. Anything that is not a JSON
    object is reported as an error instead of raising.

    Returns:
        {"is_error": False, "data": ModerationVerdict} or
        {"is_error": True, "error": str}
    """
    cleaned = _CODE_FENCE.sub("", text or "").strip()
    try:
        parsed = json.loads(cleaned)
    except ValueError as e:
        return {"error": f"Invalid JSON: {e}", "is_error": True}

    if not isinstance(parsed, dict):
        return {"error": "Verdict is not a JSON object", "is_error": True}

    reason = parsed.get("reason")
    verdict = ModerationVerdict(
        approved=parsed.get("approved") is True,
        reason="" if reason is None else str(reason),
    )
    return {"data": verdict, "is_error": False}


class ModerationService:
    """Service class for the one-shot moderation call. Fails closed on every error path."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.claude_api_key
        self.api_url = (api_url or settings.anthropic_api_url).rstrip("/")
        self.model = model or settings.moderation_model
        self.max_tokens = max_tokens or settings.moderation_max_tokens
        self.transport = transport

    async def moderate(self, submission: Submission) -> ModerationVerdict:
        """
        Moderate a submission with a single Messages API call.

        Args:
            submission: The submission to review

        Returns:
            ModerationVerdict: approved flag and reason. Upstream failures yield
            a rejection, never an approval.
        """
        if not self.api_key:
            logger.error("CLAUDE_API_KEY not configured - rejecting submission")
            return ModerationVerdict(approved=False, reason=REASON_UNAVAILABLE)

        prompt = build_moderation_prompt(
            submission.project_name,
            submission.creator_name,
            submission.description,
            submission.project_url,
        )
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }
        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(f"{self.api_url}/v1/messages", headers=headers, json=payload)
        except httpx.RequestError as e:
            logger.error(f"Claude API request failed: {e}")
            return ModerationVerdict(approved=False, reason=REASON_UNAVAILABLE)

        if not response.is_success:
            logger.error(f"Claude API error {response.status_code}: {response.text}")
            return ModerationVerdict(approved=False, reason=REASON_UNAVAILABLE)

        try:
            content = response.json()["content"][0]["text"].strip()
        except (ValueError, KeyError, IndexError, TypeError, AttributeError):
            logger.error(f"Unexpected Claude API response shape: {response.text}")
            return ModerationVerdict(approved=False, reason=REASON_UNPARSABLE)

        result = parse_verdict(content)
        if result.get("is_error"):
            logger.error(f"Failed to parse moderation response: {content} ({result['error']})")
            return ModerationVerdict(approved=False, reason=REASON_UNPARSABLE)
        return result["data"]
