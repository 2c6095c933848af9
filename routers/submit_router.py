"""
Submit Router - the public endpoint the showcase form posts to
"""
import logging

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from backend.utils.responses import CORS_HEADERS, success_response, error_response
from models.submission import Submission
from services.moderation_service import ModerationService
from services.publish_service import PublishService

logger = logging.getLogger(__name__)

# Create router
submit_router = APIRouter(tags=["submit"])

MSG_PUBLISHED = "Project approved and added! It will appear on the site in about 30 seconds."
ERR_INVALID_BODY = "Invalid request body"
ERR_MISSING_FIELDS = "Missing required fields"
ERR_FLAGGED = "Submission flagged for review. A human will review it shortly."
ERR_GENERIC = "Something went wrong. Please try again."
ERR_METHOD = "Method not allowed"


def get_moderation_service() -> ModerationService:
    return ModerationService()


def get_publish_service() -> PublishService:
    return PublishService()


@submit_router.options("/")
async def preflight():
    """CORS preflight"""
    return Response(status_code=204, headers=CORS_HEADERS)


@submit_router.post("/")
async def submit_project(
    request: Request,
    moderation_service: ModerationService = Depends(get_moderation_service),
    publish_service: PublishService = Depends(get_publish_service),
):
    """Validate, moderate and publish one submission"""
    try:
        payload = await request.json()
    except ValueError:
        return error_response(ERR_INVALID_BODY, status=400)
    if not isinstance(payload, dict):
        return error_response(ERR_INVALID_BODY, status=400)

    try:
        submission = Submission.model_validate(payload)
    except ValidationError as e:
        logger.info(f"Rejected malformed submission: {e.error_count()} validation error(s)")
        return error_response(ERR_INVALID_BODY, status=400)

    missing = submission.missing_fields()
    if missing:
        logger.info(f"Rejected submission with missing fields: {', '.join(missing)}")
        return error_response(ERR_MISSING_FIELDS, status=400)

    try:
        logger.info(f"Moderating submission: {submission.project_name}")
        verdict = await moderation_service.moderate(submission)
        logger.info(f"Moderation result: approved={verdict.approved} reason={verdict.reason!r}")

        if not verdict.approved:
            return error_response(ERR_FLAGGED, status=400, reason=verdict.reason)

        logger.info("Adding to GitHub...")
        await publish_service.publish(submission)
        return success_response(message=MSG_PUBLISHED)

    except Exception as e:
        logger.error(f"Submission pipeline failed: {e}", exc_info=True)
        return error_response(ERR_GENERIC, status=500)


@submit_router.api_route("/", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"])
async def method_not_allowed():
    return error_response(ERR_METHOD, status=405)
