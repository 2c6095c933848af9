from typing import Optional

from fastapi.responses import JSONResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def success_response(message="OK", status=200):
    return JSONResponse(
        status_code=status,
        content={
            "success": True,
            "message": message,
        }
    )


def error_response(error, status=400, reason: Optional[str] = None):
    content = {
        "success": False,
        "error": error,
    }
    if reason is not None:
        content["reason"] = reason
    return JSONResponse(status_code=status, content=content)
