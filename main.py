"""
Claude Creations - Auto-Submit Service
Moderates showcase submissions with Claude and commits approved projects to GitHub
"""

import logging
import traceback

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from routers.submit_router import submit_router, ERR_GENERIC
from config.settings import settings, LOGS_DIR

# ============================================================================
# LOGGING
# ============================================================================

LOGS_DIR.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(LOGS_DIR / "app.log"),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# ============================================================================
# FASTAPI APP SETUP
# ============================================================================

app = FastAPI(title="Claude Creations Auto-Submit")


# Uncaught exception middleware - logs all unhandled exceptions and returns 500
class UncaughtExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Uncaught exception: {e}\n{traceback.format_exc()}")
            return JSONResponse(
                status_code=500,
                content={"success": False, "error": ERR_GENERIC}
            )


# Open CORS: the static site posts from its own origin
class AllowAnyOriginMiddleware(BaseHTTPMiddleware):
    """Add Access-Control-Allow-Origin: * to every response"""
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response


app.add_middleware(UncaughtExceptionMiddleware)
app.add_middleware(AllowAnyOriginMiddleware)

# Required API keys for startup validation
REQUIRED_KEY_MAP = {
    "CLAUDE_API_KEY": settings.claude_api_key,
    "GITHUB_TOKEN": settings.github_token,
}


@app.on_event("startup")
async def validate_keys():
    """Validate required API keys are present (non-fatal)"""
    missing = [key for key, value in REQUIRED_KEY_MAP.items() if not value]
    if missing:
        logger.warning(f"Missing API keys: {missing} - submissions will be rejected or fail")
    else:
        logger.info("All API keys loaded successfully")


@app.get("/health")
async def health():
    return {"success": True, "status": "ok"}


# ============================================================================
# INCLUDE ROUTERS
# ============================================================================
app.include_router(submit_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
