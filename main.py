# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
HTML Deployer Service
=====================
Accepts an uploaded static HTML page and publishes it as a new Vercel
project, returning the live ``https://{name}.vercel.app`` URL.

    upload ─► validate ─► resolve name ─► create project ─► deploy ─► notify

Admin endpoints list and delete existing projects behind an access key.
Deployment events are optionally broadcast to Telegram chats.

Port: 3000 (PORT)
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.controllers import deploy_controller, project_controller, system_controller
from app.core.config import settings
from app.core.dependencies import close_http_client, init_http_client
from app.core.errors import DeployerError
from app.core.logging import get_logger
from app.middleware import (
    DeployRateLimitMiddleware, MetricsMiddleware, RequestIDMiddleware, SecurityHeadersMiddleware,
)
from app.schemas import ErrorResponse

logger = get_logger("html-deployer")


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    init_http_client()
    logger.info(
        "HTML deployer starting: provider token %s, telegram %s, admin key %s",
        "set" if settings.VERCEL_TOKEN else "MISSING",
        f"{len(settings.TELEGRAM_CHAT_IDS)} chat(s)" if settings.notifications_enabled else "off",
        "on" if settings.ACCESS_KEY else "off",
    )
    yield
    await close_http_client()
    logger.info("HTML deployer shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="HTML Deployer",
    description="Publishes uploaded static HTML pages as Vercel projects.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
)

# Last added runs first: request id is assigned before anything else sees the request.
app.add_middleware(MetricsMiddleware)
app.add_middleware(DeployRateLimitMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)


# ── Exception handlers ────────────────────────────────────────────────────
@app.exception_handler(DeployerError)
async def deployer_error_handler(request: Request, exc: DeployerError):
    req_id = getattr(request.state, "request_id", None)
    if exc.status_code >= 500:
        logger.error("Request failed: %s", exc.message, extra={"request_id": req_id})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(deploy_controller.router)
app.include_router(project_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level="info")
