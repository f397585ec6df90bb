# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""System endpoints: landing page, health, metrics."""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from app.core.config import settings

INDEX_PAGE = Path(__file__).resolve().parents[1] / "static" / "index.html"

router = APIRouter(tags=["System"])


@router.get("/", include_in_schema=False)
async def index():
    return FileResponse(INDEX_PAGE, media_type="text/html")


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


@router.get("/metrics")
async def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
