# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

DEPLOY_SUCCESS_MESSAGE = "Deploy sukses"


class DeployResponse(BaseModel):
    message: str = DEPLOY_SUCCESS_MESSAGE
    url: str


class ProjectList(BaseModel):
    # Vercel project objects, passed through untouched
    projects: List[Dict[str, Any]]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    request_id: Optional[str] = None
