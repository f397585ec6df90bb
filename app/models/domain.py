# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models. Pure data structures, NO FastAPI dependency.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class DeploymentRequest(BaseModel):
    """One uploaded page, as received; nothing here is validated yet."""
    original_filename: Optional[str] = None
    display_name: Optional[str] = Field(default=None, description="Raw `name` form field")
    file_bytes: Optional[bytes] = None


class DeploymentResult(BaseModel):
    name: str
    url: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
