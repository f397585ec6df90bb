# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: HTML upload and deployment."""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.core.dependencies import get_deploy_service
from app.models.domain import DeploymentRequest
from app.schemas import DeployResponse, ErrorResponse
from app.services.deploy_service import DeployService

router = APIRouter(tags=["Deploy"])


@router.post(
    "/deploy",
    response_model=DeployResponse,
    responses={
        400: {"model": ErrorResponse}, 409: {"model": ErrorResponse},
        429: {"model": ErrorResponse}, 502: {"model": ErrorResponse},
    },
)
async def deploy(file: Optional[UploadFile] = File(default=None),
                 name: Optional[str] = Form(default=None),
                 service: DeployService = Depends(get_deploy_service)):
    request = DeploymentRequest(
        original_filename=file.filename if file else None,
        display_name=name,
        file_bytes=await file.read() if file else None,
    )
    result = await service.deploy(request)
    return DeployResponse(url=result.url)
