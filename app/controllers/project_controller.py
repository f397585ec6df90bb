# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: admin project list/delete, gated by the access key."""
from fastapi import APIRouter, Depends

from app.core.dependencies import get_project_service, require_access_key
from app.schemas import ErrorResponse, MessageResponse, ProjectList
from app.services.project_service import ProjectService

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    dependencies=[Depends(require_access_key)],
    responses={401: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)


@router.get("", response_model=ProjectList)
async def list_projects(service: ProjectService = Depends(get_project_service)):
    return ProjectList(projects=await service.list_projects())


@router.delete("/{name}", response_model=MessageResponse)
async def delete_project(name: str, service: ProjectService = Depends(get_project_service)):
    return MessageResponse(message=await service.delete_project(name))
