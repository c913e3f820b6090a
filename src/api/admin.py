"""Moderation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_point_service, require_admin
from src.schemas.auth import CurrentUser
from src.schemas.point import AdminPointResponse, MessageResponse, PointStatusUpdate
from src.services.point_service import PointService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/points", response_model=list[AdminPointResponse])
def list_all_points(
    admin: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[PointService, Depends(get_point_service)],
):
    """List every point regardless of status, newest first."""
    return [
        AdminPointResponse(
            id=point.id,
            name=point.name,
            status=point.status,
            created_at=point.created_at,
            username=username,
        )
        for point, username in service.list_all_points()
    ]


@router.patch("/points/{point_id}", response_model=MessageResponse)
def update_point_status(
    point_id: int,
    update: PointStatusUpdate,
    admin: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[PointService, Depends(get_point_service)],
):
    """Approve or reject a pending point."""
    service.set_status(point_id, update.status)
    return MessageResponse(message=f"Point {update.status.value}")
