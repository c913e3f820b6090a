"""Recycle point API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_point_service
from src.models.recycle_point import RecyclePoint
from src.schemas.auth import CurrentUser
from src.schemas.point import (
    NearestPointResponse,
    PointCreate,
    PointCreatedResponse,
    PointResponse,
)
from src.services.errors import NotFound
from src.services.point_service import PointService

router = APIRouter(prefix="/points", tags=["points"])


def to_point_response(point: RecyclePoint) -> PointResponse:
    """Flatten a point and its category links for the map client."""
    refs = point.category_refs()
    return PointResponse(
        id=point.id,
        name=point.name,
        description=point.description,
        status=point.status,
        lat=point.latitude,
        lng=point.longitude,
        categories=[name for _, name in refs],
        category_ids=[cid for cid, _ in refs],
    )


@router.get("", response_model=list[PointResponse])
def list_points(
    service: Annotated[PointService, Depends(get_point_service)],
    category_id: int | None = None,
):
    """List approved points, optionally only those accepting a category."""
    return [to_point_response(p) for p in service.list_approved_points(category_id)]


@router.get("/nearest", response_model=NearestPointResponse)
def nearest_point(
    service: Annotated[PointService, Depends(get_point_service)],
    lat: Annotated[float, Query(ge=-90, le=90)],
    lng: Annotated[float, Query(ge=-180, le=180)],
    category_id: int | None = None,
):
    """Get the approved point closest to a position."""
    result = service.nearest_approved_point(lat, lng, category_id)
    if result is None:
        raise NotFound("No approved point found")

    point, distance = result
    return NearestPointResponse(
        **to_point_response(point).model_dump(),
        distance_m=round(distance, 1),
    )


@router.post("", response_model=PointCreatedResponse, status_code=status.HTTP_201_CREATED)
def submit_point(
    point_data: PointCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[PointService, Depends(get_point_service)],
):
    """Submit a point. It stays hidden until an admin approves it."""
    point = service.submit_point(
        user_id=current_user.id,
        name=point_data.name,
        description=point_data.description,
        lat=point_data.lat,
        lng=point_data.lng,
        category_ids=point_data.category_ids,
    )
    return PointCreatedResponse(message="Point added and pending approval", id=point.id)
