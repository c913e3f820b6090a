"""Recycling event and statistics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_current_user, get_recycling_service
from src.schemas.auth import CurrentUser
from src.schemas.recycling import (
    RecordedEventsResponse,
    RecyclingEventCreate,
    RecyclingEventResponse,
    RecyclingStatsResponse,
)
from src.services.recycling_service import RecyclingService

router = APIRouter(tags=["recycling"])


@router.post(
    "/recycling-events",
    response_model=RecordedEventsResponse,
    status_code=status.HTTP_201_CREATED,
)
def record_recycling_event(
    event_data: RecyclingEventCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[RecyclingService, Depends(get_recycling_service)],
):
    """Record one event per category at a point."""
    events = service.record_events(
        user_id=current_user.id,
        point_id=event_data.point_id,
        category_ids=event_data.category_ids,
        quantity=event_data.quantity,
    )
    return RecordedEventsResponse(message="Recycling event saved", count=len(events))


@router.get("/recycling-events", response_model=list[RecyclingEventResponse])
def list_recycling_events(
    service: Annotated[RecyclingService, Depends(get_recycling_service)],
    category_id: int | None = None,
):
    """List the most recent recycling events."""
    return service.list_recent_events(category_id)


@router.get("/recycling-stats", response_model=RecyclingStatsResponse)
def recycling_stats(
    service: Annotated[RecyclingService, Depends(get_recycling_service)],
    category_id: int | None = None,
):
    """Aggregate the ledger by point and by category."""
    return RecyclingStatsResponse(
        by_point=service.aggregate_by_point(category_id),
        by_category=service.aggregate_by_category(category_id),
    )
