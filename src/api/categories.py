"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_point_service
from src.schemas.category import CategoryResponse
from src.services.point_service import PointService

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=list[CategoryResponse])
def get_categories(
    service: Annotated[PointService, Depends(get_point_service)],
):
    """Get all waste categories."""
    return service.list_categories()
