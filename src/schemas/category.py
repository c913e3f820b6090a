"""Category schemas."""

from pydantic import BaseModel, ConfigDict


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
