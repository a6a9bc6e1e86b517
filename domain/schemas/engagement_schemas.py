from datetime import datetime
from typing import Optional

from pydantic import Field

from domain.enums import RequestStatus
from domain.schemas.base import CamelModel, IdentifiedModel


class LikeToggleRequest(CamelModel):
    """Body of a like toggle; field names follow the web client"""

    meal_email: Optional[str] = Field(None, description="Email of the liking user")
    meal_id: Optional[str] = Field(None, description="Meal id")


class LikeToggleResponse(CamelModel):
    liked: bool = Field(..., description="True when the toggle added a like")
    likes: int = Field(..., description="Like count after the toggle")


class MealRequestCreate(CamelModel):
    """Schema for requesting a meal"""

    meal_id: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    likes: int = Field(default=0, ge=0, description="Like count snapshot")
    reviews: int = Field(default=0, ge=0, description="Review count snapshot")


class MealRequestResponse(IdentifiedModel):
    meal_id: str
    title: str
    email: str
    name: str
    status: RequestStatus
    likes: int
    reviews: int
    requested_at: datetime


class CancelRequestResponse(CamelModel):
    request_id: str
    status: RequestStatus
    meal_updated: bool = Field(
        ..., description="False when the meal's requester set was not touched"
    )
