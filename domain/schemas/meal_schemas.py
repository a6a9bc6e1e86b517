from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.schemas.base import CamelModel, IdentifiedModel


class MealCreate(CamelModel):
    """Schema for adding a meal to the menu or the upcoming pool"""

    title: str = Field(..., min_length=1)
    category: str = ""
    ingredients: List[str] = Field(default_factory=list)
    description: str = ""
    price: float = Field(default=0, ge=0)
    image: Optional[str] = None
    distributor_name: Optional[str] = None
    distributor_email: Optional[str] = None
    rating: float = Field(default=0, ge=0, le=5)
    admin_email: Optional[str] = Field(
        None, description="Admin adding the meal; their mealsAdded counter is bumped"
    )


class MealResponse(IdentifiedModel):
    title: str
    category: str
    ingredients: List[str]
    description: str
    price: float
    post_time: datetime
    image: Optional[str] = None
    distributor_name: Optional[str] = None
    distributor_email: Optional[str] = None
    rating: float
    likes: int
    liked_by: List[str]
    is_requested_by: List[str]
    reviews_count: int
    added_by: Optional[str] = None
