from datetime import datetime, timezone
from typing import List, Optional

from pydantic import Field, field_validator

from domain.models.base import DocumentModel


def normalize_ingredient(name: str) -> str:
    """'cHICKEN breast ' -> 'Chicken breast'"""
    return name.strip().capitalize()


class Meal(DocumentModel):
    """
    Catalog meal, shared by the current menu and the upcoming pool.

    `likes` mirrors the size of `liked_by`; `is_requested_by` lists emails with
    an active request. Both sets are maintained by the engagement service.
    """

    title: str
    category: str = ""
    ingredients: List[str] = Field(default_factory=list)
    description: str = ""
    price: float = Field(default=0, ge=0)
    post_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    image: Optional[str] = None
    distributor_name: Optional[str] = None
    distributor_email: Optional[str] = None
    rating: float = 0
    likes: int = 0
    liked_by: List[str] = Field(default_factory=list)
    is_requested_by: List[str] = Field(default_factory=list)
    reviews_count: int = 0
    added_by: Optional[str] = None

    @field_validator("ingredients", mode="before")
    @classmethod
    def normalize_ingredients(cls, v):
        if isinstance(v, str):
            v = v.split(",")
        return [normalize_ingredient(i) for i in v or [] if i and i.strip()]
