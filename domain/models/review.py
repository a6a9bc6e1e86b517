from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from domain.models.base import DocumentModel


class Review(DocumentModel):
    """Review left by a user on a meal"""

    meal_id: str
    name: Optional[str] = None
    email: str
    comment: str = ""
    rating: float = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
