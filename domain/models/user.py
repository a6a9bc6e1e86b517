from datetime import datetime, timezone

from pydantic import Field, field_validator

from domain.enums import PackageTier, UserRole
from domain.models.base import DocumentModel


class User(DocumentModel):
    """Platform user keyed by email"""

    email: str
    name: str
    role: UserRole = UserRole.USER
    joined: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    package: PackageTier = PackageTier.FREE
    meals_added: int = 0

    @field_validator("email")
    @classmethod
    def require_email(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("email must not be empty")
        return v

    @field_validator("package", mode="before")
    @classmethod
    def normalize_package(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
