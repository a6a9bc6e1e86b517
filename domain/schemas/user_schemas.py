from datetime import datetime
from typing import Optional

from domain.enums import PackageTier, UserRole
from domain.schemas.base import CamelModel


class SaveUserRequest(CamelModel):
    email: Optional[str] = None
    name: Optional[str] = None


class UserResponse(CamelModel):
    email: str
    name: str
    role: UserRole
    joined: datetime
    package: PackageTier
    meals_added: int = 0


class SaveUserResponse(CamelModel):
    message: str
    user: UserResponse


class RoleResponse(CamelModel):
    role: UserRole


class MakeAdminRequest(CamelModel):
    email: Optional[str] = None


class MakeAdminResponse(CamelModel):
    email: str
    role: UserRole
    modified: bool
