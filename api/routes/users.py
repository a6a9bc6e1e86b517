"""User routes"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api.dependencies import get_user_service
from domain.schemas import (
    MakeAdminRequest,
    MakeAdminResponse,
    RoleResponse,
    SaveUserRequest,
    SaveUserResponse,
    UserResponse,
)
from services import UserService

router = APIRouter(tags=["Users"])


@router.post("/save-user", response_model=SaveUserResponse)
def save_user(payload: SaveUserRequest, users: UserService = Depends(get_user_service)):
    """Register the user on first sign-in; 200 with the stored user if already known"""
    user, created = users.save_user(payload.email, payload.name)
    body = SaveUserResponse(
        message="User created" if created else "User already exists",
        user=UserResponse.model_validate(user),
    )
    return JSONResponse(
        status_code=201 if created else 200,
        content=body.model_dump(by_alias=True, mode="json"),
    )


@router.get("/user", response_model=UserResponse)
def get_user(email: str = Query(...), users: UserService = Depends(get_user_service)):
    return users.get_user(email)


@router.get("/users/role", response_model=RoleResponse)
def get_role(email: str = Query(...), users: UserService = Depends(get_user_service)):
    return RoleResponse(role=users.get_role(email))


@router.patch("/users/make-admin", response_model=MakeAdminResponse)
def make_admin(payload: MakeAdminRequest, users: UserService = Depends(get_user_service)):
    """Promote a user to admin. There is no demotion endpoint."""
    return users.promote_to_admin(payload.email)
