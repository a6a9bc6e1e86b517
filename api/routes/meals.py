"""
Meal routes - catalog reads, meal creation and like toggles.

The same endpoints are mounted for the current menu (/meals) and the
preview pool (/upcoming-meals); the pools share rules but not storage.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from api.dependencies import get_engagement_service, get_meal_service
from domain.enums import MealPool
from domain.schemas import (
    InsertedResponse,
    LikeToggleRequest,
    LikeToggleResponse,
    MealCreate,
    MealResponse,
)
from services import EngagementService, MealService


def build_pool_router(pool: MealPool) -> APIRouter:
    router = APIRouter(prefix=f"/{pool.value}", tags=["Meals"])

    @router.get("", response_model=List[MealResponse])
    def list_meals(meals: MealService = Depends(get_meal_service)):
        """List every meal in the pool, newest first"""
        return meals.list_meals(pool)

    @router.get("/{meal_id}", response_model=MealResponse)
    def get_meal(meal_id: str, meals: MealService = Depends(get_meal_service)):
        return meals.get_meal(meal_id, pool)

    @router.post(
        "", response_model=InsertedResponse, status_code=status.HTTP_201_CREATED
    )
    def add_meal(payload: MealCreate, meals: MealService = Depends(get_meal_service)):
        """Add a meal; ingredients are capitalization-normalized"""
        return InsertedResponse(inserted_id=meals.add_meal(payload, pool=pool))

    @router.patch("/like", response_model=LikeToggleResponse)
    def toggle_like(
        payload: LikeToggleRequest,
        engagement: EngagementService = Depends(get_engagement_service),
    ):
        """Like the meal, or unlike it if the user already liked it"""
        return engagement.toggle_like(payload.meal_id, payload.meal_email, pool)

    return router


router = build_pool_router(MealPool.MEALS)
upcoming_router = build_pool_router(MealPool.UPCOMING)
