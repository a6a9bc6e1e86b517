"""Meal request routes"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_engagement_service
from domain.schemas import (
    CancelRequestResponse,
    InsertedResponse,
    MealRequestCreate,
    MealRequestResponse,
)
from services import EngagementService

router = APIRouter(tags=["Meal Requests"])


@router.post(
    "/request-meal", response_model=InsertedResponse, status_code=status.HTTP_201_CREATED
)
def request_meal(
    payload: MealRequestCreate,
    engagement: EngagementService = Depends(get_engagement_service),
):
    """Place a pending request for a meal. Not idempotent."""
    request_id = engagement.submit_meal_request(
        payload.meal_id,
        payload.title,
        payload.email,
        payload.name,
        likes=payload.likes,
        reviews=payload.reviews,
    )
    return InsertedResponse(inserted_id=request_id)


@router.get("/requested-meals", response_model=List[MealRequestResponse])
def list_requested_meals(
    email: str = Query(..., description="Requester email"),
    engagement: EngagementService = Depends(get_engagement_service),
):
    return engagement.list_requests_for_user(email)


@router.patch("/requested-meals/{request_id}/cancel", response_model=CancelRequestResponse)
def cancel_request(
    request_id: str,
    engagement: EngagementService = Depends(get_engagement_service),
):
    """Cancel a pending request; a second cancel returns 404"""
    return engagement.cancel_meal_request(request_id)
