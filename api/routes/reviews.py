"""Review routes"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_review_service
from domain.schemas import (
    InsertedResponse,
    ReviewCreate,
    ReviewDeleteResponse,
    ReviewResponse,
    ReviewUpdate,
    ReviewUpdateResponse,
    UserReviewResponse,
)
from services import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", response_model=InsertedResponse, status_code=status.HTTP_201_CREATED)
def add_review(payload: ReviewCreate, reviews: ReviewService = Depends(get_review_service)):
    """Add a review; an unparsable rating is stored as 0"""
    review_id = reviews.add_review(
        payload.meal_id, payload.name, payload.email, payload.comment, payload.rating
    )
    return InsertedResponse(inserted_id=review_id)


@router.get("/meal/{meal_id}", response_model=List[ReviewResponse])
def list_meal_reviews(meal_id: str, reviews: ReviewService = Depends(get_review_service)):
    return reviews.list_reviews_for_meal(meal_id)


@router.get("/user", response_model=List[UserReviewResponse])
def list_user_reviews(
    email: str = Query(...), reviews: ReviewService = Depends(get_review_service)
):
    """A user's reviews with the reviewed meal's title ('N/A' if deleted)"""
    return reviews.list_reviews_for_user(email)


@router.patch("/{review_id}", response_model=ReviewUpdateResponse)
def edit_review(
    review_id: str,
    payload: ReviewUpdate,
    reviews: ReviewService = Depends(get_review_service),
):
    return reviews.edit_review(review_id, payload.comment, payload.rating)


@router.delete("/{review_id}", response_model=ReviewDeleteResponse)
def delete_review(review_id: str, reviews: ReviewService = Depends(get_review_service)):
    return reviews.delete_review(review_id)
