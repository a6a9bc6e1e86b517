"""
Tests for ReviewService.

Covers:
- Lenient rating parsing
- Newest-first listings per meal and per user
- Meal title enrichment of a user's reviews
- Edit and delete outcomes for known and unknown reviews
"""

import pytest

from test_fixtures import repos, gateway, services, seed_meal
from app.exceptions import NotFoundError, ServiceValidationError
from services.review_service import MISSING_MEAL_TITLE
from services.validation import parse_rating


@pytest.mark.parametrize(
    "raw,expected",
    [("4.5", 4.5), (3, 3.0), ("abc", 0.0), (None, 0.0), ("nan", 0.0), ("inf", 0.0)],
)
def test_parse_rating(raw, expected):
    assert parse_rating(raw) == expected


def test_add_review_with_unparsable_rating(repos, services):
    meal_id = seed_meal(repos)

    review_id = services.reviews.add_review(meal_id, "Rafi", "rafi@dorm.edu", "Too salty", "abc")

    review = repos.reviews.get_by_id(review_id)
    assert review.rating == 0
    assert review.comment == "Too salty"


def test_add_review_requires_meal_and_email(services):
    with pytest.raises(ServiceValidationError):
        services.reviews.add_review("", "Rafi", "rafi@dorm.edu", "ok", 4)
    with pytest.raises(ServiceValidationError):
        services.reviews.add_review("meal", "Rafi", None, "ok", 4)


def test_reviews_for_meal_newest_first(repos, services):
    meal_id = seed_meal(repos)
    other_meal = seed_meal(repos, title="Dal Puri")
    ids = [
        services.reviews.add_review(meal_id, "Rafi", "rafi@dorm.edu", f"visit {i}", 4)
        for i in range(3)
    ]
    services.reviews.add_review(other_meal, "Rafi", "rafi@dorm.edu", "elsewhere", 5)

    listed = services.reviews.list_reviews_for_meal(meal_id)

    assert [r.id for r in listed] == list(reversed(ids))


def test_reviews_for_user_carry_meal_title(repos, services):
    meal_id = seed_meal(repos, title="Morog Polao")
    services.reviews.add_review(meal_id, "Sadia", "sadia@dorm.edu", "Lovely", "4.5")
    services.reviews.add_review("665f1c2e9b1e8a3d4c5b6a7f", "Sadia", "sadia@dorm.edu", "Gone", 2)

    listed = services.reviews.list_reviews_for_user("sadia@dorm.edu")

    assert [r["mealTitle"] for r in listed] == [MISSING_MEAL_TITLE, "Morog Polao"]
    assert listed[1]["rating"] == 4.5
    assert "mealId" in listed[1]


def test_edit_review(repos, services):
    meal_id = seed_meal(repos)
    review_id = services.reviews.add_review(meal_id, "Tania", "tania@dorm.edu", "Meh", 2)

    result = services.reviews.edit_review(review_id, "Better today", "4")

    assert result == {"reviewId": review_id, "modified": True}
    review = repos.reviews.get_by_id(review_id)
    assert (review.comment, review.rating) == ("Better today", 4.0)


def test_edit_review_unchanged_reports_not_modified(repos, services):
    meal_id = seed_meal(repos)
    review_id = services.reviews.add_review(meal_id, "Tania", "tania@dorm.edu", "Same", 3)

    result = services.reviews.edit_review(review_id, "Same", 3)

    assert result["modified"] is False


def test_edit_unknown_review(services):
    with pytest.raises(NotFoundError):
        services.reviews.edit_review("665f1c2e9b1e8a3d4c5b6a7f", "text", 3)


def test_delete_review(repos, services):
    meal_id = seed_meal(repos)
    review_id = services.reviews.add_review(meal_id, "Uzma", "uzma@dorm.edu", "Gone soon", 1)

    assert services.reviews.delete_review(review_id) == {"reviewId": review_id, "deleted": True}
    assert repos.reviews.get_by_id(review_id) is None

    with pytest.raises(NotFoundError):
        services.reviews.delete_review(review_id)
